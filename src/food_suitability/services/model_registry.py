"""Registry of named, versioned scoring models."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from food_suitability.domain.model_config import ModelConfig
from food_suitability.services.default_models import builtin_models


@dataclass(frozen=True)
class ModelRegistry:
    """Immutable lookup of model configurations by version."""

    models: Mapping[str, ModelConfig] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "models", MappingProxyType(dict(self.models)))

    @classmethod
    def from_configs(cls, configs: Iterable[ModelConfig]) -> "ModelRegistry":
        return cls({config.version: config for config in configs})

    @classmethod
    def default(cls) -> "ModelRegistry":
        """Registry holding the built-in models."""
        return cls.from_configs(builtin_models())

    def get(self, version: str) -> ModelConfig:
        """Return the model for a version or raise ValueError."""
        config = self.models.get(version)
        if config is None:
            known = ", ".join(sorted(self.models)) or "none"
            raise ValueError(f"Unknown model version: {version} (known: {known})")
        return config

    def register(self, config: ModelConfig) -> "ModelRegistry":
        """Return a new registry that also holds config."""
        return ModelRegistry({**self.models, config.version: config})

    def versions(self) -> list[str]:
        return sorted(self.models)

    def __contains__(self, version: object) -> bool:
        return version in self.models
