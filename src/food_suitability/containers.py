"""Dependency container wiring for the application."""

from dataclasses import dataclass

from food_suitability.adapters.model_config_file import register_model_files
from food_suitability.config import Settings, parse_model_files
from food_suitability.services.model_registry import ModelRegistry
from food_suitability.services.scoring import ScoringService, parse_scoring_mode


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    registry: ModelRegistry
    scoring_service: ScoringService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    registry = register_model_files(
        ModelRegistry.default(),
        parse_model_files(resolved_settings.scoring_model_files),
        default_base=resolved_settings.scoring_model_base,
    )
    scoring_service = ScoringService(
        registry=registry,
        default_version=resolved_settings.scoring_model,
        default_mode=parse_scoring_mode(resolved_settings.scoring_mode),
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        registry=registry,
        scoring_service=scoring_service,
    )
