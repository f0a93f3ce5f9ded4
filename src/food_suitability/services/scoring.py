"""Scoring service selecting a model version and running the pipeline."""

import logging
from dataclasses import dataclass

from food_suitability.domain.food import FoodContext, FoodNutrients
from food_suitability.domain.profile import HealthProfile
from food_suitability.domain.results import HealthScore, ScoringMode
from food_suitability.services.model_registry import ModelRegistry
from food_suitability.services.pipeline import score_food

_logger = logging.getLogger(__name__)


@dataclass
class ScoringService:
    """Service for scoring foods against health profiles."""

    registry: ModelRegistry
    default_version: str
    default_mode: ScoringMode = ScoringMode.PORTION_AWARE
    debug: bool = False

    def __post_init__(self) -> None:
        self.registry.get(self.default_version)

    def score(
        self,
        nutrients: FoodNutrients,
        context: FoodContext,
        profile: HealthProfile | None = None,
        model_version: str | None = None,
        mode: ScoringMode | None = None,
    ) -> HealthScore:
        """Score a food; raises ValueError for an unknown model version."""
        config = self.registry.get(model_version or self.default_version)
        resolved_mode = mode or self.default_mode
        result = score_food(nutrients, context, profile, config, resolved_mode)
        if self.debug:
            _logger.info(
                "Scored food=%s model=%s mode=%s score=%s base=%s tier=%s",
                context.food_name or "unknown",
                config.version,
                resolved_mode.value,
                result.score,
                result.base_score,
                result.processing_tier,
            )
        if result.confidence < config.low_confidence_threshold:
            _logger.warning(
                "Low confidence score for %s: %s/%s markers available",
                context.food_name or "unknown",
                result.details.available_markers_count,
                result.details.total_markers_count,
            )
        return result

    def available_models(self) -> list[str]:
        return self.registry.versions()


def parse_scoring_mode(raw: str | None) -> ScoringMode:
    """Parse a scoring mode name, defaulting to portion-aware."""
    if raw is None or not raw.strip():
        return ScoringMode.PORTION_AWARE
    cleaned = raw.strip().lower().replace("_", "-")
    if cleaned in {"per-100", "per100g"}:
        cleaned = ScoringMode.PER_100G.value
    try:
        return ScoringMode(cleaned)
    except ValueError:
        raise ValueError(f"Unknown scoring mode: {raw}") from None
