"""Processing-level classification into NOVA-like tiers."""

from dataclasses import dataclass
from enum import IntEnum

from food_suitability.domain.diagnostics import Diagnostic
from food_suitability.domain.food import FoodCategory, FoodContext, ProcessingLevel


class ProcessingTier(IntEnum):
    WHOLE = 1
    CULINARY_INGREDIENT = 2
    PROCESSED = 3
    ULTRA_PROCESSED = 4


_TIERS = {
    ProcessingLevel.WHOLE: ProcessingTier.WHOLE,
    ProcessingLevel.MINIMALLY_PROCESSED: ProcessingTier.CULINARY_INGREDIENT,
    ProcessingLevel.PROCESSED: ProcessingTier.PROCESSED,
    ProcessingLevel.ULTRA_PROCESSED: ProcessingTier.ULTRA_PROCESSED,
}


@dataclass(frozen=True)
class ProcessingClassification:
    """Tier plus culinary-ingredient handling for a food."""

    tier: ProcessingTier
    is_culinary_ingredient: bool
    suggested_serving_size: str | None
    diagnostics: tuple[Diagnostic, ...] = ()


def classify_processing(level: ProcessingLevel | None) -> ProcessingTier:
    """Map a processing level to its tier; unknown levels count as processed."""
    if level is None:
        return ProcessingTier.PROCESSED
    return _TIERS[level]


def classify_food(context: FoodContext) -> ProcessingClassification:
    """Classify a food and describe culinary-ingredient serving guidance."""
    tier = classify_processing(context.processing_level)
    if tier is not ProcessingTier.CULINARY_INGREDIENT:
        return ProcessingClassification(tier, False, None)
    serving = (
        "1 tbsp (15g)" if context.category is FoodCategory.OTHER else "1 portion"
    )
    return ProcessingClassification(
        tier,
        True,
        serving,
        (Diagnostic.recommendation("culinary_ingredient", serving=serving),),
    )
