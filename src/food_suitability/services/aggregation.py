"""Risk aggregation combining marker interactions and component scores."""

from collections.abc import Mapping

from food_suitability.domain.food import FoodNutrients
from food_suitability.domain.model_config import ModelConfig
from food_suitability.domain.results import (
    ScoringMode,
    SuitabilityDetails,
    SuitabilityResult,
)
from food_suitability.services.impact import propagate_impacts
from food_suitability.services.normalization import (
    NormalizedSet,
    marker_confidence,
    normalize_all,
)
from food_suitability.services.weights import renormalize


def marker_risks(
    markers: NormalizedSet,
    impacts: Mapping[str, float],
    config: ModelConfig,
) -> tuple[float, dict[str, float]]:
    """Return the weighted marker risk and each marker's contribution.

    Each available marker contributes ``w * m * impact * (1 + gamma * m)``;
    the total is divided by the summed weight of available markers and
    clamped to [0, 1]. No available marker means no marker risk.
    """
    contributions: dict[str, float] = {}
    total_weight = 0.0
    for marker in markers.available:
        weight = config.marker_weights.get(marker, 0.0)
        level = markers.values[marker]
        impact = impacts.get(marker, 0.0)
        contributions[marker] = weight * level * impact * (1 + config.gamma * level)
        total_weight += weight
    if total_weight <= 0:
        return 0.0, contributions
    ratio = sum(contributions.values()) / total_weight
    return min(1.0, max(0.0, ratio)), contributions


def nutrition_score(
    component_scores: Mapping[str, float],
    weights: Mapping[str, float],
    nutrients: FoodNutrients,
    config: ModelConfig,
) -> float:
    """Weighted 0..1 score over measured components.

    Weights are renormalized over the components that were scored. Without
    any measured nutrient the configured neutral score is used.
    """
    if not nutrients.has_any_nutrient() or not component_scores:
        return config.neutral_score
    active = renormalize(weights, component_scores)
    score = sum(active[name] * component_scores[name] for name in active) / 100
    if is_nutritionally_empty(nutrients):
        score *= config.empty_food_penalty
    return min(1.0, max(0.0, score))


def is_nutritionally_empty(nutrients: FoodNutrients) -> bool:
    """Calories with measured zero protein and zero fiber."""
    return (
        nutrients.calories is not None
        and nutrients.calories > 0
        and nutrients.protein == 0
        and nutrients.fiber == 0
    )


def compute_suitability(  # noqa: PLR0913
    nutrients: FoodNutrients,
    marker_values: Mapping[str, float],
    config: ModelConfig,
    nutrition: float = 1.0,
    mode: ScoringMode = ScoringMode.PER_100G,
    serving_amount: float | None = None,
) -> SuitabilityResult:
    """Aggregate a per-100 nutrient bundle and markers into a 0..1 score.

    ``nutrition`` is the weighted component score; the default of 1.0
    reduces the result to the pure marker-interaction formula.
    """
    normalized_markers = normalize_all(
        marker_values, config.marker_bounds, config.markers
    )
    normalized_nutrients = normalize_all(nutrients.amounts(), config.nutrient_bounds)
    impacts = propagate_impacts(
        normalized_nutrients.values, config.coefficients, config.markers
    )
    risk, contributions = marker_risks(normalized_markers, impacts, config)
    base_risk = 1.0 - nutrition * (1.0 - risk)
    multiplier = (
        config.serving.multiplier(serving_amount)
        if mode is ScoringMode.PORTION_AWARE
        else 1.0
    )
    score = min(1.0, max(0.0, 1.0 - base_risk * multiplier))
    details = SuitabilityDetails(
        marker_risks=contributions,
        nutrient_impacts=impacts,
        missing_markers=normalized_markers.missing,
        missing_nutrients=normalized_nutrients.missing,
        available_markers_count=len(normalized_markers.available),
        total_markers_count=len(config.markers),
    )
    return SuitabilityResult(
        score=score,
        confidence=marker_confidence(
            len(normalized_markers.available), len(config.markers)
        ),
        details=details,
        marker_risk=risk,
        nutrition_score=nutrition,
        serving_multiplier=multiplier,
    )
