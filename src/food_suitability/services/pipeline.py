"""Linear scoring pipeline from raw inputs to a HealthScore."""

from food_suitability.domain.diagnostics import Diagnostic, DiagnosticKind, of_kind
from food_suitability.domain.food import FoodContext, FoodNutrients
from food_suitability.domain.model_config import ModelConfig
from food_suitability.domain.profile import HealthProfile
from food_suitability.domain.results import (
    HealthScore,
    ScoringMode,
    SuitabilityDetails,
)
from food_suitability.services.adjustments import apply_adjustments
from food_suitability.services.aggregation import (
    compute_suitability,
    is_nutritionally_empty,
    nutrition_score,
)
from food_suitability.services.components import context_diagnostics, score_components
from food_suitability.services.conditions import derive_conditions
from food_suitability.services.processing import classify_food
from food_suitability.services.serving import normalize_serving, parse_serving_size
from food_suitability.services.weights import component_weights


def score_food(
    nutrients: FoodNutrients,
    context: FoodContext,
    profile: HealthProfile | None,
    config: ModelConfig,
    mode: ScoringMode = ScoringMode.PORTION_AWARE,
) -> HealthScore:
    """Score a food for a profile; missing data lowers confidence, never raises."""
    resolved_profile = profile or HealthProfile()
    serving = parse_serving_size(nutrients.serving_size, nutrients.serving_unit)
    per_100 = normalize_serving(nutrients)

    classification = classify_food(context)
    tier = classification.tier
    conditions, profile_diagnostics = derive_conditions(resolved_profile)

    components = score_components(per_100, context, tier, conditions, config)
    weights = component_weights(tier, context.category, conditions, config)
    nutrition = nutrition_score(components.scores, weights, per_100, config)

    result = compute_suitability(
        per_100,
        resolved_profile.markers.values(),
        config,
        nutrition=nutrition,
        mode=mode,
        serving_amount=serving.amount if serving is not None else None,
    )
    base_score = result.score * 100
    final_score, adjustment_diagnostics = apply_adjustments(
        base_score, tier, context, per_100, config.penalties
    )

    diagnostics = (
        profile_diagnostics
        + classification.diagnostics
        + context_diagnostics(context)
        + components.diagnostics
        + _empty_food_diagnostics(per_100)
        + adjustment_diagnostics
        + _data_diagnostics(per_100, result.confidence, result.details, config)
    )
    score = round(final_score, 1)
    return HealthScore(
        score=score,
        category=config.category_for(score),
        confidence=result.confidence,
        model_version=config.version,
        scoring_mode=mode,
        processing_tier=int(tier),
        base_score=round(base_score, 1),
        component_scores={
            name: round(value, 1) for name, value in components.scores.items()
        },
        weights=weights,
        warnings=of_kind(diagnostics, DiagnosticKind.WARNING),
        recommendations=of_kind(diagnostics, DiagnosticKind.RECOMMENDATION),
        insights=of_kind(diagnostics, DiagnosticKind.INSIGHT),
        details=result.details,
        is_culinary_ingredient=classification.is_culinary_ingredient,
        suggested_serving_size=classification.suggested_serving_size,
        marker_risk=round(result.marker_risk, 4),
        nutrition_score=round(result.nutrition_score, 4),
        serving_multiplier=round(result.serving_multiplier, 4),
    )


def _empty_food_diagnostics(nutrients: FoodNutrients) -> tuple[Diagnostic, ...]:
    if is_nutritionally_empty(nutrients):
        return (Diagnostic.warning("empty_calories"),)
    return ()


def _data_diagnostics(
    nutrients: FoodNutrients,
    confidence: float,
    details: SuitabilityDetails,
    config: ModelConfig,
) -> tuple[Diagnostic, ...]:
    """Report missing nutrient data and low marker coverage."""
    diagnostics: list[Diagnostic] = []
    if not nutrients.has_any_nutrient():
        diagnostics.append(Diagnostic.warning("insufficient_data"))
    if confidence < config.low_confidence_threshold:
        diagnostics.append(
            Diagnostic.warning(
                "low_confidence",
                available=details.available_markers_count,
                total=details.total_markers_count,
            )
        )
    return tuple(diagnostics)
