"""Processing-tier bonuses, ceilings and combination penalties."""

from food_suitability.domain.diagnostics import Diagnostic
from food_suitability.domain.food import (
    FoodCategory,
    FoodContext,
    FoodNutrients,
    QualityRating,
)
from food_suitability.domain.model_config import PenaltyPolicy
from food_suitability.services.processing import ProcessingTier

_PRODUCE = {FoodCategory.FRUIT, FoodCategory.VEGETABLE}


def apply_adjustments(
    score: float,
    tier: ProcessingTier,
    context: FoodContext,
    nutrients: FoodNutrients,
    policy: PenaltyPolicy,
) -> tuple[float, tuple[Diagnostic, ...]]:
    """Adjust a 0..100 score for its processing tier and clamp it."""
    if tier is ProcessingTier.WHOLE:
        adjusted, diagnostics = _whole_food_bonus(score, context, policy)
    elif tier is ProcessingTier.PROCESSED:
        adjusted, diagnostics = score, ()
        if score > policy.processed_cap:
            adjusted = policy.processed_cap
            diagnostics = (
                Diagnostic.insight("processed_cap", cap=policy.processed_cap),
            )
    elif tier is ProcessingTier.ULTRA_PROCESSED:
        adjusted, diagnostics = _ultra_processed_penalties(
            score, context, nutrients, policy
        )
    else:
        adjusted, diagnostics = score, ()
    return min(100.0, max(0.0, adjusted)), diagnostics


def category_cap(
    context: FoodContext, nutrients: FoodNutrients, policy: PenaltyPolicy
) -> float:
    """Ceiling for an ultra-processed food of the given category."""
    sugar = nutrients.sugar or 0.0
    if context.category is FoodCategory.BEVERAGE:
        if context.has_artificial_sweeteners:
            return policy.sweetened_beverage_cap
        return policy.beverage_sugar_caps.evaluate(sugar)
    if context.category is FoodCategory.GRAIN:
        return policy.grain_sugar_caps.evaluate(sugar)
    return policy.category_caps.get(context.category.value, policy.default_ultra_cap)


def _whole_food_bonus(
    score: float, context: FoodContext, policy: PenaltyPolicy
) -> tuple[float, tuple[Diagnostic, ...]]:
    """Reward whole foods, capping the result by quality."""
    quality = context.overall_quality
    if quality is QualityRating.EXCELLENT:
        factor = (
            policy.excellent_produce_factor
            if context.category in _PRODUCE
            else policy.excellent_factor
        )
        boosted = min(policy.excellent_cap, score * factor)
    elif quality is QualityRating.GOOD:
        boosted = min(policy.good_cap, score + policy.good_bonus)
    else:
        return score, ()
    return boosted, (Diagnostic.insight("whole_food_bonus"),)


def _ultra_processed_penalties(
    score: float,
    context: FoodContext,
    nutrients: FoodNutrients,
    policy: PenaltyPolicy,
) -> tuple[float, tuple[Diagnostic, ...]]:
    """Quality multiplier, then category ceiling, then combination penalties."""
    diagnostics: list[Diagnostic] = []
    quality = context.overall_quality
    multiplier = (
        policy.quality_multipliers.get(quality.value) if quality is not None else None
    )
    if multiplier is not None:
        score *= multiplier
        diagnostics.append(Diagnostic.warning("quality_penalty", quality=quality.value))

    cap = category_cap(context, nutrients, policy)
    diagnostics.append(Diagnostic.warning("ultra_processed", cap=cap))
    score = min(score, cap)

    sugar = nutrients.sugar or 0.0
    saturated_fat = nutrients.saturated_fat or 0.0
    if sugar > policy.toxic_sugar and saturated_fat > policy.toxic_saturated_fat:
        score *= policy.toxic_factor
        diagnostics.append(Diagnostic.warning("toxic_combination"))
    if (nutrients.sodium or 0.0) > policy.sodium_bomb:
        score *= policy.sodium_bomb_factor
        diagnostics.append(Diagnostic.warning("sodium_bomb", sodium=policy.sodium_bomb))
    return score, tuple(diagnostics)
