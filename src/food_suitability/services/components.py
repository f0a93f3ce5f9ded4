"""Per-component 0..100 sub-scores driven by threshold tables."""

from dataclasses import dataclass

from food_suitability.domain.diagnostics import Diagnostic
from food_suitability.domain.food import (
    FatType,
    FoodCategory,
    FoodContext,
    FoodNutrients,
    SugarType,
)
from food_suitability.domain.model_config import ModelConfig
from food_suitability.domain.profile import BmiCategory, HealthConditions
from food_suitability.services.processing import ProcessingTier

FIBER_SUGAR_CREDIT = 0.5
LIQUID_FIBER_LIMIT = 1.5
WHOLE_FRUIT_MIN_FIBER = 2.0
NATURAL_DAIRY_SUGAR_LIMIT = 12.0
NATURAL_DAIRY_SUGAR_SCORE = 90.0
SWEETENER_SCORE_DIABETIC = 80.0
SWEETENER_SCORE = 30.0
HEALTHY_FAT_SATURATED_LIMIT = 2.0
NATURAL_TRANS_FAT_LIMIT = 0.5
NATURAL_TRANS_FAT_SCORE = 90.0

_HARMFUL = ("sugar", "saturated_fat", "sodium", "calories")
_NATURAL_TRANS_FAT_CATEGORIES = {FoodCategory.DAIRY, FoodCategory.PROTEIN}


@dataclass(frozen=True)
class ComponentScores:
    """Scores for components whose inputs were measured."""

    scores: dict[str, float]
    diagnostics: tuple[Diagnostic, ...] = ()


def score_components(  # noqa: PLR0912
    nutrients: FoodNutrients,
    context: FoodContext,
    tier: ProcessingTier,
    conditions: HealthConditions,
    config: ModelConfig,
) -> ComponentScores:
    """Score every component with a measured input."""
    scores: dict[str, float] = {}
    diagnostics: list[Diagnostic] = []

    if nutrients.sugar is not None:
        score, extra = _sugar_score(nutrients, context, tier, conditions, config)
        scores["sugar"] = score
        diagnostics.extend(extra)
    if nutrients.saturated_fat is not None:
        scores["saturated_fat"] = _saturated_fat_score(
            nutrients.saturated_fat, context, conditions, config
        )
    if nutrients.trans_fat is not None:
        score, extra = _trans_fat_score(
            nutrients.trans_fat, context, conditions, config
        )
        scores["trans_fat"] = score
        diagnostics.extend(extra)
    if nutrients.sodium is not None:
        table = (
            "sodium_hypertensive" if conditions.high_blood_pressure else "sodium"
        )
        scores["sodium"] = config.table(table).evaluate(nutrients.sodium)
    if nutrients.calories is not None:
        scores["calories"] = config.table(_calorie_table(tier, conditions)).evaluate(
            nutrients.calories
        )
    has_energy = (nutrients.calories or 0.0) > 0
    if nutrients.protein is not None:
        scores["protein"] = config.table(_protein_table(conditions)).evaluate(
            nutrients.protein
        )
        if nutrients.protein == 0 and has_energy:
            diagnostics.append(Diagnostic.recommendation("no_protein"))
    if nutrients.fiber is not None:
        scores["fiber"] = config.table(_fiber_table(conditions)).evaluate(
            nutrients.fiber
        )
        if nutrients.fiber == 0 and has_energy:
            diagnostics.append(Diagnostic.recommendation("no_fiber"))
    if nutrients.has_any_nutrient():
        scores["micronutrient"] = micronutrient_score(context, tier, config)

    for component in _HARMFUL:
        if (
            component == "calories"
            and conditions.bmi_category is BmiCategory.UNDERWEIGHT
        ):
            continue
        score = scores.get(component)
        if score is not None and score < config.warning_threshold:
            diagnostics.append(
                Diagnostic.warning(f"high_{component}", score=round(score))
            )
    return ComponentScores(scores, tuple(diagnostics))


def micronutrient_score(
    context: FoodContext, tier: ProcessingTier, config: ModelConfig
) -> float:
    """Estimate micronutrient density from tier and category."""
    policy = config.micronutrient
    score = policy.tier_base[int(tier) - 1]
    if context.category is FoodCategory.VEGETABLE:
        score += policy.vegetable_bonus
    elif context.category is FoodCategory.FRUIT:
        score += policy.fruit_bonus
    elif (
        context.category is FoodCategory.PROTEIN
        and tier <= ProcessingTier.CULINARY_INGREDIENT
    ):
        score += policy.lean_protein_bonus
    if context.has_fortification and tier >= ProcessingTier.PROCESSED:
        score += policy.fortification_bonus
    return min(policy.cap, score)


def context_diagnostics(context: FoodContext) -> tuple[Diagnostic, ...]:
    """Diagnostics that depend only on the food context."""
    diagnostics: list[Diagnostic] = []
    if context.is_fried:
        diagnostics.append(Diagnostic.warning("fried"))
    if context.has_preservatives:
        diagnostics.append(Diagnostic.warning("preservatives"))
    if context.has_artificial_sweeteners:
        diagnostics.append(Diagnostic.warning("artificial_sweeteners"))
    if context.has_whole_grains:
        diagnostics.append(Diagnostic.insight("whole_grains"))
    return tuple(diagnostics)


def _sugar_score(
    nutrients: FoodNutrients,
    context: FoodContext,
    tier: ProcessingTier,
    conditions: HealthConditions,
    config: ModelConfig,
) -> tuple[float, tuple[Diagnostic, ...]]:
    """Score sugar, crediting fiber and recognising natural sugars."""
    sugar = nutrients.sugar or 0.0
    fiber = nutrients.fiber or 0.0
    diabetic = conditions.diabetes
    if context.has_artificial_sweeteners:
        return (SWEETENER_SCORE_DIABETIC if diabetic else SWEETENER_SCORE), ()
    if sugar <= 0:
        return 100.0, ()
    if context.category is FoodCategory.BEVERAGE and fiber < LIQUID_FIBER_LIMIT:
        table = "sugar_liquid_diabetic" if diabetic else "sugar_liquid"
        return config.table(table).evaluate(sugar), (
            Diagnostic.warning("liquid_sugar"),
        )
    effective = max(0.0, sugar - FIBER_SUGAR_CREDIT * fiber)
    if (
        context.category is FoodCategory.FRUIT
        and tier is ProcessingTier.WHOLE
        and fiber >= WHOLE_FRUIT_MIN_FIBER
    ):
        return 100.0, ()
    if (
        context.category is FoodCategory.DAIRY
        and tier <= ProcessingTier.CULINARY_INGREDIENT
        and context.sugar_type not in {SugarType.ADDED, SugarType.MIXED}
        and effective <= NATURAL_DAIRY_SUGAR_LIMIT
    ):
        return NATURAL_DAIRY_SUGAR_SCORE, ()
    if tier is ProcessingTier.ULTRA_PROCESSED:
        table = "sugar_ultra_diabetic" if diabetic else "sugar_ultra"
    else:
        table = "sugar_diabetic" if diabetic else "sugar"
    return config.table(table).evaluate(effective), ()


def _saturated_fat_score(
    saturated_fat: float,
    context: FoodContext,
    conditions: HealthConditions,
    config: ModelConfig,
) -> float:
    if (
        context.fat_type is FatType.HEALTHY_UNSATURATED
        and saturated_fat < HEALTHY_FAT_SATURATED_LIMIT
    ):
        return 100.0
    table = (
        "saturated_fat_high_cholesterol"
        if conditions.high_cholesterol
        else "saturated_fat"
    )
    return config.table(table).evaluate(saturated_fat)


def _trans_fat_score(
    trans_fat: float,
    context: FoodContext,
    conditions: HealthConditions,
    config: ModelConfig,
) -> tuple[float, tuple[Diagnostic, ...]]:
    if trans_fat <= 0:
        return config.table("trans_fat").evaluate(0.0), ()
    if (
        context.category in _NATURAL_TRANS_FAT_CATEGORIES
        and trans_fat < NATURAL_TRANS_FAT_LIMIT
    ):
        return NATURAL_TRANS_FAT_SCORE, ()
    score = config.table("trans_fat").evaluate(trans_fat)
    diagnostics = [Diagnostic.warning("high_trans_fat", score=round(score))]
    if conditions.high_cholesterol:
        diagnostics.append(
            Diagnostic.warning("trans_fat_with_high_ldl", trans_fat=trans_fat)
        )
    return score, tuple(diagnostics)


def _calorie_table(tier: ProcessingTier, conditions: HealthConditions) -> str:
    category = conditions.bmi_category
    if category is BmiCategory.OBESE:
        return "calories_obese"
    if category is BmiCategory.OVERWEIGHT:
        return "calories_overweight"
    if category is BmiCategory.UNDERWEIGHT:
        return "calories_underweight"
    if tier <= ProcessingTier.CULINARY_INGREDIENT:
        return "calories_whole"
    return "calories"


def _protein_table(conditions: HealthConditions) -> str:
    if conditions.diabetes or conditions.bmi_category is BmiCategory.UNDERWEIGHT:
        return "protein_priority"
    if conditions.weight_management:
        return "protein_weight_management"
    return "protein"


def _fiber_table(conditions: HealthConditions) -> str:
    if conditions.diabetes or conditions.high_cholesterol:
        return "fiber_priority"
    return "fiber"
