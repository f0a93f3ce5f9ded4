"""Adaptive component weights by processing tier and health conditions."""

from collections.abc import Iterable, Mapping

from food_suitability.domain.food import FoodCategory
from food_suitability.domain.model_config import COMPONENTS, ModelConfig
from food_suitability.domain.profile import BmiCategory, HealthConditions
from food_suitability.services.processing import ProcessingTier

_TIER_ONE_GROUPS = {
    FoodCategory.FRUIT: "produce",
    FoodCategory.VEGETABLE: "produce",
    FoodCategory.PROTEIN: "protein",
    FoodCategory.GRAIN: "grain-dairy",
    FoodCategory.DAIRY: "grain-dairy",
}


def tier_weight_key(tier: ProcessingTier, category: FoodCategory) -> str:
    """Return the tier weight table key for a tier and category."""
    group = _TIER_ONE_GROUPS.get(category)
    if tier is ProcessingTier.WHOLE and group is not None:
        return f"{int(tier)}:{group}"
    return str(int(tier))


def active_condition_keys(conditions: HealthConditions) -> tuple[str, ...]:
    """Condition multiplier keys that apply, in a fixed order."""
    keys: list[str] = []
    if conditions.diabetes:
        keys.append("diabetes")
    if conditions.high_cholesterol:
        keys.append("high_cholesterol")
    if conditions.high_blood_pressure:
        keys.append("high_blood_pressure")
    category = conditions.bmi_category
    if category is not None and category is not BmiCategory.NORMAL:
        keys.append(category.value)
    return tuple(keys)


def component_weights(
    tier: ProcessingTier,
    category: FoodCategory,
    conditions: HealthConditions,
    config: ModelConfig,
) -> dict[str, float]:
    """Return per-component weights summing to 1."""
    base = config.tier_weights.get(tier_weight_key(tier, category))
    if base is None:
        base = config.tier_weights.get(str(int(tier)))
    weights = {
        component: (base.get(component, 0.0) if base is not None else 1.0)
        for component in COMPONENTS
    }
    for key in active_condition_keys(conditions):
        for component, multiplier in config.condition_multipliers.get(key, {}).items():
            if component in weights:
                weights[component] *= multiplier
    return renormalize(weights, COMPONENTS)


def renormalize(weights: Mapping[str, float], keys: Iterable[str]) -> dict[str, float]:
    """Rescale the selected weights to sum to 1; all-zero becomes uniform."""
    selected = {key: max(0.0, weights.get(key, 0.0)) for key in keys}
    if not selected:
        return {}
    total = sum(selected.values())
    if total <= 0:
        share = 1.0 / len(selected)
        return {key: share for key in selected}
    return {key: value / total for key, value in selected.items()}
