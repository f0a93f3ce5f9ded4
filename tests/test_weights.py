"""Tests for adaptive component weights."""

from dataclasses import replace

import pytest

from food_suitability.domain.food import FoodCategory
from food_suitability.domain.model_config import COMPONENTS
from food_suitability.domain.profile import BmiCategory, HealthConditions
from food_suitability.services.processing import ProcessingTier
from food_suitability.services.weights import (
    active_condition_keys,
    component_weights,
    renormalize,
    tier_weight_key,
)


def test_weights_always_sum_to_one(nova_config) -> None:
    profiles = [
        HealthConditions(),
        HealthConditions(diabetes=True, high_cholesterol=True),
        HealthConditions(high_blood_pressure=True, bmi_category=BmiCategory.OBESE),
        HealthConditions(bmi_category=BmiCategory.UNDERWEIGHT),
    ]
    for tier in ProcessingTier:
        for category in FoodCategory:
            for conditions in profiles:
                weights = component_weights(tier, category, conditions, nova_config)
                assert set(weights) == set(COMPONENTS)
                assert sum(weights.values()) == pytest.approx(1.0)


def test_whole_produce_ignores_sugar_and_calories(nova_config) -> None:
    weights = component_weights(
        ProcessingTier.WHOLE, FoodCategory.FRUIT, HealthConditions(), nova_config
    )

    assert weights["sugar"] == 0.0
    assert weights["calories"] == 0.0
    assert weights["fiber"] + weights["micronutrient"] > 0.9


def test_ultra_processed_weights_harmful_nutrients(nova_config) -> None:
    weights = component_weights(
        ProcessingTier.ULTRA_PROCESSED,
        FoodCategory.SNACK,
        HealthConditions(),
        nova_config,
    )

    assert weights["sugar"] > weights["protein"]
    assert weights["saturated_fat"] > weights["fiber"]
    assert weights["micronutrient"] == 0.0


def test_conditions_shift_weight_to_their_component(nova_config) -> None:
    baseline = component_weights(
        ProcessingTier.PROCESSED, FoodCategory.SNACK, HealthConditions(), nova_config
    )
    diabetic = component_weights(
        ProcessingTier.PROCESSED,
        FoodCategory.SNACK,
        HealthConditions(diabetes=True),
        nova_config,
    )
    hypertensive = component_weights(
        ProcessingTier.PROCESSED,
        FoodCategory.SNACK,
        HealthConditions(high_blood_pressure=True),
        nova_config,
    )

    assert diabetic["sugar"] > baseline["sugar"]
    assert diabetic["sodium"] < baseline["sodium"]
    assert hypertensive["sodium"] > baseline["sodium"]


def test_missing_tier_table_falls_back_to_equal_weights(nova_config) -> None:
    config = replace(nova_config, tier_weights={})

    weights = component_weights(
        ProcessingTier.PROCESSED, FoodCategory.OTHER, HealthConditions(), config
    )

    assert weights == {
        component: pytest.approx(1 / len(COMPONENTS)) for component in COMPONENTS
    }


def test_tier_weight_keys() -> None:
    assert tier_weight_key(ProcessingTier.WHOLE, FoodCategory.VEGETABLE) == "1:produce"
    assert tier_weight_key(ProcessingTier.WHOLE, FoodCategory.DAIRY) == "1:grain-dairy"
    assert tier_weight_key(ProcessingTier.WHOLE, FoodCategory.SNACK) == "1"
    assert tier_weight_key(ProcessingTier.PROCESSED, FoodCategory.FRUIT) == "3"


def test_active_condition_keys() -> None:
    conditions = HealthConditions(
        diabetes=True, high_blood_pressure=True, bmi_category=BmiCategory.OVERWEIGHT
    )

    assert active_condition_keys(conditions) == (
        "diabetes",
        "high_blood_pressure",
        "overweight",
    )
    normal = HealthConditions(bmi_category=BmiCategory.NORMAL)
    assert active_condition_keys(normal) == ()


def test_renormalize() -> None:
    assert renormalize({"a": 1.0, "b": 3.0, "c": 4.0}, ["a", "b"]) == {
        "a": pytest.approx(0.25),
        "b": pytest.approx(0.75),
    }
    assert renormalize({"a": 0.0, "b": 0.0}, ["a", "b"]) == {"a": 0.5, "b": 0.5}
    assert renormalize({"a": 1.0}, []) == {}
