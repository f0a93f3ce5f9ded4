"""Tests for tier bonuses, ceilings and combination penalties."""

import pytest

from food_suitability.domain.food import (
    FoodCategory,
    FoodContext,
    FoodNutrients,
    QualityRating,
)
from food_suitability.domain.model_config import PenaltyPolicy
from food_suitability.services.adjustments import apply_adjustments, category_cap
from food_suitability.services.processing import ProcessingTier

POLICY = PenaltyPolicy()


def _ultra(score: float, context: FoodContext, nutrients: FoodNutrients | None = None):
    return apply_adjustments(
        score,
        ProcessingTier.ULTRA_PROCESSED,
        context,
        nutrients or FoodNutrients(),
        POLICY,
    )


def test_whole_food_bonuses() -> None:
    produce = FoodContext(
        category=FoodCategory.VEGETABLE, overall_quality=QualityRating.EXCELLENT
    )
    fish = FoodContext(
        category=FoodCategory.PROTEIN, overall_quality=QualityRating.EXCELLENT
    )
    good = FoodContext(overall_quality=QualityRating.GOOD)

    def whole(score: float, context: FoodContext) -> float:
        adjusted, _ = apply_adjustments(
            score, ProcessingTier.WHOLE, context, FoodNutrients(), POLICY
        )
        return adjusted

    assert whole(80, produce) == pytest.approx(89.6)
    assert whole(90, fish) == 95
    assert whole(98, fish) == 95
    assert whole(95, good) == 90
    assert whole(50, good) == 53
    assert whole(89, good) == 90
    assert whole(70, FoodContext()) == 70


def test_culinary_ingredients_are_unchanged() -> None:
    score, diagnostics = apply_adjustments(
        72.5,
        ProcessingTier.CULINARY_INGREDIENT,
        FoodContext(overall_quality=QualityRating.VERY_POOR),
        FoodNutrients(),
        POLICY,
    )

    assert score == 72.5
    assert diagnostics == ()


def test_processed_ceiling() -> None:
    capped, diagnostics = apply_adjustments(
        75, ProcessingTier.PROCESSED, FoodContext(), FoodNutrients(), POLICY
    )
    below, untouched = apply_adjustments(
        45, ProcessingTier.PROCESSED, FoodContext(), FoodNutrients(), POLICY
    )

    assert capped == 60
    assert [item.code for item in diagnostics] == ["processed_cap"]
    assert below == 45
    assert untouched == ()


@pytest.mark.parametrize(
    ("category", "sugar", "sweetened", "expected"),
    [
        (FoodCategory.SNACK, 0, False, 10),
        (FoodCategory.DESSERT, 0, False, 25),
        (FoodCategory.FAST_FOOD, 0, False, 15),
        (FoodCategory.PROCESSED, 0, False, 15),
        (FoodCategory.BEVERAGE, 10, False, 15),
        (FoodCategory.BEVERAGE, 5, False, 35),
        (FoodCategory.BEVERAGE, 0, True, 30),
        (FoodCategory.GRAIN, 10, False, 40),
        (FoodCategory.GRAIN, 20, False, 30),
        (FoodCategory.GRAIN, 30, False, 20),
        (FoodCategory.DAIRY, 0, False, 30),
    ],
)
def test_category_caps(
    category: FoodCategory, sugar: float, sweetened: bool, expected: float
) -> None:
    context = FoodContext(category=category, has_artificial_sweeteners=sweetened)
    nutrients = FoodNutrients(sugar=sugar)

    assert category_cap(context, nutrients, POLICY) == expected
    score, _ = _ultra(90, context, nutrients)
    assert score == expected


def test_quality_multiplier_applies_before_cap() -> None:
    context = FoodContext(
        category=FoodCategory.OTHER, overall_quality=QualityRating.VERY_POOR
    )

    score, diagnostics = _ultra(40, context)

    assert score == pytest.approx(24)
    assert [item.code for item in diagnostics] == ["quality_penalty", "ultra_processed"]


def test_combination_penalties_compound() -> None:
    context = FoodContext(category=FoodCategory.OTHER)
    toxic = FoodNutrients(sugar=35, saturated_fat=6)
    salty = FoodNutrients(sugar=35, saturated_fat=6, sodium=1600)

    toxic_score, toxic_diagnostics = _ultra(50, context, toxic)
    salty_score, salty_diagnostics = _ultra(50, context, salty)

    assert toxic_score == pytest.approx(21)
    assert salty_score == pytest.approx(14.7)
    assert [item.code for item in salty_diagnostics] == [
        "ultra_processed",
        "toxic_combination",
        "sodium_bomb",
    ]
    assert "sodium_bomb" not in [item.code for item in toxic_diagnostics]


def test_scores_are_clamped() -> None:
    high, _ = apply_adjustments(
        140, ProcessingTier.CULINARY_INGREDIENT, FoodContext(), FoodNutrients(), POLICY
    )
    low, _ = apply_adjustments(
        -5, ProcessingTier.CULINARY_INGREDIENT, FoodContext(), FoodNutrients(), POLICY
    )

    assert high == 100
    assert low == 0
