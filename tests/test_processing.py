"""Tests for processing-tier classification."""

from food_suitability.domain.food import FoodCategory, FoodContext, ProcessingLevel
from food_suitability.services.processing import (
    ProcessingTier,
    classify_food,
    classify_processing,
)


def test_processing_levels_map_to_tiers() -> None:
    assert classify_processing(ProcessingLevel.WHOLE) is ProcessingTier.WHOLE
    assert (
        classify_processing(ProcessingLevel.MINIMALLY_PROCESSED)
        is ProcessingTier.CULINARY_INGREDIENT
    )
    assert classify_processing(ProcessingLevel.PROCESSED) is ProcessingTier.PROCESSED
    assert (
        classify_processing(ProcessingLevel.ULTRA_PROCESSED)
        is ProcessingTier.ULTRA_PROCESSED
    )


def test_unknown_level_is_processed() -> None:
    assert classify_processing(None) is ProcessingTier.PROCESSED


def test_culinary_ingredient_serving_suggestion() -> None:
    oil = classify_food(
        FoodContext(
            category=FoodCategory.OTHER,
            processing_level=ProcessingLevel.MINIMALLY_PROCESSED,
        )
    )
    cheese = classify_food(
        FoodContext(
            category=FoodCategory.DAIRY,
            processing_level=ProcessingLevel.MINIMALLY_PROCESSED,
        )
    )

    assert oil.is_culinary_ingredient
    assert oil.suggested_serving_size == "1 tbsp (15g)"
    assert cheese.suggested_serving_size == "1 portion"
    assert [item.code for item in oil.diagnostics] == ["culinary_ingredient"]
    assert "1 tbsp (15g)" in oil.diagnostics[0].message


def test_other_tiers_have_no_serving_suggestion() -> None:
    result = classify_food(FoodContext(processing_level=ProcessingLevel.WHOLE))

    assert not result.is_culinary_ingredient
    assert result.suggested_serving_size is None
    assert result.diagnostics == ()
