"""Shared test fixtures."""

import pytest

from food_suitability.config import Settings
from food_suitability.containers import AppContainer, build_container
from food_suitability.domain.food import (
    CookingMethod,
    FoodCategory,
    FoodContext,
    FoodNutrients,
    ProcessingLevel,
    QualityRating,
    SugarType,
)
from food_suitability.domain.model_config import ModelConfig
from food_suitability.domain.profile import HealthMarkers, HealthProfile
from food_suitability.services.default_models import marker_v1, nova_v2
from food_suitability.services.model_registry import ModelRegistry


def spinach() -> tuple[FoodNutrients, FoodContext]:
    """Raw spinach per 100 g."""
    return (
        FoodNutrients(
            calories=23,
            total_fat=0.4,
            saturated_fat=0.06,
            trans_fat=0,
            sodium=79,
            carbohydrates=3.6,
            fiber=2.2,
            sugar=0.4,
            protein=2.9,
            serving_size="100 g",
        ),
        FoodContext(
            food_name="Spinach",
            category=FoodCategory.VEGETABLE,
            processing_level=ProcessingLevel.WHOLE,
            cooking_method=CookingMethod.RAW,
            sugar_type=SugarType.NATURAL,
            overall_quality=QualityRating.EXCELLENT,
        ),
    )


def cola() -> tuple[FoodNutrients, FoodContext]:
    """Sugary soft drink per 100 ml."""
    return (
        FoodNutrients(
            calories=42,
            total_fat=0,
            saturated_fat=0,
            sodium=10,
            carbohydrates=10.6,
            fiber=0,
            sugar=10.6,
            protein=0,
            serving_size="100 ml",
        ),
        FoodContext(
            food_name="Cola",
            category=FoodCategory.BEVERAGE,
            processing_level=ProcessingLevel.ULTRA_PROCESSED,
            sugar_type=SugarType.ADDED,
        ),
    )


def grilled_chicken() -> tuple[FoodNutrients, FoodContext]:
    """Grilled chicken breast per 100 g."""
    return (
        FoodNutrients(
            calories=165,
            total_fat=3.6,
            saturated_fat=1.0,
            trans_fat=0,
            sodium=74,
            carbohydrates=0,
            fiber=0,
            sugar=0,
            protein=31,
        ),
        FoodContext(
            food_name="Grilled chicken breast",
            category=FoodCategory.PROTEIN,
            processing_level=ProcessingLevel.WHOLE,
            cooking_method=CookingMethod.GRILLED,
            overall_quality=QualityRating.EXCELLENT,
        ),
    )


def butter() -> tuple[FoodNutrients, FoodContext]:
    """Butter as labelled per 14 g serving."""
    return (
        FoodNutrients(
            calories=100,
            total_fat=11.5,
            saturated_fat=7.3,
            trans_fat=0.5,
            cholesterol=31,
            sodium=91,
            carbohydrates=0,
            fiber=0,
            sugar=0,
            protein=0.1,
            serving_size="14 g",
        ),
        FoodContext(
            food_name="Butter",
            category=FoodCategory.DAIRY,
            processing_level=ProcessingLevel.MINIMALLY_PROCESSED,
        ),
    )


def vegetable_soup() -> tuple[FoodNutrients, FoodContext]:
    """Canned vegetable soup as labelled per 250 g bowl."""
    return (
        FoodNutrients(
            calories=150,
            total_fat=12,
            saturated_fat=8,
            sodium=1200,
            carbohydrates=25,
            fiber=5,
            sugar=5,
            protein=7.5,
            serving_size="250 g",
        ),
        FoodContext(
            food_name="Vegetable soup",
            category=FoodCategory.VEGETABLE,
            processing_level=ProcessingLevel.PROCESSED,
        ),
    )


def grain_bar(**overrides: float | str) -> tuple[FoodNutrients, FoodContext]:
    """Lightly processed grain bar per 100 g, free of tier caps and bonuses."""
    values: dict[str, float | str] = {
        "calories": 300,
        "saturated_fat": 2,
        "trans_fat": 0,
        "sodium": 200,
        "fiber": 1,
        "sugar": 5,
        "protein": 8,
        "serving_size": "100 g",
    }
    values.update(overrides)
    return (
        FoodNutrients(**values),
        FoodContext(
            food_name="Oat bar",
            category=FoodCategory.GRAIN,
            processing_level=ProcessingLevel.MINIMALLY_PROCESSED,
        ),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        scoring_model="nova-v2",
        scoring_mode="portion-aware",
        scoring_model_files=None,
        debug=False,
        _env_file=None,
    )


@pytest.fixture
def nova_config() -> ModelConfig:
    return nova_v2()


@pytest.fixture
def marker_config() -> ModelConfig:
    return marker_v1()


@pytest.fixture
def registry() -> ModelRegistry:
    return ModelRegistry.default()


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def diabetic_profile() -> HealthProfile:
    return HealthProfile(markers=HealthMarkers(glucose=140))


@pytest.fixture
def high_ldl_profile() -> HealthProfile:
    return HealthProfile(markers=HealthMarkers(ldl=190))
