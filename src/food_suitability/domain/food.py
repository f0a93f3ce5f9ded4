"""Food domain models: measured nutrients and categorical context."""

from dataclasses import dataclass, fields, replace
from enum import Enum

NUTRIENT_FIELDS = (
    "calories",
    "total_fat",
    "saturated_fat",
    "trans_fat",
    "cholesterol",
    "sodium",
    "carbohydrates",
    "fiber",
    "sugar",
    "protein",
)


class ProcessingLevel(Enum):
    """NOVA-style processing level of a food."""

    WHOLE = "whole"
    MINIMALLY_PROCESSED = "minimally-processed"
    PROCESSED = "processed"
    ULTRA_PROCESSED = "ultra-processed"


class FoodCategory(Enum):
    """Broad food category."""

    PROTEIN = "protein"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    GRAIN = "grain"
    DAIRY = "dairy"
    SNACK = "snack"
    BEVERAGE = "beverage"
    PROCESSED = "processed"
    FAST_FOOD = "fast-food"
    DESSERT = "dessert"
    OTHER = "other"


class CookingMethod(Enum):
    RAW = "raw"
    STEAMED = "steamed"
    BOILED = "boiled"
    GRILLED = "grilled"
    BAKED = "baked"
    FRIED = "fried"
    DEEP_FRIED = "deep-fried"
    UNKNOWN = "unknown"


class SugarType(Enum):
    NONE = "none"
    NATURAL = "natural"
    ADDED = "added"
    MIXED = "mixed"


class FatType(Enum):
    NONE = "none"
    HEALTHY_UNSATURATED = "healthy-unsaturated"
    SATURATED = "saturated"
    TRANS = "trans"
    MIXED = "mixed"


class CarbType(Enum):
    NONE = "none"
    SIMPLE = "simple"
    COMPLEX = "complex"
    REFINED = "refined"
    WHOLE_GRAIN = "whole-grain"


class QualityRating(Enum):
    """Overall quality assessment supplied with the food context."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    VERY_POOR = "very-poor"


@dataclass(frozen=True)
class FoodNutrients:
    """Nutrient amounts for a food; None means not measured."""

    calories: float | None = None
    total_fat: float | None = None
    saturated_fat: float | None = None
    trans_fat: float | None = None
    cholesterol: float | None = None
    sodium: float | None = None
    carbohydrates: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    protein: float | None = None
    serving_size: str | float | None = None
    serving_unit: str | None = None

    @property
    def unsaturated_fat(self) -> float | None:
        """Fat that is neither saturated nor trans, when total fat is known."""
        if self.total_fat is None:
            return None
        remainder = (
            self.total_fat - (self.saturated_fat or 0.0) - (self.trans_fat or 0.0)
        )
        return max(0.0, remainder)

    def amounts(self) -> dict[str, float]:
        """Return measured nutrient amounts, including derived unsaturated fat."""
        values = {
            name: getattr(self, name)
            for name in NUTRIENT_FIELDS
            if getattr(self, name) is not None
        }
        unsaturated = self.unsaturated_fat
        if unsaturated is not None:
            values["unsaturated_fat"] = unsaturated
        return values

    def has_any_nutrient(self) -> bool:
        return any(getattr(self, name) is not None for name in NUTRIENT_FIELDS)

    def scaled(
        self, factor: float, serving_size: str | float | None
    ) -> "FoodNutrients":
        """Return a copy with every measured nutrient multiplied by factor."""
        changes: dict[str, object] = {
            field.name: getattr(self, field.name) * factor
            for field in fields(self)
            if field.name in NUTRIENT_FIELDS and getattr(self, field.name) is not None
        }
        changes["serving_size"] = serving_size
        changes["serving_unit"] = None
        return replace(self, **changes)


@dataclass(frozen=True)
class FoodContext:
    """Categorical description of a food, trusted as given."""

    food_name: str = ""
    category: FoodCategory = FoodCategory.OTHER
    processing_level: ProcessingLevel | None = None
    cooking_method: CookingMethod | None = None
    sugar_type: SugarType | None = None
    fat_type: FatType | None = None
    carb_type: CarbType | None = None
    has_whole_grains: bool = False
    has_artificial_sweeteners: bool = False
    has_preservatives: bool = False
    has_fortification: bool = False
    overall_quality: QualityRating | None = None

    @property
    def is_fried(self) -> bool:
        return self.cooking_method in {CookingMethod.FRIED, CookingMethod.DEEP_FRIED}
