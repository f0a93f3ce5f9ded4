"""Immutable scoring model configuration."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

COMPONENTS = (
    "sugar",
    "saturated_fat",
    "trans_fat",
    "sodium",
    "calories",
    "protein",
    "fiber",
    "micronutrient",
)

REQUIRED_TABLES = (
    "sugar",
    "sugar_diabetic",
    "sugar_ultra",
    "sugar_ultra_diabetic",
    "sugar_liquid",
    "sugar_liquid_diabetic",
    "saturated_fat",
    "saturated_fat_high_cholesterol",
    "trans_fat",
    "sodium",
    "sodium_hypertensive",
    "calories",
    "calories_whole",
    "calories_underweight",
    "calories_overweight",
    "calories_obese",
    "protein",
    "protein_priority",
    "protein_weight_management",
    "fiber",
    "fiber_priority",
)

CONDITION_KEYS = (
    "diabetes",
    "high_cholesterol",
    "high_blood_pressure",
    "underweight",
    "overweight",
    "obese",
)


@dataclass(frozen=True)
class Bounds:
    """Clinical reference range used for normalization."""

    low: float
    high: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.low) and math.isfinite(self.high)):
            raise ValueError("Bounds must be finite")


@dataclass(frozen=True)
class ThresholdTable:
    """Ordered (ceiling, score) rows evaluated top-down.

    A value at or below the first ceiling takes the first score and a value
    above the last ceiling takes the last score. Between rows the score is
    interpolated linearly, or taken from the row whose ceiling is reached
    first when ``interpolate`` is false.
    """

    rows: tuple[tuple[float, float], ...]
    interpolate: bool = True

    def __post_init__(self) -> None:
        if not self.rows:
            raise ValueError("Threshold table needs at least one row")
        ceilings = [ceiling for ceiling, _ in self.rows]
        if any(b <= a for a, b in zip(ceilings, ceilings[1:], strict=False)):
            raise ValueError("Threshold ceilings must be strictly increasing")
        if any(not 0 <= score <= 100 for _, score in self.rows):
            raise ValueError("Threshold scores must be within 0..100")

    def evaluate(self, value: float) -> float:
        """Return the score for a value."""
        first_ceiling, first_score = self.rows[0]
        if value <= first_ceiling:
            return first_score
        previous_ceiling, previous_score = first_ceiling, first_score
        for ceiling, score in self.rows[1:]:
            if value <= ceiling:
                if not self.interpolate or math.isinf(ceiling):
                    return score
                span = ceiling - previous_ceiling
                fraction = (value - previous_ceiling) / span
                return previous_score + (score - previous_score) * fraction
            previous_ceiling, previous_score = ceiling, score
        return self.rows[-1][1]


@dataclass(frozen=True)
class MicronutrientPolicy:
    """Context-derived micronutrient density scoring."""

    tier_base: tuple[float, float, float, float] = (90.0, 50.0, 30.0, 10.0)
    vegetable_bonus: float = 10.0
    fruit_bonus: float = 8.0
    lean_protein_bonus: float = 6.0
    fortification_bonus: float = 10.0
    cap: float = 100.0


@dataclass(frozen=True)
class ServingPolicy:
    """Portion-aware risk multiplier around the 100 g reference serving."""

    min_serving: float = 10.0
    small_serving_max_multiplier: float = 1.15
    large_serving_step: float = 0.05
    large_serving_floor: float = 0.95

    def __post_init__(self) -> None:
        if not 0 < self.min_serving < 100:
            raise ValueError("min_serving must be between 0 and 100")
        if self.small_serving_max_multiplier < 1:
            raise ValueError("small_serving_max_multiplier must be at least 1")
        if not 0 < self.large_serving_floor <= 1:
            raise ValueError("large_serving_floor must be within (0, 1]")

    def multiplier(self, serving_size: float | None) -> float:
        """Return the risk multiplier for a serving size in g or ml."""
        if serving_size is None or serving_size <= 0 or serving_size == 100:
            return 1.0
        if serving_size < 100:
            clamped = max(serving_size, self.min_serving)
            extra = self.small_serving_max_multiplier - 1.0
            return 1.0 + extra * (100 - clamped) / (100 - self.min_serving)
        discount = self.large_serving_step * (serving_size - 100) / 100
        return max(self.large_serving_floor, 1.0 - discount)


@dataclass(frozen=True)
class PenaltyPolicy:
    """Processing-tier bonuses, caps and penalties applied to the 0..100 score."""

    excellent_produce_factor: float = 1.12
    excellent_factor: float = 1.10
    excellent_cap: float = 95.0
    good_bonus: float = 3.0
    good_cap: float = 90.0
    processed_cap: float = 60.0
    quality_multipliers: Mapping[str, float] = field(
        default_factory=lambda: {"very-poor": 0.6, "poor": 0.8}
    )
    category_caps: Mapping[str, float] = field(
        default_factory=lambda: {
            "snack": 10.0,
            "dessert": 25.0,
            "processed": 15.0,
            "fast-food": 15.0,
        }
    )
    default_ultra_cap: float = 30.0
    sweetened_beverage_cap: float = 30.0
    beverage_sugar_caps: ThresholdTable = field(
        default_factory=lambda: ThresholdTable(
            ((8.0, 35.0), (math.inf, 15.0)), interpolate=False
        )
    )
    grain_sugar_caps: ThresholdTable = field(
        default_factory=lambda: ThresholdTable(
            ((15.0, 40.0), (25.0, 30.0), (math.inf, 20.0)), interpolate=False
        )
    )
    toxic_sugar: float = 30.0
    toxic_saturated_fat: float = 5.0
    toxic_factor: float = 0.7
    sodium_bomb: float = 1500.0
    sodium_bomb_factor: float = 0.7

    def __post_init__(self) -> None:
        for name in ("quality_multipliers", "category_caps"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))


DEFAULT_CATEGORY_LADDER = (
    (80.0, "Excellent"),
    (60.0, "Good"),
    (40.0, "Fair"),
    (20.0, "Poor"),
    (0.0, "Very Poor"),
)


@dataclass(frozen=True)
class ModelConfig:  # noqa: PLR0902
    """A named, versioned and immutable set of scoring parameters."""

    version: str
    marker_bounds: Mapping[str, Bounds]
    nutrient_bounds: Mapping[str, Bounds]
    coefficients: Mapping[str, Mapping[str, float]]
    marker_weights: Mapping[str, float]
    gamma: float
    component_tables: Mapping[str, ThresholdTable]
    tier_weights: Mapping[str, Mapping[str, float]]
    condition_multipliers: Mapping[str, Mapping[str, float]]
    micronutrient: MicronutrientPolicy = field(default_factory=MicronutrientPolicy)
    serving: ServingPolicy = field(default_factory=ServingPolicy)
    penalties: PenaltyPolicy = field(default_factory=PenaltyPolicy)
    category_ladder: tuple[tuple[float, str], ...] = DEFAULT_CATEGORY_LADDER
    empty_food_penalty: float = 0.75
    neutral_score: float = 0.5
    low_confidence_threshold: float = 0.5
    warning_threshold: float = 50.0

    def __post_init__(self) -> None:
        for name in (
            "marker_bounds",
            "nutrient_bounds",
            "marker_weights",
            "component_tables",
        ):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        for name in ("coefficients", "tier_weights", "condition_multipliers"):
            nested = {
                key: MappingProxyType(dict(value))
                for key, value in getattr(self, name).items()
            }
            object.__setattr__(self, name, MappingProxyType(nested))
        _validate(self)

    @property
    def markers(self) -> tuple[str, ...]:
        """Markers that carry a weight, in configuration order."""
        return tuple(self.marker_weights)

    def table(self, name: str) -> ThresholdTable:
        return self.component_tables[name]

    def category_for(self, score: float) -> str:
        """Map a 0..100 score onto the category ladder."""
        for minimum, label in self.category_ladder:
            if score >= minimum:
                return label
        return self.category_ladder[-1][1]


def _validate(config: ModelConfig) -> None:  # noqa: PLR0912
    """Raise ValueError when a configuration is internally inconsistent."""
    if not config.version:
        raise ValueError("Model version must not be empty")
    if config.gamma < 0:
        raise ValueError("gamma must be non-negative")
    for marker, weight in config.marker_weights.items():
        if weight < 0:
            raise ValueError(f"Negative weight for marker {marker}")
        if marker not in config.marker_bounds:
            raise ValueError(f"Weighted marker {marker} has no bounds")
    for nutrient, row in config.coefficients.items():
        if nutrient not in config.nutrient_bounds:
            raise ValueError(f"Coefficient nutrient {nutrient} has no bounds")
        for marker in row:
            if marker not in config.marker_bounds:
                raise ValueError(f"Coefficient marker {marker} has no bounds")
    missing_tables = [
        name for name in REQUIRED_TABLES if name not in config.component_tables
    ]
    if missing_tables:
        raise ValueError(f"Missing component tables: {', '.join(missing_tables)}")
    for key, weights in config.tier_weights.items():
        unknown = set(weights) - set(COMPONENTS)
        if unknown:
            raise ValueError(f"Unknown components in tier weights {key}: {unknown}")
        if any(weight < 0 for weight in weights.values()):
            raise ValueError(f"Negative component weight in tier weights {key}")
    for condition, multipliers in config.condition_multipliers.items():
        if condition not in CONDITION_KEYS:
            raise ValueError(f"Unknown condition {condition}")
        if any(value < 0 for value in multipliers.values()):
            raise ValueError(f"Negative multiplier for condition {condition}")
    if not 0 <= config.empty_food_penalty <= 1:
        raise ValueError("empty_food_penalty must be within 0..1")
    if not 0 <= config.neutral_score <= 1:
        raise ValueError("neutral_score must be within 0..1")
    if not 0 <= config.low_confidence_threshold <= 1:
        raise ValueError("low_confidence_threshold must be within 0..1")
    if not config.category_ladder:
        raise ValueError("category_ladder must not be empty")
    minimums = [minimum for minimum, _ in config.category_ladder]
    if minimums != sorted(minimums, reverse=True):
        raise ValueError("category_ladder must be ordered from highest to lowest")
