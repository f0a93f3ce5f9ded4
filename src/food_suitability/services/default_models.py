"""Built-in scoring model configurations."""

from food_suitability.domain.model_config import Bounds, ModelConfig, ThresholdTable

DEFAULT_MODEL_VERSION = "nova-v2"

MARKER_BOUNDS = {
    "glucose": Bounds(70, 180),
    "hba1c": Bounds(4.5, 9),
    "ldl": Bounds(50, 190),
    "hdl": Bounds(25, 80),
    "triglycerides": Bounds(50, 300),
    "alt": Bounds(5, 90),
    "ast": Bounds(5, 90),
    "ggt": Bounds(10, 100),
    "creatinine": Bounds(0.4, 2),
    "crp": Bounds(0.1, 10),
    "uric_acid": Bounds(3, 9),
    "bmi": Bounds(14, 45),
    "waist": Bounds(60, 140),
    "systolic": Bounds(90, 200),
    "diastolic": Bounds(50, 120),
}

NUTRIENT_BOUNDS = {
    "calories": Bounds(0, 1000),
    "sugar": Bounds(0, 60),
    "saturated_fat": Bounds(0, 20),
    "trans_fat": Bounds(0, 5),
    "unsaturated_fat": Bounds(0, 20),
    "sodium": Bounds(0, 2000),
    "cholesterol": Bounds(0, 300),
    "fiber": Bounds(0, 15),
    "protein": Bounds(0, 40),
    "carbohydrates": Bounds(0, 100),
}

MARKER_WEIGHTS = {
    "glucose": 0.15,
    "hba1c": 0.12,
    "ldl": 0.18,
    "hdl": 0.08,
    "triglycerides": 0.10,
    "alt": 0.05,
    "ast": 0.03,
    "ggt": 0.03,
    "creatinine": 0.05,
    "crp": 0.06,
    "uric_acid": 0.03,
    "bmi": 0.12,
    "waist": 0.10,
    "systolic": 0.10,
    "diastolic": 0.10,
}

# Low HDL is the risky direction, so the bounds run high to low.
NOVA_MARKER_BOUNDS = {**MARKER_BOUNDS, "hdl": Bounds(80, 25)}

NOVA_COEFFICIENTS = {
    "sugar": {
        "glucose": 2.0,
        "hba1c": 1.5,
        "triglycerides": 0.6,
        "bmi": 0.5,
        "waist": 0.5,
    },
    "saturated_fat": {
        "ldl": 1.25,
        "hdl": 0.1,
        "crp": 0.4,
        "bmi": 0.4,
        "waist": 0.4,
    },
    "trans_fat": {"ldl": 0.6, "hdl": 0.4, "crp": 0.2},
    "unsaturated_fat": {"hdl": -0.25},
    "sodium": {"systolic": 0.5, "diastolic": 0.45},
    "cholesterol": {"ldl": 0.2},
    "fiber": {"glucose": -0.2, "ldl": -0.15, "bmi": -0.1},
    "calories": {"bmi": 0.5, "waist": 0.3},
    "carbohydrates": {"glucose": 0.35, "triglycerides": 0.15},
}

MARKER_V1_COEFFICIENTS = {
    "sugar": {
        "glucose": 8.0,
        "hba1c": 6.0,
        "triglycerides": 2.5,
        "bmi": 2.0,
        "waist": 2.0,
    },
    "saturated_fat": {
        "ldl": 5.0,
        "hdl": -0.4,
        "crp": 1.5,
        "bmi": 1.5,
        "waist": 1.5,
    },
    "trans_fat": {"ldl": 1.2, "hdl": -0.8, "crp": 0.4},
    "unsaturated_fat": {"hdl": 0.5},
    "sodium": {"systolic": 1.0, "diastolic": 0.9},
    "cholesterol": {"ldl": 0.4},
    "fiber": {"glucose": -0.4, "ldl": -0.3, "bmi": -0.2},
    "calories": {"bmi": 1.0, "waist": 0.6},
    "protein": {"bmi": 0.2},
    "carbohydrates": {"glucose": 0.7, "triglycerides": 0.3},
}


def _table(*rows: tuple[float, float]) -> ThresholdTable:
    return ThresholdTable(tuple(rows))


COMPONENT_TABLES = {
    "sugar": _table((0, 100), (5, 95), (8, 90), (15, 70), (25, 45), (40, 15), (60, 0)),
    "sugar_diabetic": _table((0, 100), (2, 85), (5, 65), (10, 35), (20, 10), (30, 0)),
    "sugar_ultra": _table(
        (0, 80), (4, 70), (8, 45), (12, 25), (18, 12), (25, 5), (35, 0)
    ),
    "sugar_ultra_diabetic": _table((0, 75), (5, 45), (10, 18), (15, 6), (20, 0)),
    "sugar_liquid": _table((0, 100), (2, 70), (8, 45), (12, 30), (20, 10), (30, 0)),
    "sugar_liquid_diabetic": _table((0, 100), (2, 65), (5, 35), (10, 12), (15, 0)),
    "saturated_fat": _table((0, 100), (1.5, 95), (3, 85), (5, 60), (10, 30), (20, 0)),
    "saturated_fat_high_cholesterol": _table(
        (0, 100), (0.5, 90), (1.5, 70), (3, 40), (5, 15), (10, 0)
    ),
    "trans_fat": _table((0, 100), (0.5, 60), (2, 10), (3, 0)),
    "sodium": _table(
        (0, 100),
        (140, 95),
        (300, 75),
        (400, 65),
        (600, 45),
        (800, 20),
        (1000, 10),
        (1500, 0),
    ),
    "sodium_hypertensive": _table(
        (0, 100), (140, 90), (200, 80), (300, 60), (600, 25), (1000, 0)
    ),
    "calories": _table((0, 100), (250, 95), (400, 75), (600, 50), (900, 20)),
    "calories_whole": _table((0, 100), (250, 95), (400, 85), (900, 70)),
    "calories_overweight": _table(
        (0, 100), (150, 90), (300, 70), (400, 55), (800, 10)
    ),
    "calories_obese": _table((0, 100), (100, 95), (200, 80), (300, 55), (700, 0)),
    "calories_underweight": _table((0, 30), (300, 60), (700, 100)),
    "protein": _table((0, 0), (4, 40), (8, 65), (15, 85), (25, 100)),
    "protein_priority": _table((0, 0), (4, 35), (8, 60), (15, 80), (25, 100)),
    "protein_weight_management": _table(
        (0, 0), (4, 45), (8, 65), (15, 85), (25, 100)
    ),
    "fiber": _table((0, 0), (1, 40), (2, 60), (4, 80), (8, 95), (12, 100)),
    "fiber_priority": _table((0, 0), (1.5, 30), (3, 55), (6, 80), (10, 100)),
}

# Sugar calibration of the label-only scorer, kept as its own model version.
MARKER_V1_SUGAR_TABLES = {
    "sugar": _table((0, 100), (5, 100), (12, 80), (20, 50), (30, 20)),
    "sugar_diabetic": _table((0, 100), (3, 100), (5, 70), (10, 20), (11.25, 0)),
}

TIER_WEIGHTS = {
    "1:produce": {
        "sugar": 0.0,
        "saturated_fat": 0.01,
        "trans_fat": 0.01,
        "sodium": 0.01,
        "calories": 0.0,
        "protein": 0.0,
        "fiber": 0.46,
        "micronutrient": 0.51,
    },
    "1:protein": {
        "sugar": 0.0,
        "saturated_fat": 0.35,
        "trans_fat": 0.05,
        "sodium": 0.05,
        "calories": 0.0,
        "protein": 0.45,
        "fiber": 0.0,
        "micronutrient": 0.10,
    },
    "1:grain-dairy": {
        "sugar": 0.05,
        "saturated_fat": 0.15,
        "trans_fat": 0.05,
        "sodium": 0.05,
        "calories": 0.0,
        "protein": 0.25,
        "fiber": 0.25,
        "micronutrient": 0.20,
    },
    "1": {
        "sugar": 0.0,
        "saturated_fat": 0.05,
        "trans_fat": 0.05,
        "sodium": 0.05,
        "calories": 0.0,
        "protein": 0.30,
        "fiber": 0.30,
        "micronutrient": 0.25,
    },
    "2": {
        "sugar": 0.05,
        "saturated_fat": 0.20,
        "trans_fat": 0.15,
        "sodium": 0.15,
        "calories": 0.10,
        "protein": 0.15,
        "fiber": 0.10,
        "micronutrient": 0.10,
    },
    "3": {
        "sugar": 0.15,
        "saturated_fat": 0.15,
        "trans_fat": 0.15,
        "sodium": 0.15,
        "calories": 0.15,
        "protein": 0.10,
        "fiber": 0.10,
        "micronutrient": 0.05,
    },
    "4": {
        "sugar": 0.30,
        "saturated_fat": 0.25,
        "trans_fat": 0.20,
        "sodium": 0.20,
        "calories": 0.03,
        "protein": 0.01,
        "fiber": 0.01,
        "micronutrient": 0.0,
    },
}

CONDITION_MULTIPLIERS = {
    "diabetes": {"sugar": 2.5, "fiber": 1.5},
    "high_cholesterol": {"saturated_fat": 2.0, "trans_fat": 2.0, "fiber": 1.3},
    "high_blood_pressure": {"sodium": 2.5},
    "obese": {"calories": 2.0, "protein": 1.5, "fiber": 1.5},
    "overweight": {"calories": 1.5, "protein": 1.3, "fiber": 1.3},
    "underweight": {"calories": 0.5, "protein": 2.0},
}


def nova_v2() -> ModelConfig:
    """Tier-weighted model with inverted HDL bounds and scaled coefficients."""
    return ModelConfig(
        version="nova-v2",
        marker_bounds=NOVA_MARKER_BOUNDS,
        nutrient_bounds=NUTRIENT_BOUNDS,
        coefficients=NOVA_COEFFICIENTS,
        marker_weights=MARKER_WEIGHTS,
        gamma=1.5,
        component_tables=COMPONENT_TABLES,
        tier_weights=TIER_WEIGHTS,
        condition_multipliers=CONDITION_MULTIPLIERS,
    )


def marker_v1() -> ModelConfig:
    """Marker-interaction coefficients with the label-only sugar calibration.

    The coefficients are unscaled, so marker risk saturates at 1.0 for
    moderately elevated profiles and every food then scores 0. Prefer
    ``nova-v2`` when ranking foods for such a profile.
    """
    return ModelConfig(
        version="marker-v1",
        marker_bounds=MARKER_BOUNDS,
        nutrient_bounds=NUTRIENT_BOUNDS,
        coefficients=MARKER_V1_COEFFICIENTS,
        marker_weights=MARKER_WEIGHTS,
        gamma=1.5,
        component_tables={**COMPONENT_TABLES, **MARKER_V1_SUGAR_TABLES},
        tier_weights=TIER_WEIGHTS,
        condition_multipliers=CONDITION_MULTIPLIERS,
    )


def builtin_models() -> tuple[ModelConfig, ...]:
    return nova_v2(), marker_v1()
