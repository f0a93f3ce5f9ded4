"""Pydantic models for scoring API payloads."""

from pydantic import BaseModel, ConfigDict, Field

from food_suitability.domain.diagnostics import Diagnostic
from food_suitability.domain.food import (
    CarbType,
    CookingMethod,
    FatType,
    FoodCategory,
    FoodContext,
    FoodNutrients,
    ProcessingLevel,
    QualityRating,
    SugarType,
)
from food_suitability.domain.profile import HealthMarkers, HealthProfile
from food_suitability.domain.results import HealthScore, ScoringMode


class NutrientsPayload(BaseModel):
    """Nutrient amounts as printed on the label."""

    calories: float | None = Field(default=None, ge=0)
    total_fat: float | None = Field(default=None, ge=0)
    saturated_fat: float | None = Field(default=None, ge=0)
    trans_fat: float | None = Field(default=None, ge=0)
    cholesterol: float | None = Field(default=None, ge=0)
    sodium: float | None = Field(default=None, ge=0)
    carbohydrates: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    serving_size: str | float | None = None
    serving_unit: str | None = None

    def to_domain(self) -> FoodNutrients:
        return FoodNutrients(**self.model_dump())


class ContextPayload(BaseModel):
    """Food classification from the extraction step."""

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

    def to_domain(self) -> FoodContext:
        return FoodContext(**dict(self))


class MarkersPayload(BaseModel):
    """Biometric markers; omitted values are treated as unavailable."""

    glucose: float | None = Field(default=None, ge=0)
    hba1c: float | None = Field(default=None, ge=0)
    ldl: float | None = Field(default=None, ge=0)
    hdl: float | None = Field(default=None, ge=0)
    triglycerides: float | None = Field(default=None, ge=0)
    alt: float | None = Field(default=None, ge=0)
    ast: float | None = Field(default=None, ge=0)
    ggt: float | None = Field(default=None, ge=0)
    creatinine: float | None = Field(default=None, ge=0)
    crp: float | None = Field(default=None, ge=0)
    uric_acid: float | None = Field(default=None, ge=0)
    bmi: float | None = Field(default=None, ge=0)
    waist: float | None = Field(default=None, ge=0)
    systolic: float | None = Field(default=None, ge=0)
    diastolic: float | None = Field(default=None, ge=0)
    age: float | None = Field(default=None, ge=0)
    height_cm: float | None = Field(default=None, gt=0)
    weight_kg: float | None = Field(default=None, gt=0)


class ProfilePayload(BaseModel):
    """Health profile for the requesting user."""

    markers: MarkersPayload = Field(default_factory=MarkersPayload)
    has_diabetes: bool = False
    has_high_cholesterol: bool = False
    has_high_blood_pressure: bool = False

    def to_domain(self) -> HealthProfile:
        return HealthProfile(
            markers=HealthMarkers(**self.markers.model_dump()),
            has_diabetes=self.has_diabetes,
            has_high_cholesterol=self.has_high_cholesterol,
            has_high_blood_pressure=self.has_high_blood_pressure,
        )


class ScoreRequest(BaseModel):
    """Scoring request body."""

    model_config = ConfigDict(protected_namespaces=())

    nutrients: NutrientsPayload = Field(default_factory=NutrientsPayload)
    context: ContextPayload = Field(default_factory=ContextPayload)
    profile: ProfilePayload | None = None
    model_version: str | None = None
    scoring_mode: ScoringMode | None = None


def diagnostic_payload(diagnostic: Diagnostic) -> dict[str, object]:
    return {
        "kind": diagnostic.kind.value,
        "code": diagnostic.code,
        "message": diagnostic.message,
        "params": dict(diagnostic.params),
    }


def score_payload(result: HealthScore) -> dict[str, object]:
    """Serialize a HealthScore into a JSON-ready response body."""
    details = result.details
    return {
        "score": result.score,
        "category": result.category,
        "confidence": round(result.confidence, 3),
        "model_version": result.model_version,
        "scoring_mode": result.scoring_mode.value,
        "processing_tier": result.processing_tier,
        "base_score": result.base_score,
        "component_scores": result.component_scores,
        "weights": {name: round(value, 4) for name, value in result.weights.items()},
        "warnings": [diagnostic_payload(item) for item in result.warnings],
        "recommendations": [
            diagnostic_payload(item) for item in result.recommendations
        ],
        "insights": [diagnostic_payload(item) for item in result.insights],
        "details": {
            "marker_risks": details.marker_risks,
            "nutrient_impacts": details.nutrient_impacts,
            "missing_markers": list(details.missing_markers),
            "missing_nutrients": list(details.missing_nutrients),
            "available_markers_count": details.available_markers_count,
            "total_markers_count": details.total_markers_count,
            "marker_risk": result.marker_risk,
            "nutrition_score": result.nutrition_score,
            "serving_multiplier": result.serving_multiplier,
        },
        "is_culinary_ingredient": result.is_culinary_ingredient,
        "suggested_serving_size": result.suggested_serving_size,
    }
