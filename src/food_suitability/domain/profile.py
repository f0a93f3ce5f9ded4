"""Domain models for an individual's biometric markers and conditions."""

from dataclasses import dataclass, field
from enum import Enum

MARKER_FIELDS = (
    "glucose",
    "hba1c",
    "ldl",
    "hdl",
    "triglycerides",
    "alt",
    "ast",
    "ggt",
    "creatinine",
    "crp",
    "uric_acid",
    "bmi",
    "waist",
    "systolic",
    "diastolic",
)


class BmiCategory(Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


@dataclass(frozen=True)
class HealthMarkers:
    """Biometric markers; None means unavailable, never zero."""

    glucose: float | None = None
    hba1c: float | None = None
    ldl: float | None = None
    hdl: float | None = None
    triglycerides: float | None = None
    alt: float | None = None
    ast: float | None = None
    ggt: float | None = None
    creatinine: float | None = None
    crp: float | None = None
    uric_acid: float | None = None
    bmi: float | None = None
    waist: float | None = None
    systolic: float | None = None
    diastolic: float | None = None
    age: float | None = None
    height_cm: float | None = None
    weight_kg: float | None = None

    def resolved_bmi(self) -> float | None:
        """Return BMI, deriving it from height and weight when absent."""
        if self.bmi is not None:
            return self.bmi
        if self.height_cm and self.weight_kg and self.height_cm > 0:
            height_m = self.height_cm / 100
            return self.weight_kg / (height_m * height_m)
        return None

    def values(self) -> dict[str, float]:
        """Return available marker values keyed by marker name."""
        resolved = {
            name: getattr(self, name)
            for name in MARKER_FIELDS
            if getattr(self, name) is not None
        }
        bmi = self.resolved_bmi()
        if bmi is not None:
            resolved["bmi"] = bmi
        return resolved


@dataclass(frozen=True)
class HealthProfile:
    """Markers plus explicitly declared conditions."""

    markers: HealthMarkers = field(default_factory=HealthMarkers)
    has_diabetes: bool = False
    has_high_cholesterol: bool = False
    has_high_blood_pressure: bool = False


@dataclass(frozen=True)
class HealthConditions:
    """Conditions derived from profile flags and marker values."""

    diabetes: bool = False
    prediabetes: bool = False
    high_cholesterol: bool = False
    very_high_cholesterol: bool = False
    high_blood_pressure: bool = False
    bmi_category: BmiCategory | None = None

    @property
    def weight_management(self) -> bool:
        return self.bmi_category in {BmiCategory.OVERWEIGHT, BmiCategory.OBESE}
