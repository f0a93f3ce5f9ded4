"""Derivation of health conditions from profile flags and markers."""

from food_suitability.domain.diagnostics import Diagnostic
from food_suitability.domain.profile import BmiCategory, HealthConditions, HealthProfile

DIABETES_GLUCOSE = 126.0
PREDIABETES_GLUCOSE = 100.0
DIABETES_HBA1C = 6.5
HIGH_LDL = 130.0
VERY_HIGH_LDL = 160.0
HIGH_SYSTOLIC = 140.0
HIGH_DIASTOLIC = 90.0
UNDERWEIGHT_BMI = 18.5
OVERWEIGHT_BMI = 25.0
OBESE_BMI = 30.0


def bmi_category(bmi: float | None) -> BmiCategory | None:
    if bmi is None:
        return None
    if bmi < UNDERWEIGHT_BMI:
        return BmiCategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_BMI:
        return BmiCategory.NORMAL
    if bmi < OBESE_BMI:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def derive_conditions(
    profile: HealthProfile,
) -> tuple[HealthConditions, tuple[Diagnostic, ...]]:
    """Combine declared flags with marker cut-offs."""
    markers = profile.markers
    glucose = markers.glucose
    ldl = markers.ldl
    bmi = markers.resolved_bmi()
    diabetes_by_marker = (glucose is not None and glucose >= DIABETES_GLUCOSE) or (
        markers.hba1c is not None and markers.hba1c >= DIABETES_HBA1C
    )
    diabetes = profile.has_diabetes or diabetes_by_marker
    prediabetes = (
        not diabetes and glucose is not None and glucose >= PREDIABETES_GLUCOSE
    )
    very_high_ldl = ldl is not None and ldl >= VERY_HIGH_LDL
    high_cholesterol = profile.has_high_cholesterol or (
        ldl is not None and ldl >= HIGH_LDL
    )
    high_blood_pressure = (
        profile.has_high_blood_pressure
        or (markers.systolic is not None and markers.systolic >= HIGH_SYSTOLIC)
        or (markers.diastolic is not None and markers.diastolic >= HIGH_DIASTOLIC)
    )
    category = bmi_category(bmi)
    conditions = HealthConditions(
        diabetes=diabetes,
        prediabetes=prediabetes,
        high_cholesterol=high_cholesterol,
        very_high_cholesterol=very_high_ldl,
        high_blood_pressure=high_blood_pressure,
        bmi_category=category,
    )
    return conditions, _profile_diagnostics(conditions, glucose, ldl, bmi)


def _profile_diagnostics(
    conditions: HealthConditions,
    glucose: float | None,
    ldl: float | None,
    bmi: float | None,
) -> tuple[Diagnostic, ...]:
    """Build marker-driven warnings and recommendations."""
    diagnostics: list[Diagnostic] = []
    if glucose is not None and glucose >= DIABETES_GLUCOSE:
        diagnostics.append(Diagnostic.warning("diabetes_detected", glucose=glucose))
    elif conditions.prediabetes and glucose is not None:
        diagnostics.append(Diagnostic.warning("prediabetes_detected", glucose=glucose))
    if ldl is not None and ldl >= VERY_HIGH_LDL:
        diagnostics.append(Diagnostic.warning("very_high_ldl", ldl=ldl))
    elif ldl is not None and ldl >= HIGH_LDL:
        diagnostics.append(Diagnostic.warning("high_ldl", ldl=ldl))
    if bmi is not None and conditions.bmi_category is BmiCategory.OBESE:
        diagnostics.append(
            Diagnostic.recommendation("weight_loss_focus", bmi=round(bmi, 1))
        )
    elif bmi is not None and conditions.bmi_category is BmiCategory.OVERWEIGHT:
        diagnostics.append(
            Diagnostic.recommendation("weight_management_focus", bmi=round(bmi, 1))
        )
    return tuple(diagnostics)
