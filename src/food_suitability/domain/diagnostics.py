"""Structured warnings, recommendations and insights emitted while scoring."""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    WARNING = "warning"
    RECOMMENDATION = "recommendation"
    INSIGHT = "insight"


_MESSAGES = {
    "diabetes_detected": (
        "Blood glucose of {glucose} mg/dL is in the diabetic range; "
        "sugar is weighted heavily."
    ),
    "prediabetes_detected": (
        "Blood glucose of {glucose} mg/dL is elevated; watch sugar intake."
    ),
    "very_high_ldl": "LDL of {ldl} mg/dL is very high; avoid saturated and trans fat.",
    "high_ldl": "LDL of {ldl} mg/dL is high; limit saturated fat.",
    "trans_fat_with_high_ldl": (
        "Contains {trans_fat} g trans fat, which is harmful with elevated LDL."
    ),
    "weight_loss_focus": (
        "BMI of {bmi} is in the obese range; prefer lower-calorie, "
        "high-protein, high-fiber foods."
    ),
    "weight_management_focus": (
        "BMI of {bmi} is above normal; favour filling, nutrient-dense foods."
    ),
    "high_sugar": "Sugar content is high for your profile (component score {score}).",
    "high_saturated_fat": (
        "Saturated fat is high for your profile (component score {score})."
    ),
    "high_trans_fat": "Contains trans fat (component score {score}).",
    "high_sodium": "Sodium is high for your profile (component score {score}).",
    "high_calories": (
        "Calorie density is high for your profile (component score {score})."
    ),
    "liquid_sugar": "Sugar in drinks is absorbed quickly and spikes blood glucose.",
    "artificial_sweeteners": "Contains artificial sweeteners.",
    "no_protein": "Contains no protein; pair it with a protein source.",
    "no_fiber": "Contains no fiber; pair it with vegetables or whole grains.",
    "ultra_processed": "Ultra-processed food; score capped at {cap}.",
    "processed_cap": "Processed food; score capped at {cap}.",
    "fried": "Fried foods add oxidised fats; prefer grilled, baked or steamed.",
    "preservatives": "Contains preservatives.",
    "whole_grains": "Contains whole grains.",
    "whole_food_bonus": "Whole, unprocessed food.",
    "culinary_ingredient": (
        "Culinary ingredient scored per 100 g; a typical serving is {serving}."
    ),
    "quality_penalty": "Overall quality rated {quality}; score reduced.",
    "toxic_combination": "High sugar combined with saturated fat; score reduced.",
    "sodium_bomb": "Sodium above {sodium} mg; score reduced.",
    "empty_calories": "Calories without protein or fiber; score reduced.",
    "low_confidence": (
        "Only {available} of {total} health markers available; "
        "result confidence is low."
    ),
    "insufficient_data": "No nutrient data available; a neutral score was used.",
}


@dataclass(frozen=True)
class Diagnostic:
    """Immutable diagnostic code with formatting parameters."""

    kind: DiagnosticKind
    code: str
    params: tuple[tuple[str, object], ...] = ()

    @classmethod
    def warning(cls, code: str, **params: object) -> "Diagnostic":
        return cls(DiagnosticKind.WARNING, code, tuple(params.items()))

    @classmethod
    def recommendation(cls, code: str, **params: object) -> "Diagnostic":
        return cls(DiagnosticKind.RECOMMENDATION, code, tuple(params.items()))

    @classmethod
    def insight(cls, code: str, **params: object) -> "Diagnostic":
        return cls(DiagnosticKind.INSIGHT, code, tuple(params.items()))

    @property
    def message(self) -> str:
        template = _MESSAGES.get(self.code)
        if template is None:
            return self.code.replace("_", " ")
        return template.format(**dict(self.params))


def of_kind(
    diagnostics: tuple[Diagnostic, ...], kind: DiagnosticKind
) -> tuple[Diagnostic, ...]:
    """Filter diagnostics by kind, keeping order and dropping repeated codes."""
    seen: set[str] = set()
    selected: list[Diagnostic] = []
    for diagnostic in diagnostics:
        if diagnostic.kind is kind and diagnostic.code not in seen:
            seen.add(diagnostic.code)
            selected.append(diagnostic)
    return tuple(selected)
