"""Scoring result models."""

from dataclasses import dataclass, field
from enum import Enum

from food_suitability.domain.diagnostics import Diagnostic


class ScoringMode(Enum):
    """Whether serving size affects the score."""

    PORTION_AWARE = "portion-aware"
    PER_100G = "per-100g"


@dataclass(frozen=True)
class SuitabilityDetails:
    """Explainable breakdown of the marker-driven risk."""

    marker_risks: dict[str, float] = field(default_factory=dict)
    nutrient_impacts: dict[str, float] = field(default_factory=dict)
    missing_markers: tuple[str, ...] = ()
    missing_nutrients: tuple[str, ...] = ()
    available_markers_count: int = 0
    total_markers_count: int = 0


@dataclass(frozen=True)
class SuitabilityResult:
    """Aggregated 0..1 suitability with confidence."""

    score: float
    confidence: float
    details: SuitabilityDetails
    marker_risk: float = 0.0
    nutrition_score: float = 0.5
    serving_multiplier: float = 1.0


@dataclass(frozen=True)
class HealthScore:  # noqa: PLR0902
    """Final 0..100 suitability score with its explanation."""

    score: float
    category: str
    confidence: float
    model_version: str
    scoring_mode: ScoringMode
    processing_tier: int
    base_score: float
    component_scores: dict[str, float]
    weights: dict[str, float]
    warnings: tuple[Diagnostic, ...]
    recommendations: tuple[Diagnostic, ...]
    insights: tuple[Diagnostic, ...]
    details: SuitabilityDetails
    is_culinary_ingredient: bool = False
    suggested_serving_size: str | None = None
    marker_risk: float = 0.0
    nutrition_score: float = 0.5
    serving_multiplier: float = 1.0
