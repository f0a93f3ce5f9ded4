"""Load scoring model overrides from JSON files."""

import logging
from dataclasses import replace
from pathlib import Path

from pydantic import BaseModel, Field

from food_suitability.domain.model_config import Bounds, ModelConfig, ThresholdTable
from food_suitability.services.model_registry import ModelRegistry

_logger = logging.getLogger(__name__)


class BoundsPayload(BaseModel):
    """Low/high reference range."""

    low: float
    high: float


class ThresholdTablePayload(BaseModel):
    """Ordered (ceiling, score) rows."""

    rows: list[tuple[float, float]] = Field(min_length=1)
    interpolate: bool = True


class ModelFilePayload(BaseModel):
    """Model file layered over a base model; omitted sections are inherited."""

    version: str = Field(min_length=1)
    base: str | None = None
    marker_bounds: dict[str, BoundsPayload] | None = None
    nutrient_bounds: dict[str, BoundsPayload] | None = None
    coefficients: dict[str, dict[str, float]] | None = None
    marker_weights: dict[str, float] | None = None
    gamma: float | None = Field(default=None, ge=0)
    component_tables: dict[str, ThresholdTablePayload] | None = None
    tier_weights: dict[str, dict[str, float]] | None = None
    condition_multipliers: dict[str, dict[str, float]] | None = None
    empty_food_penalty: float | None = Field(default=None, ge=0, le=1)
    neutral_score: float | None = Field(default=None, ge=0, le=1)
    low_confidence_threshold: float | None = Field(default=None, ge=0, le=1)
    warning_threshold: float | None = Field(default=None, ge=0, le=100)


def build_model_config(payload: ModelFilePayload, base: ModelConfig) -> ModelConfig:
    """Apply a parsed model file on top of a base configuration."""
    changes: dict[str, object] = {"version": payload.version}
    if payload.marker_bounds is not None:
        changes["marker_bounds"] = {
            **base.marker_bounds,
            **_bounds(payload.marker_bounds),
        }
    if payload.nutrient_bounds is not None:
        changes["nutrient_bounds"] = {
            **base.nutrient_bounds,
            **_bounds(payload.nutrient_bounds),
        }
    if payload.coefficients is not None:
        changes["coefficients"] = payload.coefficients
    if payload.marker_weights is not None:
        changes["marker_weights"] = payload.marker_weights
    if payload.component_tables is not None:
        tables = {
            name: ThresholdTable(
                tuple((ceiling, score) for ceiling, score in table.rows),
                interpolate=table.interpolate,
            )
            for name, table in payload.component_tables.items()
        }
        changes["component_tables"] = {**base.component_tables, **tables}
    if payload.tier_weights is not None:
        changes["tier_weights"] = {**base.tier_weights, **payload.tier_weights}
    if payload.condition_multipliers is not None:
        changes["condition_multipliers"] = {
            **base.condition_multipliers,
            **payload.condition_multipliers,
        }
    for name in (
        "gamma",
        "empty_food_penalty",
        "neutral_score",
        "low_confidence_threshold",
        "warning_threshold",
    ):
        value = getattr(payload, name)
        if value is not None:
            changes[name] = value
    return replace(base, **changes)


def load_model_file(
    path: str | Path, registry: ModelRegistry, default_base: str
) -> ModelConfig:
    """Read, validate and build a model config from a JSON file."""
    raw = Path(path).read_text(encoding="utf-8")
    payload = ModelFilePayload.model_validate_json(raw)
    base = registry.get(payload.base or default_base)
    config = build_model_config(payload, base)
    _logger.info(
        "Loaded model %s from %s (base %s)", config.version, path, base.version
    )
    return config


def register_model_files(
    registry: ModelRegistry, paths: list[str], default_base: str
) -> ModelRegistry:
    """Return a registry extended with every model file, in order."""
    for path in paths:
        registry = registry.register(load_model_file(path, registry, default_base))
    return registry


def _bounds(payload: dict[str, BoundsPayload]) -> dict[str, Bounds]:
    return {name: Bounds(bounds.low, bounds.high) for name, bounds in payload.items()}
