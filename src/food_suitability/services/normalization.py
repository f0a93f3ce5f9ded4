"""Normalization of markers and nutrients onto the unit interval."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from food_suitability.domain.model_config import Bounds


@dataclass(frozen=True)
class NormalizedSet:
    """Normalized values plus the names that were available or missing."""

    values: dict[str, float] = field(default_factory=dict)
    available: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()


def normalize_value(value: float, bounds: Bounds) -> float:
    """Map a value onto [0, 1]; inverted bounds invert the direction."""
    if bounds.high == bounds.low:
        return 0.5
    ratio = (value - bounds.low) / (bounds.high - bounds.low)
    return min(1.0, max(0.0, ratio))


def normalize_all(
    raw: Mapping[str, float],
    bounds: Mapping[str, Bounds],
    names: Iterable[str] | None = None,
) -> NormalizedSet:
    """Normalize every configured name, recording absent ones as missing."""
    values: dict[str, float] = {}
    available: list[str] = []
    missing: list[str] = []
    for name in names if names is not None else bounds:
        value = raw.get(name)
        if value is None or name not in bounds:
            missing.append(name)
            continue
        values[name] = normalize_value(value, bounds[name])
        available.append(name)
    return NormalizedSet(values, tuple(available), tuple(missing))


def marker_confidence(available_count: int, configured_count: int) -> float:
    """Fraction of configured markers that were available."""
    if configured_count <= 0:
        return 0.0
    return min(1.0, available_count / configured_count)
