"""Serving-size parsing and per-100 normalization."""

import logging
import re
from dataclasses import dataclass

from food_suitability.domain.food import FoodNutrients

REFERENCE_AMOUNT = 100.0

_PER_100_RE = re.compile(r"(?:per\s*|/\s*)100(?!\d)", re.IGNORECASE)
_AMOUNT_RE = re.compile(
    r"(\d+(?:\.\d+)?)\s*"
    r"(fl\.?\s*oz|milliliters?|millilitres?|ml|liters?|litres?|l|"
    r"kilograms?|kg|grams?|g|ounces?|oz)\b",
    re.IGNORECASE,
)
_THOUSANDS_RE = re.compile(r"(?<=\d),(?=\d{3}(?!\d))")
_IMPERIAL_UNITS = frozenset({"oz", "ounce", "ounces", "floz"})
_UNIT_FACTORS = {
    "g": ("g", 1.0),
    "gram": ("g", 1.0),
    "grams": ("g", 1.0),
    "kg": ("g", 1000.0),
    "kilogram": ("g", 1000.0),
    "kilograms": ("g", 1000.0),
    "oz": ("g", 28.35),
    "ounce": ("g", 28.35),
    "ounces": ("g", 28.35),
    "ml": ("ml", 1.0),
    "milliliter": ("ml", 1.0),
    "milliliters": ("ml", 1.0),
    "millilitre": ("ml", 1.0),
    "millilitres": ("ml", 1.0),
    "l": ("ml", 1000.0),
    "liter": ("ml", 1000.0),
    "liters": ("ml", 1000.0),
    "litre": ("ml", 1000.0),
    "litres": ("ml", 1000.0),
    "floz": ("ml", 29.57),
}

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedServingSize:
    """Serving amount expressed in grams or millilitres."""

    amount: float
    unit: str


def parse_serving_size(
    serving_size: str | float | None, unit: str | None = None
) -> ParsedServingSize | None:
    """Parse a serving size; return None when it cannot be understood."""
    if serving_size is None:
        return None
    if isinstance(serving_size, bool):
        return None
    if isinstance(serving_size, int | float):
        return _from_number(float(serving_size), unit)
    text = serving_size.strip()
    if not text:
        return None
    if _PER_100_RE.search(text):
        resolved_unit = "ml" if re.search(r"ml\b", text, re.IGNORECASE) else "g"
        return ParsedServingSize(REFERENCE_AMOUNT, resolved_unit)
    text = _THOUSANDS_RE.sub("", text)
    matches = list(_AMOUNT_RE.finditer(text))
    if not matches:
        if unit is not None:
            try:
                return _from_number(float(text), unit)
            except ValueError:
                return None
        return None
    # labels like "8 oz (240 ml)" print the metric amount next to the imperial one
    metric = [m for m in matches if _unit_key(m.group(2)) not in _IMPERIAL_UNITS]
    match = (metric or matches)[0]
    return _convert(float(match.group(1)), match.group(2))


def normalize_serving(nutrients: FoodNutrients) -> FoodNutrients:
    """Rescale nutrients to a 100 g/ml reference.

    Unparseable or missing serving sizes are treated as already per 100 and
    the bundle is returned unchanged.
    """
    parsed = parse_serving_size(nutrients.serving_size, nutrients.serving_unit)
    if parsed is None or parsed.amount == REFERENCE_AMOUNT:
        return nutrients
    factor = REFERENCE_AMOUNT / parsed.amount
    _logger.debug(
        "Normalizing serving %s%s by factor %.3f",
        parsed.amount,
        parsed.unit,
        factor,
    )
    return nutrients.scaled(factor, REFERENCE_AMOUNT)


def _from_number(value: float, unit: str | None) -> ParsedServingSize | None:
    """Interpret a bare number, grams unless a unit says otherwise."""
    return _convert(value, unit or "g")


def _unit_key(unit: str) -> str:
    return re.sub(r"[\s.]", "", unit.lower())


def _convert(value: float, unit: str) -> ParsedServingSize | None:
    """Convert a raw amount and unit into grams or millilitres."""
    resolved = _UNIT_FACTORS.get(_unit_key(unit))
    if resolved is None or value <= 0:
        return None
    base_unit, factor = resolved
    return ParsedServingSize(value * factor, base_unit)
