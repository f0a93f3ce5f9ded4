"""Propagation of normalized nutrient levels onto biomarker impacts."""

from collections.abc import Iterable, Mapping


def propagate_impacts(
    normalized_nutrients: Mapping[str, float],
    coefficients: Mapping[str, Mapping[str, float]],
    markers: Iterable[str],
) -> dict[str, float]:
    """Return the summed nutrient impact for every marker.

    Only nutrients present in both the input and the coefficient matrix
    contribute. Negative coefficients reduce the impact.
    """
    impacts = {marker: 0.0 for marker in markers}
    for nutrient, level in normalized_nutrients.items():
        row = coefficients.get(nutrient)
        if not row:
            continue
        for marker, coefficient in row.items():
            if marker in impacts:
                impacts[marker] += coefficient * level
    return impacts
