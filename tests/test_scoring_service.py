"""Tests for the scoring service."""

import pytest

from food_suitability.domain.results import ScoringMode
from food_suitability.services.scoring import ScoringService
from tests.conftest import butter, spinach


def test_score_uses_default_model_and_mode(registry) -> None:
    service = ScoringService(registry, default_version="nova-v2")
    nutrients, context = spinach()

    result = service.score(nutrients, context)

    assert result.model_version == "nova-v2"
    assert result.scoring_mode is ScoringMode.PORTION_AWARE


def test_score_with_explicit_model_and_mode(registry) -> None:
    service = ScoringService(registry, default_version="nova-v2", debug=True)
    nutrients, context = butter()

    result = service.score(
        nutrients, context, model_version="marker-v1", mode=ScoringMode.PER_100G
    )

    assert result.model_version == "marker-v1"
    assert result.scoring_mode is ScoringMode.PER_100G


def test_unknown_model_version_raises(registry) -> None:
    service = ScoringService(registry, default_version="nova-v2")
    nutrients, context = spinach()

    with pytest.raises(ValueError):
        service.score(nutrients, context, model_version="nova-v9")
    with pytest.raises(ValueError):
        ScoringService(registry, default_version="nova-v9")


def test_available_models(registry) -> None:
    service = ScoringService(registry, default_version="marker-v1")

    assert service.available_models() == ["marker-v1", "nova-v2"]
