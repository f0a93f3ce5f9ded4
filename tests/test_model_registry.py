"""Tests for the model registry."""

from dataclasses import replace

import pytest

from food_suitability.services.default_models import DEFAULT_MODEL_VERSION, nova_v2
from food_suitability.services.model_registry import ModelRegistry


def test_default_registry_holds_builtin_models(registry) -> None:
    assert registry.versions() == ["marker-v1", "nova-v2"]
    assert DEFAULT_MODEL_VERSION in registry
    assert registry.get("nova-v2").gamma == 1.5


def test_unknown_version_raises(registry) -> None:
    with pytest.raises(ValueError, match="Unknown model version: nova-v9"):
        registry.get("nova-v9")


def test_register_returns_new_registry(registry) -> None:
    custom = replace(nova_v2(), version="nova-v2-strict", gamma=2.0)

    extended = registry.register(custom)

    assert "nova-v2-strict" in extended
    assert "nova-v2-strict" not in registry
    assert extended.get("nova-v2-strict").gamma == 2.0


def test_registry_is_read_only(registry) -> None:
    with pytest.raises(TypeError):
        registry.models["other"] = nova_v2()  # type: ignore[index]


def test_empty_registry_reports_no_versions() -> None:
    empty = ModelRegistry()

    assert empty.versions() == []
    with pytest.raises(ValueError, match="known: none"):
        empty.get("nova-v2")
