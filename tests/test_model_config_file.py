"""Tests for JSON model file loading."""

import json

import pytest

from food_suitability.adapters.model_config_file import (
    load_model_file,
    register_model_files,
)


def _write(tmp_path, name: str, payload: dict[str, object]) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_model_file_layers_over_base(tmp_path, registry) -> None:
    path = _write(
        tmp_path,
        "strict.json",
        {
            "version": "nova-strict",
            "gamma": 2.0,
            "marker_bounds": {"glucose": {"low": 80, "high": 160}},
            "component_tables": {"sugar": {"rows": [[0, 100], [10, 0]]}},
        },
    )

    config = load_model_file(path, registry, default_base="nova-v2")

    assert config.version == "nova-strict"
    assert config.gamma == 2.0
    assert config.table("sugar").evaluate(5) == pytest.approx(50)
    assert config.table("sodium") == registry.get("nova-v2").table("sodium")
    assert config.marker_bounds["glucose"].low == 80
    assert config.marker_bounds["ldl"] == registry.get("nova-v2").marker_bounds["ldl"]


def test_model_file_can_choose_its_base(tmp_path, registry) -> None:
    path = _write(tmp_path, "legacy.json", {"version": "legacy", "base": "marker-v1"})

    config = load_model_file(path, registry, default_base="nova-v2")

    assert config.coefficients == registry.get("marker-v1").coefficients


@pytest.mark.parametrize(
    "payload",
    [
        {"version": "bad", "gamma": -1},
        {"version": ""},
        {"version": "bad", "base": "missing"},
        {"version": "bad", "component_tables": {"sugar": {"rows": [[5, 10], [1, 0]]}}},
        {"version": "bad", "tier_weights": {"3": {"crunch": 1.0}}},
    ],
)
def test_invalid_model_files_are_rejected(tmp_path, registry, payload) -> None:
    path = _write(tmp_path, "bad.json", payload)

    with pytest.raises(ValueError):
        load_model_file(path, registry, default_base="nova-v2")


def test_register_model_files_extends_registry(tmp_path, registry) -> None:
    first = _write(tmp_path, "a.json", {"version": "a", "gamma": 1.0})
    second = _write(tmp_path, "b.json", {"version": "b", "base": "a"})

    extended = register_model_files(registry, [first, second], default_base="nova-v2")

    assert extended.versions() == ["a", "b", "marker-v1", "nova-v2"]
    assert extended.get("b").gamma == 1.0
