"""Sync guard tests for slider metadata.

Sliders are built from the SimulationParameters schema, so every field
needs ui metadata and bounds that agree with PARAMETER_BOUNDS.
"""

import pytest

from greenhouse_twin.schemas import (
    DEFAULT_OPTIMAL_RANGES,
    PARAMETER_BOUNDS,
    SimulationParameters,
)
from greenhouse_twin.schemas.defaults import SPEED_OPTIONS

_FIELDS = list(SimulationParameters.model_fields)
_SCHEMA = SimulationParameters.model_json_schema()["properties"]


def test_bounds_cover_every_field() -> None:
    assert set(PARAMETER_BOUNDS) == set(_FIELDS)
    assert set(DEFAULT_OPTIMAL_RANGES) == set(_FIELDS)


@pytest.mark.parametrize("name", _FIELDS)
def test_field_has_ui_metadata(name) -> None:
    prop = _SCHEMA[name]
    for key in ("ui_group", "ui_label", "ui_unit", "ui_step"):
        assert key in prop, f"{name} missing {key}"
    assert prop["ui_step"] > 0


@pytest.mark.parametrize("name", _FIELDS)
def test_schema_bounds_match_clamp_bounds(name) -> None:
    lo, hi = PARAMETER_BOUNDS[name]
    assert _SCHEMA[name]["minimum"] == lo
    assert _SCHEMA[name]["maximum"] == hi


@pytest.mark.parametrize("name", _FIELDS)
def test_default_and_optimal_inside_bounds(name) -> None:
    lo, hi = PARAMETER_BOUNDS[name]
    band = DEFAULT_OPTIMAL_RANGES[name]
    assert lo <= getattr(SimulationParameters(), name) <= hi
    assert lo <= band.min <= band.optimal <= band.max <= hi


def test_speed_options() -> None:
    assert SPEED_OPTIONS == (1, 2, 5, 10)
