"""Tests for the Mesa model wrapper."""

import pytest

from greenhouse_twin.schemas.columns import ColumnNames
from greenhouse_twin.services.mesa_model import GreenhouseModel, PlantAgent


def test_model_starts_with_seed(default_config) -> None:
    model = GreenhouseModel(default_config)
    assert model.current_day == 0
    assert model.running
    assert model.last_outcome is None
    assert isinstance(model.plant, PlantAgent)
    assert (model.plant.height, model.plant.health, model.plant.yield_kg) == (
        5.0,
        100.0,
        0.0,
    )


def test_explicit_params_override_config(default_config, params_factory) -> None:
    params = params_factory(humidity=50.0)
    model = GreenhouseModel(default_config, params)
    assert model.params is params
    model.step()
    assert model.latest.health == pytest.approx(64.0)


def test_step_updates_plant_and_collector(default_config) -> None:
    model = GreenhouseModel(default_config)
    for _ in range(3):
        model.step()

    assert model.current_day == 3
    assert model.plant.height == pytest.approx(6.5)
    df = model.datacollector.get_model_vars_dataframe()
    assert len(df) == 4
    assert df[ColumnNames.DAY].tolist() == [0, 1, 2, 3]


def test_collector_matches_history(default_config) -> None:
    model = GreenhouseModel(default_config)
    for _ in range(10):
        model.step()

    collected = model.datacollector.get_model_vars_dataframe().reset_index(drop=True)
    history = model.get_growth_dataframe()
    assert list(history.columns) == list(ColumnNames.ALL)
    for column in ColumnNames.ALL:
        assert collected[column].tolist() == pytest.approx(history[column].tolist())


def test_model_stops_at_horizon(twin_config_factory) -> None:
    model = GreenhouseModel(twin_config_factory(horizon_days=5))
    for _ in range(5):
        model.step()
    assert model.current_day == 5
    assert model.running is False

    model.step()
    assert model.last_outcome.completed
    assert model.current_day == 5
    assert len(model.growth_history) == 6
