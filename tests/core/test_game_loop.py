"""Tests for the single-day step function."""

import pytest

from greenhouse_twin.core.game_loop import execute_step, seed_sample


def test_seed_sample(default_config) -> None:
    seed = seed_sample(default_config)
    assert (seed.day, seed.height, seed.health, seed.yield_kg) == (0, 5.0, 100.0, 0.0)


def test_first_day_at_full_health(default_config, params_factory) -> None:
    outcome = execute_step(0, params_factory(), default_config)
    assert not outcome.completed
    sample = outcome.sample
    assert sample.day == 1
    assert sample.health == 100.0
    assert sample.height == pytest.approx(5.5)
    assert sample.yield_kg == pytest.approx(25.0 / 90)


def test_step_uses_given_parameters(default_config, params_factory) -> None:
    """Health reflects the parameters passed in, not any earlier state."""
    outcome = execute_step(44, params_factory(temperature=30.0), default_config)
    sample = outcome.sample
    assert sample.day == 45
    assert sample.health == pytest.approx(73.0)
    assert sample.height == pytest.approx(5 + 0.5 * 45 * 0.73)
    assert sample.yield_kg == pytest.approx(25 * 0.5 * 0.73)


def test_last_day(default_config, params_factory) -> None:
    outcome = execute_step(89, params_factory(), default_config)
    assert outcome.sample.day == 90
    assert outcome.sample.yield_kg == pytest.approx(25.0)
    assert outcome.sample.height == pytest.approx(50.0)


def test_horizon_completes_without_sample(default_config, params_factory) -> None:
    outcome = execute_step(90, params_factory(), default_config)
    assert outcome.completed
    assert outcome.sample is None


def test_custom_horizon(twin_config_factory, params_factory) -> None:
    config = twin_config_factory(horizon_days=10, max_yield_kg=5.0)
    assert execute_step(9, params_factory(), config).sample.yield_kg == pytest.approx(
        5.0
    )
    assert execute_step(10, params_factory(), config).completed
