"""Tests for per-session twin state."""

import pytest

import greenhouse_twin.vis.state.session as session_module
from greenhouse_twin.services.simulation import SimulationEngine
from greenhouse_twin.vis.state import TwinSession


def test_session_binds_mirror_to_its_engine() -> None:
    session = TwinSession()
    assert session.active.state.value.current_day == 0
    session.engine.step()
    assert session.active.state.value.current_day == 1


def test_sessions_do_not_share_an_engine() -> None:
    first = TwinSession()
    second = TwinSession()
    assert first.engine is not second.engine

    second.engine.set_parameter("temperature", 30.0)
    assert first.engine.params.temperature == 22.0
    assert first.active.metrics.value.health_score == 100.0
    assert second.active.metrics.value.health_score == pytest.approx(73.0)


def test_playback_in_one_session_leaves_the_other_alone() -> None:
    first = TwinSession()
    second = TwinSession()

    second.engine.start()
    for _ in range(5):
        second.engine.tick()

    assert first.engine.is_running is False
    assert first.active.is_running is False
    assert first.active.state.value.current_day == 0
    assert len(first.active.growth_dataframe()) == 1
    assert second.active.state.value.current_day == 5


def test_reset_in_one_session_leaves_the_other_alone() -> None:
    first = TwinSession()
    second = TwinSession()
    first.engine.step()
    second.engine.step()

    second.engine.reset()
    assert first.engine.current_day == 1
    assert first.active.state.value.current_day == 1


def test_no_module_level_engine() -> None:
    assert not any(
        isinstance(value, SimulationEngine) for value in vars(session_module).values()
    )
