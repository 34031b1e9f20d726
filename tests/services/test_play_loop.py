"""Tests for the async play loop.

The tick interval is patched to zero so the loop only yields to the event
loop between ticks.
"""

import asyncio
import logging

import pytest

from greenhouse_twin.services.simulation import SimulationEngine


@pytest.fixture
def fast_engine(monkeypatch, engine: SimulationEngine) -> SimulationEngine:
    monkeypatch.setattr(SimulationEngine, "tick_interval", property(lambda self: 0.0))
    return engine


@pytest.fixture
def tick_counter(monkeypatch, fast_engine: SimulationEngine) -> list[int]:
    """Record the day on which every tick fires."""
    calls: list[int] = []
    original = fast_engine.tick

    def counting_tick():
        calls.append(fast_engine.current_day)
        return original()

    monkeypatch.setattr(fast_engine, "tick", counting_tick)
    return calls


def test_loop_without_start_returns_immediately(fast_engine, tick_counter) -> None:
    asyncio.run(fast_engine.play_loop())
    assert tick_counter == []
    assert fast_engine.current_day == 0


def test_loop_runs_full_cycle(fast_engine, tick_counter) -> None:
    fast_engine.start()
    asyncio.run(fast_engine.play_loop())

    assert fast_engine.current_day == 90
    assert fast_engine.is_running is False
    assert len(tick_counter) == 91


def test_pause_while_sleeping_stops_loop(fast_engine, tick_counter) -> None:
    async def scenario() -> None:
        fast_engine.start()
        task = asyncio.create_task(fast_engine.play_loop())
        await asyncio.sleep(0)
        fast_engine.pause()
        await task

    asyncio.run(scenario())
    assert tick_counter == []
    assert fast_engine.current_day == 0


def test_reset_while_sleeping_stops_loop(fast_engine, tick_counter) -> None:
    async def scenario() -> None:
        fast_engine.start()
        task = asyncio.create_task(fast_engine.play_loop())
        for _ in range(5):
            await asyncio.sleep(0)
        fast_engine.reset()
        await task

    asyncio.run(scenario())
    assert fast_engine.current_day == 0
    assert fast_engine.is_running is False
    assert len(fast_engine.get_state().growth_history) == 1


def test_restart_leaves_single_active_loop(fast_engine, tick_counter) -> None:
    """A loop left over from before a pause never ticks alongside a new one."""

    async def scenario() -> None:
        fast_engine.start()
        stale = asyncio.create_task(fast_engine.play_loop())
        await asyncio.sleep(0)
        fast_engine.pause()
        fast_engine.start()
        fresh = asyncio.create_task(fast_engine.play_loop())
        await asyncio.gather(stale, fresh)

    asyncio.run(scenario())
    assert len(tick_counter) == 91
    assert tick_counter[:90] == list(range(90))


def test_cancel_propagates(fast_engine) -> None:
    async def scenario() -> None:
        fast_engine.start()
        task = asyncio.create_task(fast_engine.play_loop())
        await asyncio.sleep(0)
        task.cancel()
        await task

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(scenario())


def test_error_in_tick_stops_run_and_logs(
    monkeypatch, fast_engine, caplog
) -> None:
    def broken_step():
        raise RuntimeError("sensor offline")

    monkeypatch.setattr(fast_engine, "step", broken_step)
    seen = []
    fast_engine.subscribe(seen.append)
    fast_engine.start()

    with caplog.at_level(logging.ERROR, logger="greenhouse_twin.services.simulation"):
        asyncio.run(fast_engine.play_loop())

    assert fast_engine.is_running is False
    assert "sensor offline" in caplog.text
    assert seen[-1].is_running is False
