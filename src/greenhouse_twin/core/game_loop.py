"""Core game loop: pure business logic for one simulated day.

A step:
    1. Stops at the horizon: day never advances past `horizon_days`.
    2. Scores health from the parameters as they are *now*, so slider
       moves made mid-run apply from the very next day.
    3. Derives height and yield for the new day.

All functions operate on schema objects with zero framework
dependencies (no Mesa, no Solara).
"""

from __future__ import annotations

from dataclasses import dataclass

from greenhouse_twin.core.scoring import health_score, plant_height, predicted_yield
from greenhouse_twin.schemas import GrowthSample, SimulationParameters, TwinConfig
from greenhouse_twin.schemas.defaults import SEED_HEALTH, SEED_YIELD_KG


@dataclass
class StepOutcome:
    """Result of one attempted day advance."""

    sample: GrowthSample | None = None
    completed: bool = False  # Horizon reached, nothing appended


def seed_sample(config: TwinConfig) -> GrowthSample:
    """The day-0 record every growth history starts with."""
    return GrowthSample(
        day=0,
        height=config.seed_height_cm,
        health=SEED_HEALTH,
        yield_kg=SEED_YIELD_KG,
    )


def execute_step(
    current_day: int,
    params: SimulationParameters,
    config: TwinConfig,
) -> StepOutcome:
    """Advance the plant one day.

    Args:
        current_day: Last simulated day.
        params: Environmental controls as of this tick.
        config: Twin configuration (horizon, growth constants, ranges).

    Returns:
        StepOutcome carrying the new sample, or `completed=True` when the
        horizon has already been reached.
    """
    next_day = current_day + 1
    if next_day > config.horizon_days:
        return StepOutcome(completed=True)

    health = health_score(params, config.optimal_ranges)
    height = plant_height(
        health,
        next_day,
        seed_height=config.seed_height_cm,
        max_growth=config.max_growth_cm,
        horizon=config.horizon_days,
    )
    yield_value = predicted_yield(
        health,
        next_day,
        max_yield=config.max_yield_kg,
        horizon=config.horizon_days,
    )
    return StepOutcome(
        sample=GrowthSample(
            day=next_day, height=height, health=health, yield_kg=yield_value
        )
    )
