"""Centralized metrics calculation for the dashboard readout.

This module provides pure functions to calculate derived metrics (revenue,
growth rate, harvest countdown, etc.) from a state snapshot, ensuring the
live dashboard and the headless runner report the same numbers.
"""

from typing import Sequence

import pandas as pd

from greenhouse_twin.core.alerts import generate_alerts
from greenhouse_twin.core.scoring import count_optimal, health_score, predicted_yield
from greenhouse_twin.schemas import GrowthSample, SimulationState, TwinConfig, TwinMetrics
from greenhouse_twin.schemas.columns import ColumnNames
from greenhouse_twin.schemas.data import HealthBand
from greenhouse_twin.schemas.defaults import (
    HEALTH_FAIR_THRESHOLD,
    HEALTH_GOOD_THRESHOLD,
    TUBER_ONSET_DAY,
)


def growth_dataframe(history: Sequence[GrowthSample]) -> pd.DataFrame:
    """Growth history as a DataFrame (one row per simulated day)."""
    return pd.DataFrame(
        [s.model_dump(by_alias=True) for s in history],
        columns=list(ColumnNames.ALL),
    )


def health_band(health: float) -> HealthBand:
    """Classify a health score for colour coding."""
    if health >= HEALTH_GOOD_THRESHOLD:
        return "good"
    if health >= HEALTH_FAIR_THRESHOLD:
        return "fair"
    return "poor"


def calculate_growth_rate(history: Sequence[GrowthSample], current_day: int) -> float:
    """Average daily height gain (cm/day) since the seed sample."""
    if len(history) < 2 or current_day <= 0:
        return 0.0
    return (history[-1].height - history[0].height) / current_day


def estimate_revenue(yield_kg: float, config: TwinConfig) -> float:
    """Crop value for the whole bed at the given per-plant yield."""
    return yield_kg * config.plant_count * config.price_per_kg


def days_to_harvest(current_day: int, config: TwinConfig) -> int:
    """Days left until the end of the growth cycle (never negative)."""
    return max(0, config.horizon_days - current_day)


def tuber_development(current_day: int, config: TwinConfig) -> float:
    """Tuber formation progress (0-100%), starting at TUBER_ONSET_DAY."""
    span = config.horizon_days - TUBER_ONSET_DAY
    if span <= 0:
        return 100.0 if current_day >= config.horizon_days else 0.0
    progress = (current_day - TUBER_ONSET_DAY) / span
    return max(0.0, min(1.0, progress)) * 100.0


def calculate_metrics(state: SimulationState, config: TwinConfig) -> TwinMetrics:
    """Build the full dashboard readout for a state snapshot.

    Health, yield and alerts come from the *current* parameters and day,
    not from the stored history.

    Args:
        state: Engine snapshot.
        config: Twin configuration used by the engine.

    Returns:
        TwinMetrics object.
    """
    health = health_score(state.params, config.optimal_ranges)
    yield_kg = predicted_yield(
        health,
        state.current_day,
        max_yield=config.max_yield_kg,
        horizon=config.horizon_days,
    )
    return TwinMetrics(
        day=state.current_day,
        health_score=health,
        health_band=health_band(health),
        predicted_yield=yield_kg,
        alerts=generate_alerts(state.params, config.optimal_ranges),
        optimal_count=count_optimal(state.params, config.optimal_ranges),
        growth_rate=calculate_growth_rate(state.growth_history, state.current_day),
        estimated_revenue=estimate_revenue(yield_kg, config),
        days_to_harvest=days_to_harvest(state.current_day, config),
        yield_gap=config.max_yield_kg - yield_kg,
        tuber_development=tuber_development(state.current_day, config),
    )
