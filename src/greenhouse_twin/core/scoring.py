"""Scoring functions: plant health, projected yield and height.

Health model:
    score = clamp(100 - sum(penalties), 0, 100)

    Penalties are measured from the optimal value but only apply once a
    parameter leaves its [min, max] band:

        temperature   outside band   |t - opt| × 3
        humidity      outside band   |h - opt| × 2
        light         below min      (min - l) × 1.5
        co2           outside band   |c - opt| × 0.1
        water_level   below min      (min - w) × 2

    Light and water level carry no penalty above their max.

Growth model:
    yield  = max_yield × min(day / horizon, 1) × health / 100
    height = seed_height + (day / horizon) × max_growth × health / 100

All functions are pure: they depend on their arguments only, never on the
trajectory that led there.
"""

from typing import Mapping

from greenhouse_twin.schemas import (
    DEFAULT_OPTIMAL_RANGES,
    OptimalRange,
    SimulationParameters,
)
from greenhouse_twin.schemas.defaults import (
    DEFAULT_HORIZON_DAYS,
    DEFAULT_MAX_GROWTH_CM,
    DEFAULT_MAX_YIELD_KG,
    DEFAULT_SEED_HEIGHT_CM,
)

TEMPERATURE_PENALTY = 3.0
HUMIDITY_PENALTY = 2.0
LIGHT_PENALTY = 1.5
CO2_PENALTY = 0.1
WATER_LEVEL_PENALTY = 2.0


def _band_penalty(value: float, band: OptimalRange, weight: float) -> float:
    """Penalty for leaving [min, max] on either side."""
    if band.contains(value):
        return 0.0
    return abs(value - band.optimal) * weight


def _floor_penalty(value: float, band: OptimalRange, weight: float) -> float:
    """Penalty for falling below min only."""
    if value >= band.min:
        return 0.0
    return (band.min - value) * weight


def health_score(
    params: SimulationParameters,
    ranges: Mapping[str, OptimalRange] = DEFAULT_OPTIMAL_RANGES,
) -> float:
    """Compute the 0-100 health score for a parameter set.

    Args:
        params: Current environmental controls.
        ranges: Optimal band per parameter name.

    Returns:
        Health score clamped to [0, 100].
    """
    penalty = (
        _band_penalty(params.temperature, ranges["temperature"], TEMPERATURE_PENALTY)
        + _band_penalty(params.humidity, ranges["humidity"], HUMIDITY_PENALTY)
        + _floor_penalty(params.light, ranges["light"], LIGHT_PENALTY)
        + _band_penalty(params.co2, ranges["co2"], CO2_PENALTY)
        + _floor_penalty(params.water_level, ranges["water_level"], WATER_LEVEL_PENALTY)
    )
    return max(0.0, min(100.0, 100.0 - penalty))


def predicted_yield(
    health: float,
    day: int,
    max_yield: float = DEFAULT_MAX_YIELD_KG,
    horizon: int = DEFAULT_HORIZON_DAYS,
) -> float:
    """Projected yield per plant (kg) for a given health and day."""
    maturity_factor = min(day / horizon, 1.0)
    health_factor = health / 100.0
    return max_yield * maturity_factor * health_factor


def plant_height(
    health: float,
    day: int,
    seed_height: float = DEFAULT_SEED_HEIGHT_CM,
    max_growth: float = DEFAULT_MAX_GROWTH_CM,
    horizon: int = DEFAULT_HORIZON_DAYS,
) -> float:
    """Plant height (cm): linear ramp from the seed height, scaled by health."""
    return seed_height + (day / horizon) * max_growth * (health / 100.0)


def count_optimal(
    params: SimulationParameters,
    ranges: Mapping[str, OptimalRange] = DEFAULT_OPTIMAL_RANGES,
) -> int:
    """Number of parameters sitting inside their [min, max] band."""
    return sum(
        1 for name, band in ranges.items() if band.contains(getattr(params, name))
    )
