"""Schemas package.

- config.py: Configuration models (SimulationParameters, OptimalRange, TwinConfig)
- data.py: Simulation data models (GrowthSample, SimulationState, Alert, TwinMetrics)
"""

from .config import (
    DEFAULT_OPTIMAL_RANGES,
    PARAMETER_BOUNDS,
    OptimalRange,
    SimulationParameters,
    TwinConfig,
)
from .data import (
    Alert,
    GrowthSample,
    SimulationState,
    TwinMetrics,
)

__all__ = [
    "DEFAULT_OPTIMAL_RANGES",
    "PARAMETER_BOUNDS",
    "OptimalRange",
    "SimulationParameters",
    "TwinConfig",
    "Alert",
    "GrowthSample",
    "SimulationState",
    "TwinMetrics",
]
