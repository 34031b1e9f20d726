"""Simulation state and readout schemas."""

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .config import SimulationParameters

AlertSeverity = Literal["warning", "critical"]
HealthBand = Literal["good", "fair", "poor"]


class GrowthSample(BaseModel):
    """One simulated day of plant growth."""

    day: int = Field(..., ge=0, description="Simulated day")
    height: float = Field(..., description="Plant height (cm)")
    health: float = Field(..., ge=0, le=100, description="Health score (0-100)")
    yield_kg: float = Field(
        ...,
        validation_alias=AliasChoices("yield_kg", "yield"),
        serialization_alias="yield",
        description="Projected yield per plant (kg)",
    )

    model_config = ConfigDict(frozen=True)


class Alert(BaseModel):
    """A single out-of-range condition raised from the current parameters."""

    parameter: str = Field(..., description="Parameter that triggered the alert")
    severity: AlertSeverity = "warning"
    message: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.message

    @property
    def is_critical(self) -> bool:
        return self.severity == "critical"


class SimulationState(BaseModel):
    """Read-only snapshot of a running twin."""

    current_day: int = Field(..., ge=0)
    params: SimulationParameters
    growth_history: tuple[GrowthSample, ...]
    is_running: bool
    speed_multiplier: int

    model_config = ConfigDict(frozen=True)

    @property
    def latest(self) -> GrowthSample:
        return self.growth_history[-1]


class TwinMetrics(BaseModel):
    """Dashboard readout recomputed from the current parameters and day."""

    day: int
    health_score: float = Field(..., description="Health score (0-100)")
    health_band: HealthBand
    predicted_yield: float = Field(..., description="Projected yield per plant (kg)")
    alerts: list[Alert] = Field(default_factory=list)
    optimal_count: int = Field(..., description="Parameters inside their optimal band")
    growth_rate: float = Field(..., description="Average daily growth (cm/day)")
    estimated_revenue: float = Field(..., description="Crop value at current yield")
    days_to_harvest: int
    yield_gap: float = Field(..., description="Yield lost to sub-optimal health (kg)")
    tuber_development: float = Field(..., description="Tuber formation progress (%)")

    model_config = ConfigDict(frozen=True)
