"""Configuration schemas for the digital twin."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from greenhouse_twin.schemas.defaults import (
    CO2_MAX,
    CO2_MIN,
    CO2_STEP,
    DEFAULT_CO2,
    DEFAULT_HORIZON_DAYS,
    DEFAULT_HUMIDITY,
    DEFAULT_LIGHT,
    DEFAULT_MAX_GROWTH_CM,
    DEFAULT_MAX_YIELD_KG,
    DEFAULT_PLANT_COUNT,
    DEFAULT_PRICE_PER_KG,
    DEFAULT_SEED_HEIGHT_CM,
    DEFAULT_SPEED_MULTIPLIER,
    DEFAULT_TEMPERATURE,
    DEFAULT_WATER_LEVEL,
    HUMIDITY_MAX,
    HUMIDITY_MIN,
    HUMIDITY_STEP,
    LIGHT_MAX,
    LIGHT_MIN,
    LIGHT_STEP,
    OPTIMAL_CO2,
    OPTIMAL_HUMIDITY,
    OPTIMAL_LIGHT,
    OPTIMAL_TEMPERATURE,
    OPTIMAL_WATER_LEVEL,
    SPEED_OPTIONS,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    TEMPERATURE_STEP,
    WATER_LEVEL_MAX,
    WATER_LEVEL_MIN,
    WATER_LEVEL_STEP,
)

# ---------------------------------------------------------------------------
# UI metadata helpers, attached to each Field via json_schema_extra.
# Keys:
#   ui_group  : sidebar card heading
#   ui_label  : human-readable control label
#   ui_unit   : unit suffix shown next to the value
#   ui_step   : slider increment
# ---------------------------------------------------------------------------


def _ui(group: str, label: str, unit: str = "", step: float = 1.0) -> dict:
    """Build json_schema_extra dict for a parameter field."""
    return {"ui_group": group, "ui_label": label, "ui_unit": unit, "ui_step": step}


class SimulationParameters(BaseModel):
    """The five environmental controls of the greenhouse.

    Bounds are enforced on construction: building a parameter set with an
    out-of-range value raises ``ValidationError``.  Interactive updates go
    through ``SimulationEngine.set_parameter``, which clamps instead.
    """

    temperature: float = Field(
        DEFAULT_TEMPERATURE,
        ge=TEMPERATURE_MIN,
        le=TEMPERATURE_MAX,
        description="Air temperature (°C)",
        json_schema_extra=_ui("Environment", "Temperature", "°C", TEMPERATURE_STEP),
    )
    humidity: float = Field(
        DEFAULT_HUMIDITY,
        ge=HUMIDITY_MIN,
        le=HUMIDITY_MAX,
        description="Relative humidity (%)",
        json_schema_extra=_ui("Environment", "Humidity", "%", HUMIDITY_STEP),
    )
    light: float = Field(
        DEFAULT_LIGHT,
        ge=LIGHT_MIN,
        le=LIGHT_MAX,
        description="Light intensity (% of max)",
        json_schema_extra=_ui("Environment", "Light Intensity", "%", LIGHT_STEP),
    )
    co2: float = Field(
        DEFAULT_CO2,
        ge=CO2_MIN,
        le=CO2_MAX,
        description="CO2 concentration (ppm)",
        json_schema_extra=_ui("Environment", "CO2 Level", "ppm", CO2_STEP),
    )
    water_level: float = Field(
        DEFAULT_WATER_LEVEL,
        ge=WATER_LEVEL_MIN,
        le=WATER_LEVEL_MAX,
        description="Reservoir water level (% of capacity)",
        json_schema_extra=_ui("Environment", "Water Level", "%", WATER_LEVEL_STEP),
    )

    model_config = ConfigDict(frozen=True)


# Hard input bounds per parameter, matching the Field(ge=..., le=...) limits.
PARAMETER_BOUNDS: dict[str, tuple[float, float]] = {
    "temperature": (TEMPERATURE_MIN, TEMPERATURE_MAX),
    "humidity": (HUMIDITY_MIN, HUMIDITY_MAX),
    "light": (LIGHT_MIN, LIGHT_MAX),
    "co2": (CO2_MIN, CO2_MAX),
    "water_level": (WATER_LEVEL_MIN, WATER_LEVEL_MAX),
}


class OptimalRange(BaseModel):
    """Healthy band for one parameter."""

    min: float
    max: float
    optimal: float

    model_config = ConfigDict(frozen=True)

    def contains(self, value: float) -> bool:
        """Return True if value lies inside [min, max]."""
        return self.min <= value <= self.max


def _range(bounds: tuple[float, float, float]) -> OptimalRange:
    lo, hi, opt = bounds
    return OptimalRange(min=lo, max=hi, optimal=opt)


DEFAULT_OPTIMAL_RANGES: dict[str, OptimalRange] = {
    "temperature": _range(OPTIMAL_TEMPERATURE),
    "humidity": _range(OPTIMAL_HUMIDITY),
    "light": _range(OPTIMAL_LIGHT),
    "co2": _range(OPTIMAL_CO2),
    "water_level": _range(OPTIMAL_WATER_LEVEL),
}


class TwinConfig(BaseModel):
    """Root configuration for a digital twin session or scenario file."""

    name: str = "Baseline"
    description: str = ""

    horizon_days: int = Field(
        DEFAULT_HORIZON_DAYS,
        gt=0,
        description="Length of the growth cycle (days)",
    )
    max_yield_kg: float = Field(
        DEFAULT_MAX_YIELD_KG,
        gt=0,
        description="Yield per plant at maturity with full health (kg)",
    )
    seed_height_cm: float = Field(
        DEFAULT_SEED_HEIGHT_CM,
        ge=0,
        description="Plant height on day 0 (cm)",
    )
    max_growth_cm: float = Field(
        DEFAULT_MAX_GROWTH_CM,
        ge=0,
        description="Height gained over the full horizon at 100% health (cm)",
    )
    speed_multiplier: int = Field(
        DEFAULT_SPEED_MULTIPLIER,
        description="Simulated days per wall-clock second",
    )

    # Revenue estimate shown on the dashboard
    plant_count: int = Field(DEFAULT_PLANT_COUNT, gt=0)
    price_per_kg: float = Field(DEFAULT_PRICE_PER_KG, ge=0)

    initial_parameters: SimulationParameters = Field(
        default_factory=SimulationParameters
    )
    optimal_ranges: dict[str, OptimalRange] = Field(
        default_factory=lambda: dict(DEFAULT_OPTIMAL_RANGES)
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("speed_multiplier")
    @classmethod
    def _check_speed(cls, value: int) -> int:
        if value not in SPEED_OPTIONS:
            raise ValueError(f"speed_multiplier must be one of {SPEED_OPTIONS}")
        return value

    @field_validator("optimal_ranges")
    @classmethod
    def _check_ranges(cls, value: dict[str, OptimalRange]) -> dict[str, OptimalRange]:
        missing = set(SimulationParameters.model_fields) - set(value)
        if missing:
            raise ValueError(f"optimal_ranges missing {sorted(missing)}")
        return value
