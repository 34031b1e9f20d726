"""Alert rules derived from the current environmental parameters.

Rules are evaluated in a fixed order (temperature, humidity, light,
water level, co2) and are independent of each other, so several alerts
can be active at once.

Low water is the only critical alert.  CO2 only alerts below its band:
high CO2 lowers the health score but raises no alert.
"""

from typing import Mapping

from greenhouse_twin.schemas import (
    DEFAULT_OPTIMAL_RANGES,
    Alert,
    OptimalRange,
    SimulationParameters,
)

TEMPERATURE_HIGH = "Temperature too high - Risk of heat stress"
TEMPERATURE_LOW = "Temperature too low - Slowed growth"
HUMIDITY_HIGH = "Humidity too high - Risk of fungal disease"
HUMIDITY_LOW = "Humidity too low - Increased water stress"
LIGHT_LOW = "Insufficient light - Reduced photosynthesis"
WATER_LEVEL_LOW = "Water level critical - Immediate action needed"
CO2_LOW = "CO2 levels low - Growth may be limited"


def generate_alerts(
    params: SimulationParameters,
    ranges: Mapping[str, OptimalRange] = DEFAULT_OPTIMAL_RANGES,
) -> list[Alert]:
    """Return the active alerts for a parameter set, in display order."""
    alerts: list[Alert] = []

    temperature = ranges["temperature"]
    if params.temperature > temperature.max:
        alerts.append(Alert(parameter="temperature", message=TEMPERATURE_HIGH))
    elif params.temperature < temperature.min:
        alerts.append(Alert(parameter="temperature", message=TEMPERATURE_LOW))

    humidity = ranges["humidity"]
    if params.humidity > humidity.max:
        alerts.append(Alert(parameter="humidity", message=HUMIDITY_HIGH))
    elif params.humidity < humidity.min:
        alerts.append(Alert(parameter="humidity", message=HUMIDITY_LOW))

    if params.light < ranges["light"].min:
        alerts.append(Alert(parameter="light", message=LIGHT_LOW))

    if params.water_level < ranges["water_level"].min:
        alerts.append(
            Alert(parameter="water_level", severity="critical", message=WATER_LEVEL_LOW)
        )

    if params.co2 < ranges["co2"].min:
        alerts.append(Alert(parameter="co2", message=CO2_LOW))

    return alerts
