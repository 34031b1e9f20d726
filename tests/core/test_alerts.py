"""Tests for alert rules."""

from greenhouse_twin.core.alerts import (
    CO2_LOW,
    HUMIDITY_HIGH,
    HUMIDITY_LOW,
    LIGHT_LOW,
    TEMPERATURE_HIGH,
    TEMPERATURE_LOW,
    WATER_LEVEL_LOW,
    generate_alerts,
)
from greenhouse_twin.core.scoring import health_score


def test_no_alerts_for_defaults(params_factory) -> None:
    assert generate_alerts(params_factory()) == []


def test_heat_stress_only(params_factory) -> None:
    """30 °C is above the 24 °C max and is the only violation."""
    alerts = generate_alerts(params_factory(temperature=30.0))
    assert [str(a) for a in alerts] == [TEMPERATURE_HIGH]
    assert alerts[0].parameter == "temperature"
    assert alerts[0].severity == "warning"


def test_low_side_messages(params_factory) -> None:
    alerts = generate_alerts(params_factory(temperature=12.0, humidity=40.0))
    assert [a.message for a in alerts] == [TEMPERATURE_LOW, HUMIDITY_LOW]


def test_high_humidity(params_factory) -> None:
    alerts = generate_alerts(params_factory(humidity=90.0))
    assert [a.message for a in alerts] == [HUMIDITY_HIGH]


def test_all_alerts_in_fixed_order(params_factory) -> None:
    """Every rule fires independently and in display order."""
    params = params_factory(
        temperature=10.0, humidity=30.0, light=0.0, co2=300.0, water_level=0.0
    )
    alerts = generate_alerts(params)
    assert [a.parameter for a in alerts] == [
        "temperature",
        "humidity",
        "light",
        "water_level",
        "co2",
    ]
    assert [a.message for a in alerts] == [
        TEMPERATURE_LOW,
        HUMIDITY_LOW,
        LIGHT_LOW,
        WATER_LEVEL_LOW,
        CO2_LOW,
    ]


def test_only_water_level_is_critical(params_factory) -> None:
    params = params_factory(light=10.0, water_level=20.0, co2=320.0)
    severities = {a.parameter: a.severity for a in generate_alerts(params)}
    assert severities == {
        "light": "warning",
        "water_level": "critical",
        "co2": "warning",
    }


def test_high_co2_penalised_but_not_alerted(params_factory) -> None:
    """CO2 above its band lowers health yet raises no alert."""
    params = params_factory(co2=600.0)
    assert generate_alerts(params) == []
    assert health_score(params) == 80.0


def test_no_upper_alerts_for_light_and_water(params_factory) -> None:
    assert generate_alerts(params_factory(light=100.0, water_level=100.0)) == []
