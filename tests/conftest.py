"""Shared test fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from greenhouse_twin.schemas import SimulationParameters, TwinConfig
from greenhouse_twin.services.simulation import SimulationEngine
from .factories import create_parameters, create_twin_config

SHIPPED_SCENARIO_DIR = Path(__file__).resolve().parent.parent / "scenarios"


@pytest.fixture
def params_factory() -> Callable[..., SimulationParameters]:
    """Fixture that returns the parameter factory function."""
    return create_parameters


@pytest.fixture
def twin_config_factory() -> Callable[..., TwinConfig]:
    """Fixture that returns the twin config factory function."""
    return create_twin_config


@pytest.fixture
def default_config() -> TwinConfig:
    """Return the baseline twin configuration."""
    return TwinConfig()


@pytest.fixture
def engine(default_config: TwinConfig) -> SimulationEngine:
    """Return a fresh engine on day 0."""
    return SimulationEngine(default_config)


@pytest.fixture
def running_engine(engine: SimulationEngine) -> SimulationEngine:
    """Return an engine whose play timer is active."""
    engine.start()
    return engine


@pytest.fixture
def scenario_dir(tmp_path: Path) -> Path:
    """Return an empty scenarios directory."""
    directory = tmp_path / "scenarios"
    directory.mkdir()
    return directory


@pytest.fixture
def shipped_scenario_dir() -> Path:
    """Return the scenarios directory shipped with the project."""
    return SHIPPED_SCENARIO_DIR
