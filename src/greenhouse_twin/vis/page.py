"""Root page for the Solara application.

Logic is distributed across `vis/components` and `vis/state`.
"""

import logging
from pathlib import Path

import solara

from greenhouse_twin.schemas import SimulationParameters
from greenhouse_twin.services.config_manager import list_scenarios
from greenhouse_twin.vis.components import (
    AlertList,
    GrowthCharts,
    MetricCard,
    ParameterSlider,
    PlaybackControls,
    SimulationController,
    SpeedSelector,
)
from greenhouse_twin.vis.constants import (
    COLOR_TWIN_PRIMARY,
    COLOR_TWIN_SUCCESS,
    COLOR_TWIN_YIELD,
    HEALTH_BAND_COLORS,
)
from greenhouse_twin.vis.state import TwinSession, use_session

# --- Logging Configuration ---
logger = logging.getLogger("greenhouse_twin")
logger.setLevel(logging.INFO)
if logger.handlers:
    logger.handlers.clear()

_log_dir = Path("outputs")
_log_dir.mkdir(exist_ok=True)
file_handler = logging.FileHandler(_log_dir / "simulation.log")
file_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)
stream_handler = logging.StreamHandler()
stream_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)

logger.addHandler(file_handler)
logger.addHandler(stream_handler)


@solara.component
def ScenarioPicker(session: TwinSession):
    """Load a preset from the scenarios directory."""
    scenarios = list_scenarios()
    error, set_error = solara.use_state("")

    if not scenarios:
        return

    def on_pick(filename: str):
        try:
            session.engine.load_scenario(filename)
            set_error("")
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Error loading scenario {filename}: {e}")
            set_error(str(e))

    solara.Select(label="Scenario", values=scenarios, value=None, on_value=on_pick)
    if error:
        solara.Error(error)


@solara.component
def MetricsRow(session: TwinSession):
    engine = session.engine
    metrics = session.active.metrics.value
    if metrics is None:
        return

    horizon = engine.config.horizon_days
    with solara.Row(style="flex-wrap: wrap;"):
        MetricCard("Day", f"{metrics.day}/{horizon}", COLOR_TWIN_PRIMARY)
        MetricCard(
            "Health Score",
            f"{metrics.health_score:.0f}%",
            HEALTH_BAND_COLORS[metrics.health_band],
        )
        MetricCard(
            "Predicted Yield",
            f"{metrics.predicted_yield:.1f} kg",
            COLOR_TWIN_SUCCESS,
            caption=f"+{metrics.yield_gap:.1f} kg possible at full health",
        )
        MetricCard(
            "Optimal Conditions",
            f"{metrics.optimal_count}/{len(SimulationParameters.model_fields)}",
            COLOR_TWIN_PRIMARY,
            caption="Parameters within optimal range",
        )
        MetricCard(
            "Growth Rate",
            f"{metrics.growth_rate:.2f} cm/day",
            COLOR_TWIN_SUCCESS,
            caption="Average daily growth",
        )
        MetricCard(
            "Est. Revenue",
            f"${metrics.estimated_revenue:,.0f}",
            COLOR_TWIN_YIELD,
            caption=(
                f"Based on {engine.config.plant_count} plants "
                f"@ ${engine.config.price_per_kg:g}/kg"
            ),
        )
        MetricCard(
            "Time to Harvest",
            f"{metrics.days_to_harvest} days",
            COLOR_TWIN_PRIMARY,
            caption=f"Tuber development {metrics.tuber_development:.0f}%",
        )


@solara.component
def Page():
    session = use_session()

    # Mount the controller (handles the play loop when is_running becomes True)
    SimulationController(session)

    with solara.Sidebar():
        solara.Markdown("**ENVIRONMENTAL PARAMETERS**")
        for name in SimulationParameters.model_fields:
            ParameterSlider(session, name)
        PlaybackControls(session)
        SpeedSelector(session)
        ScenarioPicker(session)

    with solara.Column():
        solara.Title("Digital Twin Simulator")
        MetricsRow(session)

        metrics = session.active.metrics.value
        if metrics is not None:
            AlertList(metrics.alerts)

        GrowthCharts(
            session.active.growth_dataframe(), session.engine.config.horizon_days
        )
