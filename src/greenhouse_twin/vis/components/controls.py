"""Control components for simulation UI."""

import solara

from greenhouse_twin.schemas import PARAMETER_BOUNDS, SimulationParameters
from greenhouse_twin.schemas.defaults import SPEED_OPTIONS
from greenhouse_twin.vis.state import TwinSession


@solara.component
def ParameterSlider(session: TwinSession, name: str):
    """Slider for one environmental parameter, driven by its schema metadata."""
    engine = session.engine
    field = SimulationParameters.model_fields[name]
    extra = field.json_schema_extra or {}
    lo, hi = PARAMETER_BOUNDS[name]
    unit = extra.get("ui_unit", "")
    band = engine.config.optimal_ranges[name]

    state = session.active.state.value
    value = getattr(state.params, name) if state else field.default

    def on_value(new_value: float):
        engine.set_parameter(name, new_value)

    with solara.Column(style="margin-bottom: 8px;"):
        solara.SliderFloat(
            label=f"{extra.get('ui_label', name)} ({value:g}{unit})",
            value=value,
            min=lo,
            max=hi,
            step=extra.get("ui_step", 1.0),
            on_value=on_value,
        )
        solara.Text(
            f"Optimal: {band.optimal:g}{unit} (range {band.min:g}-{band.max:g})",
            style="font-size: 0.75rem; color: #16a34a; margin-top: -8px;",
        )


@solara.component
def PlaybackControls(session: TwinSession):
    """Play/pause and reset buttons."""
    is_running = session.active.is_running
    with solara.Row():
        solara.Button(
            label="⏸ Pause" if is_running else "▶ Start Simulation",
            on_click=session.engine.toggle,
            color="error" if is_running else "success",
            style="flex: 1; font-weight: 600;",
        )
        solara.Button(
            label="🔄 Reset",
            on_click=session.engine.reset,
            outlined=True,
        )


@solara.component
def SpeedSelector(session: TwinSession):
    """Simulated days per second."""
    state = session.active.state.value
    current = state.speed_multiplier if state else SPEED_OPTIONS[0]
    solara.Text(
        f"Simulation Speed: {current}x",
        style="font-size: 0.85rem; font-weight: 500; color: #666;",
    )
    solara.ToggleButtonsSingle(
        value=current,
        values=list(SPEED_OPTIONS),
        on_value=session.engine.set_speed,
    )
