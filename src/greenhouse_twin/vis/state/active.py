"""Active simulation state - the live snapshot and readout of the engine."""

from typing import TYPE_CHECKING, Callable

import pandas as pd
import solara

from greenhouse_twin.schemas import SimulationState, TwinMetrics
from greenhouse_twin.services.metrics import calculate_metrics, growth_dataframe

if TYPE_CHECKING:
    from greenhouse_twin.services.simulation import SimulationEngine


class ActiveSimulation:
    """Reactive mirror of a SimulationEngine.

    The engine pushes a new snapshot after every mutation; components read
    `state` and `metrics` and re-render when they change.
    """

    def __init__(self):
        self.state: solara.Reactive[SimulationState | None] = solara.reactive(None)
        self.metrics: solara.Reactive[TwinMetrics | None] = solara.reactive(None)
        self._engine: "SimulationEngine | None" = None
        self._unsubscribe: Callable[[], None] | None = None

    def bind(self, engine: "SimulationEngine") -> None:
        """Follow an engine, replacing any previous binding."""
        if self._unsubscribe is not None:
            self._unsubscribe()
        self._engine = engine
        self._unsubscribe = engine.subscribe(self._on_state)
        self._on_state(engine.get_state())

    def _on_state(self, state: SimulationState) -> None:
        self.state.value = state
        self.metrics.value = calculate_metrics(state, self._engine.config)

    @property
    def is_running(self) -> bool:
        state = self.state.value
        return bool(state and state.is_running)

    def growth_dataframe(self) -> pd.DataFrame:
        """Growth history of the current snapshot, ready for charting."""
        state = self.state.value
        return growth_dataframe(state.growth_history if state else ())
