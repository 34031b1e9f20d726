"""Per-session twin state.

Every browser session gets its own SimulationEngine and reactive mirror.
Nothing here lives at module level, so sessions never see each other's
plant.
"""

from dataclasses import dataclass, field

import solara

from greenhouse_twin.services.simulation import SimulationEngine
from greenhouse_twin.vis.state.active import ActiveSimulation


@dataclass
class TwinSession:
    """An engine and the reactive mirror bound to it."""

    engine: SimulationEngine = field(default_factory=SimulationEngine)
    active: ActiveSimulation = field(default_factory=ActiveSimulation)

    def __post_init__(self) -> None:
        self.active.bind(self.engine)


def use_session() -> TwinSession:
    """Hook returning this session's twin, created on first render."""
    return solara.use_memo(TwinSession, dependencies=[])
