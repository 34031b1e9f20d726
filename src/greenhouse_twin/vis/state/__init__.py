"""State management package for visualization infrastructure.

- active: Reactive mirror of an engine (snapshot + dashboard metrics)
- session: Per-session engine and mirror, created by `use_session`
"""

from greenhouse_twin.vis.state.active import ActiveSimulation
from greenhouse_twin.vis.state.session import TwinSession, use_session

__all__ = [
    "ActiveSimulation",
    "TwinSession",
    "use_session",
]
