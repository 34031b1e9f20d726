import solara
import solara.lab

from greenhouse_twin.vis.state import TwinSession


@solara.component
def SimulationController(session: TwinSession) -> solara.Element:
    """Invisible component to handle the play loop of one session."""
    # Using raise_error=False to gracefully handle asyncio cancellation races
    solara.lab.use_task(
        session.engine.play_loop,
        dependencies=[session.active.is_running],
        raise_error=False,
    )
    return solara.Div(style="display: none;")
