import solara

from greenhouse_twin.schemas import Alert
from greenhouse_twin.vis.constants import (
    COLOR_TWIN_ERROR,
    COLOR_TWIN_PANEL_BG,
    COLOR_TWIN_WARNING,
)


@solara.component
def MetricCard(
    label: str, value: str, color: str = "#1976D2", caption: str = ""
) -> solara.Element:
    """Display a primary metric with visual hierarchy."""
    style = f"padding: 12px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); background-color: {COLOR_TWIN_PANEL_BG};"

    with solara.Column(style=f"{style} border-left: 4px solid {color}; margin: 4px;"):
        solara.HTML(
            tag="div",
            style="font-size: 0.8rem; color: #666; text-transform: uppercase; letter-spacing: 0.5px;",
            unsafe_innerHTML=label,
        )
        solara.HTML(
            tag="div",
            style=f"font-size: 1.8rem; font-weight: 500; color: {color};",
            unsafe_innerHTML=value,
        )
        if caption:
            solara.Text(caption, style="font-size: 0.75rem; color: #888;")


@solara.component
def AlertList(alerts: list[Alert]) -> None:
    """Active alerts; critical ones get the error colour and icon."""
    for alert in alerts:
        color = COLOR_TWIN_ERROR if alert.is_critical else COLOR_TWIN_WARNING
        icon = "🚨" if alert.is_critical else "⚠️"
        solara.HTML(
            tag="div",
            style=(
                f"border: 1px solid {color}; border-left: 4px solid {color}; "
                "border-radius: 6px; padding: 6px 12px; margin: 4px 0;"
                f"font-weight: {600 if alert.is_critical else 400};"
            ),
            unsafe_innerHTML=f"{icon} {alert.message}",
        )
