"""Shared plotting utilities for consistent chart styling."""

import matplotlib
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from greenhouse_twin.schemas.columns import ColumnNames
from greenhouse_twin.vis.constants import CHART_COLOR_MAP

# Ensure non-interactive backend for thread safety in Solara
matplotlib.use("Agg")


def create_figure(figsize=(6, 4), dpi=100) -> tuple[Figure, Axes]:
    """Create a standardized matplotlib figure and axis.

    Returns:
        tuple (Figure, Axes)
    """
    fig = Figure(figsize=figsize, dpi=dpi)
    ax = fig.subplots()

    # Common Styling
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.8)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["left"].set_linewidth(1.2)
    ax.spines["bottom"].set_linewidth(1.2)

    return fig, ax


def plot_growth_series(
    df: pd.DataFrame,
    column: str,
    label: str,
    color_key: str,
    ylim: tuple[float, float] | None = None,
    fill: bool = False,
    horizon_days: int | None = None,
) -> Figure:
    """Plot one growth history column against the simulated day.

    Args:
        df: Growth history (ColumnNames columns).
        column: Column to plot (e.g. ColumnNames.HEIGHT).
        label: Axis and legend label.
        color_key: Key in CHART_COLOR_MAP or a raw hex colour.
        ylim: Optional Y-axis limits.
        fill: Shade the area under the curve.
        horizon_days: Fix the X axis to the full growth cycle.
    """
    fig, ax = create_figure(figsize=(6, 3))
    color = CHART_COLOR_MAP.get(color_key, color_key)

    days = df[ColumnNames.DAY]
    values = df[column]
    ax.plot(days, values, label=label, color=color, linewidth=2.5, alpha=0.9)
    if fill:
        ax.fill_between(days, values, color=color, alpha=0.2)

    ax.set_xlabel("Days", fontsize=11, fontweight="500")
    ax.set_ylabel(label, fontsize=11, fontweight="500")
    ax.legend(loc="best", framealpha=0.9, fontsize=10)

    if horizon_days:
        ax.set_xlim(0, horizon_days)
    if ylim:
        ax.set_ylim(ylim)

    fig.tight_layout()
    return fig
