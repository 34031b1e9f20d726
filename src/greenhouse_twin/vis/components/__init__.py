"""Reusable solara components for the twin dashboard."""

from greenhouse_twin.vis.components.cards import AlertList, MetricCard
from greenhouse_twin.vis.components.charts import GrowthCharts
from greenhouse_twin.vis.components.controls import (
    ParameterSlider,
    PlaybackControls,
    SpeedSelector,
)
from greenhouse_twin.vis.components.system import SimulationController

__all__ = [
    "AlertList",
    "MetricCard",
    "GrowthCharts",
    "ParameterSlider",
    "PlaybackControls",
    "SpeedSelector",
    "SimulationController",
]
