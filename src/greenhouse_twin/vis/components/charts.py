import pandas as pd
import solara

from greenhouse_twin.schemas.columns import ColumnNames
from greenhouse_twin.vis.plotting import plot_growth_series


@solara.component
def GrowthCharts(df: pd.DataFrame, horizon_days: int) -> None:
    """Height, health and yield trajectories of the current run."""
    with solara.Card("Growth Prediction & Analytics"):
        if df.empty:
            solara.Markdown("No Data")
            return

        with solara.Columns([1, 1, 1]):
            with solara.Column():
                fig = plot_growth_series(
                    df, ColumnNames.HEIGHT, "Height (cm)", "cyan", horizon_days=horizon_days
                )
                solara.FigureMatplotlib(fig)

            with solara.Column():
                fig = plot_growth_series(
                    df,
                    ColumnNames.HEALTH,
                    "Health (%)",
                    "green",
                    ylim=(0, 100),
                    fill=True,
                    horizon_days=horizon_days,
                )
                solara.FigureMatplotlib(fig)

            with solara.Column():
                fig = plot_growth_series(
                    df,
                    ColumnNames.YIELD,
                    "Yield (kg)",
                    "amber",
                    fill=True,
                    horizon_days=horizon_days,
                )
                solara.FigureMatplotlib(fig)
