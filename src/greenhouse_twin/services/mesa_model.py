"""Mesa model integration for the Greenhouse Digital Twin."""

import logging

import mesa
import pandas as pd

from greenhouse_twin.core.game_loop import StepOutcome, execute_step, seed_sample
from greenhouse_twin.schemas import GrowthSample, SimulationParameters, TwinConfig
from greenhouse_twin.schemas.columns import ColumnNames
from greenhouse_twin.services.metrics import growth_dataframe

logger = logging.getLogger(__name__)


class PlantAgent(mesa.Agent):
    """Mesa wrapper for the simulated plant.

    Attributes:
        height: Current height (cm).
        health: Health score recorded on the last simulated day.
        yield_kg: Projected yield recorded on the last simulated day.
    """

    def __init__(self, model: mesa.Model, sample: GrowthSample) -> None:
        super().__init__(model)
        self.apply(sample)

    def apply(self, sample: GrowthSample) -> None:
        """Copy a day's sample onto the agent."""
        self.height: float = sample.height
        self.health: float = sample.health
        self.yield_kg: float = sample.yield_kg

    def step(self) -> None:
        """Model orchestrates the day explicitly."""
        pass


class GreenhouseModel(mesa.Model):
    """The central Mesa model.

    Holds the day counter, the live parameter set and the growth history.
    `running` turns False once the horizon is reached.
    """

    def __init__(
        self,
        config: TwinConfig | None = None,
        params: SimulationParameters | None = None,
    ) -> None:
        """Initialize the model on day 0.

        Args:
            config: Twin configuration.
            params: Starting parameters (defaults to config.initial_parameters).
        """
        super().__init__()
        self.config = config or TwinConfig()
        self.params = params or self.config.initial_parameters
        self.current_day = 0
        self.running = True
        self.last_outcome: StepOutcome | None = None

        seed = seed_sample(self.config)
        self.growth_history: list[GrowthSample] = [seed]
        self.plant = PlantAgent(self, seed)

        self.datacollector = mesa.DataCollector(
            model_reporters={
                ColumnNames.DAY: lambda m: m.current_day,
                ColumnNames.HEIGHT: lambda m: m.plant.height,
                ColumnNames.HEALTH: lambda m: m.plant.health,
                ColumnNames.YIELD: lambda m: m.plant.yield_kg,
            }
        )
        self.datacollector.collect(self)

    def step(self) -> None:
        """Execute one day (delegates to core game loop)."""
        outcome = execute_step(self.current_day, self.params, self.config)
        self.last_outcome = outcome
        if outcome.completed:
            if self.running:
                logger.info(f"Horizon of {self.config.horizon_days} days reached")
            self.running = False
            return

        sample = outcome.sample
        self.growth_history.append(sample)
        self.current_day = sample.day
        self.plant.apply(sample)
        self.datacollector.collect(self)

        if self.current_day >= self.config.horizon_days:
            # Nothing left to simulate; the next step is a no-op.
            self.running = False

    @property
    def latest(self) -> GrowthSample:
        return self.growth_history[-1]

    def get_growth_dataframe(self) -> pd.DataFrame:
        """Growth history as a DataFrame (one row per simulated day)."""
        return growth_dataframe(self.growth_history)
