"""Simulation engine - handles simulation execution logic.

This module contains the stateful engine that owns one twin session. It
handles parameter updates, playback control, stepping, and the async
play loop.
"""

import asyncio
import logging
import math
from pathlib import Path
from typing import Callable

from greenhouse_twin.core.alerts import generate_alerts
from greenhouse_twin.core.scoring import health_score, predicted_yield
from greenhouse_twin.schemas import (
    PARAMETER_BOUNDS,
    Alert,
    GrowthSample,
    SimulationParameters,
    SimulationState,
    TwinConfig,
    TwinMetrics,
)
from greenhouse_twin.schemas.defaults import SPEED_OPTIONS
from greenhouse_twin.services.config_manager import load_scenario
from greenhouse_twin.services.mesa_model import GreenhouseModel
from greenhouse_twin.services.metrics import calculate_metrics

logger = logging.getLogger(__name__)

StateListener = Callable[[SimulationState], None]

# Dashboard spelling -> schema field name
PARAMETER_ALIASES = {"waterLevel": "water_level"}


class SimulationEngine:
    """Stateful simulation engine for a single twin session.

    Out-of-range values passed to `set_parameter` are clamped silently to
    the parameter's input bounds. Unknown names, non-numeric values and
    unsupported speeds raise ValueError.
    """

    def __init__(self, config: TwinConfig | None = None) -> None:
        """Initialize the engine on day 0.

        Args:
            config: Twin configuration. Defaults to the baseline twin.
        """
        self.config = config or TwinConfig()
        self.model = GreenhouseModel(self.config)
        self.is_running = False
        self.speed_multiplier = self.config.speed_multiplier

        # Bumped on every start/pause/reset so a sleeping play loop can
        # tell that it no longer owns the run.
        self._generation = 0
        self._listeners: list[StateListener] = []

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    def get_state(self) -> SimulationState:
        """Return a read-only snapshot of the session."""
        return SimulationState(
            current_day=self.model.current_day,
            params=self.model.params,
            growth_history=tuple(self.model.growth_history),
            is_running=self.is_running,
            speed_multiplier=self.speed_multiplier,
        )

    @property
    def current_day(self) -> int:
        return self.model.current_day

    @property
    def params(self) -> SimulationParameters:
        return self.model.params

    @property
    def tick_interval(self) -> float:
        """Seconds of wall-clock time between ticks."""
        return 1.0 / self.speed_multiplier

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a callback receiving the new state after every change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        state = self.get_state()
        for listener in list(self._listeners):
            listener(state)

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def set_parameter(self, name: str, value: float) -> float:
        """Update a single environmental parameter.

        Args:
            name: One of the five parameter names ("waterLevel" accepted).
            value: New value; clamped to the parameter's input bounds.

        Returns:
            The value actually applied.

        Raises:
            ValueError: Unknown parameter name or non-numeric value.
        """
        field = PARAMETER_ALIASES.get(name, name)
        if field not in PARAMETER_BOUNDS:
            raise ValueError(
                f"Unknown parameter '{name}'. Expected one of {list(PARAMETER_BOUNDS)}"
            )
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Parameter '{name}' must be numeric, got {value!r}")
        if math.isnan(value):
            raise ValueError(f"Parameter '{name}' must not be NaN")

        lo, hi = PARAMETER_BOUNDS[field]
        applied = float(min(max(value, lo), hi))
        if applied != value:
            logger.debug(f"Clamped {field}={value} to {applied} (range [{lo}, {hi}])")

        self.model.params = self.model.params.model_copy(update={field: applied})
        self._notify()
        return applied

    def set_parameters(self, params: SimulationParameters) -> None:
        """Replace all five parameters at once."""
        self.model.params = params
        self._notify()

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start (or resume) the day-advance timer."""
        if self.is_running:
            return
        if self.model.current_day >= self.config.horizon_days:
            logger.warning("Growth cycle already complete; reset before starting")
            return
        self.is_running = True
        self._generation += 1
        logger.info(
            f"Simulation started on day {self.model.current_day} "
            f"at {self.speed_multiplier}x"
        )
        self._notify()

    def pause(self) -> None:
        """Stop the timer. No tick fires after this returns."""
        if not self.is_running:
            return
        self._stop()
        logger.info(f"Simulation paused on day {self.model.current_day}")
        self._notify()

    def toggle(self) -> None:
        """Play/pause button handler."""
        if self.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Return to day 0 with the configured initial parameters.

        The speed multiplier is left unchanged.
        """
        self._stop()
        self.model = GreenhouseModel(self.config)
        logger.info("Simulation reset")
        self._notify()

    def set_speed(self, multiplier: int) -> None:
        """Set simulated days per wall-clock second.

        Raises:
            ValueError: If multiplier is not one of SPEED_OPTIONS.
        """
        if isinstance(multiplier, bool) or multiplier not in SPEED_OPTIONS:
            raise ValueError(f"Speed must be one of {SPEED_OPTIONS}, got {multiplier}")
        self.speed_multiplier = multiplier
        logger.debug(f"Speed set to {multiplier}x")
        self._notify()

    def _stop(self) -> None:
        self.is_running = False
        self._generation += 1

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def tick(self) -> GrowthSample | None:
        """Timer callback: advance one day if the run is still active.

        The running flag is checked here, at fire time, so a tick that was
        scheduled before a pause or reset does nothing.
        """
        if not self.is_running:
            return None
        return self.step()

    def step(self) -> GrowthSample | None:
        """Advance the simulation one day.

        Returns:
            The new sample, or None once the horizon has been reached (the
            run is stopped silently in that case).
        """
        self.model.step()
        outcome = self.model.last_outcome

        if outcome is None or outcome.completed:
            if self.is_running:
                self._stop()
                logger.info(
                    f"Growth cycle complete at day {self.model.current_day}, "
                    f"yield {self.model.latest.yield_kg:.1f} kg"
                )
                self._notify()
            return None

        sample = outcome.sample
        logger.debug(
            f"Day {sample.day} complete. Height: {sample.height:.1f} cm, "
            f"Health: {sample.health:.0f}%"
        )
        self._notify()
        return sample

    async def play_loop(self) -> None:
        """Async loop that ticks once per interval while the run is active.

        Triggered by SimulationController when is_running transitions to
        True. The interval is re-read every iteration so speed changes
        apply immediately.
        """
        if not self.is_running:
            return

        generation = self._generation
        logger.info("Play loop started")
        try:
            while self.is_running and generation == self._generation:
                await asyncio.sleep(self.tick_interval)
                if generation != self._generation:
                    # Paused or reset while sleeping; a newer loop owns the run.
                    break
                self.tick()

        except asyncio.CancelledError:
            logger.debug("Play loop task cancelled gracefully.")
            raise
        except Exception as e:
            logger.error(f"Error in play loop: {e}", exc_info=True)
            self._stop()
            self._notify()

    # ------------------------------------------------------------------
    # Derived readouts (current parameters, current day)
    # ------------------------------------------------------------------

    def health_score(self) -> float:
        return health_score(self.model.params, self.config.optimal_ranges)

    def predicted_yield(self) -> float:
        return predicted_yield(
            self.health_score(),
            self.model.current_day,
            max_yield=self.config.max_yield_kg,
            horizon=self.config.horizon_days,
        )

    def alerts(self) -> list[Alert]:
        return generate_alerts(self.model.params, self.config.optimal_ranges)

    def metrics(self) -> TwinMetrics:
        """Full dashboard readout for the current state."""
        return calculate_metrics(self.get_state(), self.config)

    # ------------------------------------------------------------------
    # Scenarios
    # ------------------------------------------------------------------

    def load_scenario(self, filename: str, directory: Path | None = None) -> None:
        """Load a scenario file and reset the twin to its initial parameters.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValidationError: If the file doesn't match the TwinConfig schema.
        """
        logger.info(f"Loading scenario: {filename}")
        self.config = load_scenario(filename, directory)
        self.speed_multiplier = self.config.speed_multiplier
        self.reset()
