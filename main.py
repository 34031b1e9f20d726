"""Entry point for headless Digital Twin runs.

Usage:
    python main.py                   # every scenario in scenarios/
    python main.py drought.json ...  # selected scenarios
"""

import logging
import sys

from greenhouse_twin.schemas.columns import ColumnNames
from greenhouse_twin.services.config_manager import list_scenarios, load_scenario
from greenhouse_twin.services.simulation import SimulationEngine


def run_scenario(filename: str) -> None:
    """Run one scenario through the full growth cycle and print the outcome.

    Args:
        filename: Scenario file inside the scenarios directory.
    """
    config = load_scenario(filename)
    print(f"--- Running {config.name}: {config.description} ---")

    engine = SimulationEngine(config)
    engine.start()
    # Tick until the engine stops itself at the horizon
    while engine.is_running:
        engine.tick()

    metrics = engine.metrics()
    df = engine.model.get_growth_dataframe()
    print(f"Results for {config.name}:")
    print(f"  Days simulated:   {metrics.day}")
    print(f"  Final height:     {df[ColumnNames.HEIGHT].iloc[-1]:.1f} cm")
    print(f"  Health score:     {metrics.health_score:.0f}%")
    print(f"  Predicted yield:  {metrics.predicted_yield:.1f} kg/plant")
    print(f"  Est. revenue:     ${metrics.estimated_revenue:,.0f}")
    for alert in metrics.alerts:
        print(f"  [{alert.severity.upper()}] {alert.message}")
    print("\n")


def main() -> None:
    """Load scenarios and run them."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    scenarios = sys.argv[1:] or list_scenarios()
    if not scenarios:
        print("No scenario config found.")
        return

    for filename in scenarios:
        run_scenario(filename)


if __name__ == "__main__":
    main()
