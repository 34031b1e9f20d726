"""Services package for simulation orchestration.

This package contains:
- simulation.py: SimulationEngine for controlling simulation execution
- mesa_model.py: Mesa model integration (GreenhouseModel)
- config_manager.py: Scenario file loading/saving
- metrics.py: Dashboard metric calculations
"""

from greenhouse_twin.services.mesa_model import GreenhouseModel
from greenhouse_twin.services.simulation import SimulationEngine

__all__ = ["SimulationEngine", "GreenhouseModel"]
