"""Scenario Management Module.

Handles listing, loading, and saving of twin configurations.
Enforces the strictly typed TwinConfig schema.
"""

import json
from pathlib import Path
from typing import List

from ..schemas import TwinConfig

SCENARIO_DIR = Path.cwd() / "scenarios"


def list_scenarios(directory: Path | None = None) -> List[str]:
    """List all available scenario files in the scenarios directory.

    Returns:
        List of filenames (e.g., ['baseline.json', 'drought.json']).
    """
    directory = directory or SCENARIO_DIR
    if not directory.exists():
        return []
    return sorted(f.name for f in directory.glob("*.json"))


def load_scenario(filename: str, directory: Path | None = None) -> TwinConfig:
    """Load and validate a scenario from a JSON file.

    Args:
        filename: Name of the file (e.g. 'baseline.json').
        directory: Override for the scenarios directory.

    Returns:
        Validated TwinConfig object.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValidationError: If JSON doesn't match schema.
    """
    file_path = (directory or SCENARIO_DIR) / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return TwinConfig.model_validate(data)


def save_scenario(
    config: TwinConfig, filename: str, directory: Path | None = None
) -> Path:
    """Save a twin configuration to a JSON file.

    Args:
        config: The TwinConfig object to save.
        filename: Target filename.
        directory: Override for the scenarios directory.

    Returns:
        Path of the written file.
    """
    directory = directory or SCENARIO_DIR
    directory.mkdir(parents=True, exist_ok=True)
    file_path = directory / filename

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(config.model_dump_json(indent=2))
    return file_path
