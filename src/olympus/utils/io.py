# src/olympus/utils/io.py
import json
import pandas as pd
from pathlib import Path
from typing import List, Dict, Any, Optional

from olympus.exceptions import ConfigurationError


def save_simulation_history(
    history: List[Dict[str, Any]],
    filepath: str,
    columns: Optional[List[str]] = None,
) -> Path:
    """
    Saves a list of state dictionaries to a CSV file.

    Args:
        history: List of dicts, e.g., [{'t': 0.01, 'distance': 1.0, 'velocity': 0.1}, ...]
        filepath: Destination path (e.g., 'results/run1.csv')
        columns: Column order. When given, an empty history is written as a
            header-only file instead of raising.

    Returns:
        The path written to.
    """
    if not history and columns is None:
        raise ValueError("Simulation history is empty. Nothing to save.")

    path = Path(filepath)
    # Ensure the directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(history, columns=columns)
    df.to_csv(path, index=False)
    print(f"Simulation results saved to {path.absolute()}")
    return path


def load_simulation_history(filepath: str) -> pd.DataFrame:
    """Reads a history CSV written by save_simulation_history."""
    return pd.read_csv(filepath)


def load_simulation_config(filepath: str) -> Dict[str, Any]:
    """
    Loads simulation settings from a JSON object.

    Raises ConfigurationError if the file is missing, malformed or not an object.
    """
    path = Path(filepath)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Config file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config file {path} is not valid JSON: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return data
