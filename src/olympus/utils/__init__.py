"""Utility functions for Olympus simulations."""

from .io import load_simulation_config, load_simulation_history, save_simulation_history
from .validation import (
    validate_finite,
    validate_non_negative,
    validate_positive,
    validate_timestep,
)

__all__ = [
    "save_simulation_history",
    "load_simulation_history",
    "load_simulation_config",
    "validate_finite",
    "validate_positive",
    "validate_non_negative",
    "validate_timestep",
]
