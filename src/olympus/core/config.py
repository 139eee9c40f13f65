"""
Simulation configuration.

Created once from input parameters (CLI flags, a JSON file or code) and
validated before any integration happens.
"""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from olympus.exceptions import ConfigurationError
from olympus.models.planet import EARTH, Planet
from olympus.utils.io import load_simulation_config
from olympus.utils.validation import (
    validate_finite,
    validate_non_negative,
    validate_positive,
    validate_timestep,
)

# Olympus Mons, extrapolated
DEFAULT_DISTANCE = 573_851_000.0
# a CLASSIC 110 anvil
DEFAULT_WIDTH = 0.279
DEFAULT_MASS = 117.0
DEFAULT_TIME_STEP = 0.01

TARTARUS_DURATION = 9.0 * 24.0 * 3600.0  # s


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable parameters of one fall.

    Parameters
    ----------
    initial_distance : float
        Altitude above the surface at release [m]. Negative means a depth.
    width : float
        Side length of the falling cube [m]
    mass : float
        Mass of the object [kg]
    time_step : float
        Fixed integration step Δt [s]
    tartarus : bool
        Keep falling for nine days instead of stopping at the ground.
    depth_aware_gravity : bool
        Reduce the attracting mass below the surface (shell theorem).
        False reproduces the constant-mass approximation.
    max_steps : int | None
        Iteration cap; exceeding it raises IterationLimitError.
    planet : Planet
        Physical constants of the attracting body.

    Raises
    ------
    ConfigurationError
        On non-positive mass or time step, negative width, non-finite
        distance, non-boolean flags, or a max_steps that is not an integer
        of at least 1.
    """

    initial_distance: float = DEFAULT_DISTANCE
    width: float = DEFAULT_WIDTH
    mass: float = DEFAULT_MASS
    time_step: float = DEFAULT_TIME_STEP
    tartarus: bool = False
    depth_aware_gravity: bool = True
    max_steps: int | None = None
    planet: Planet = field(default=EARTH, repr=False)

    def __post_init__(self) -> None:
        for name in ("initial_distance", "width", "mass", "time_step"):
            value = getattr(self, name)
            try:
                object.__setattr__(self, name, float(value))
            except (TypeError, ValueError):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
        for name in ("tartarus", "depth_aware_gravity"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(f"{name} must be true or false, got {value!r}")
        if self.max_steps is not None and (
            isinstance(self.max_steps, bool) or not isinstance(self.max_steps, int)
        ):
            raise ConfigurationError(f"max_steps must be an integer, got {self.max_steps!r}")

        validate_finite(self.initial_distance, "initial_distance")
        validate_positive(self.mass, "mass")
        validate_finite(self.mass, "mass")
        validate_non_negative(self.width, "width")
        validate_finite(self.width, "width")
        validate_timestep(self.time_step)
        if self.max_steps is not None and self.max_steps < 1:
            raise ConfigurationError(f"max_steps must be at least 1, got {self.max_steps}")

    @property
    def duration_limit(self) -> float:
        """Simulated time after which a Tartarus run stops [s]."""
        return TARTARUS_DURATION if self.tartarus else math.inf

    def replace(self, **changes: Any) -> SimulationConfig:
        """Copy with some fields changed (re-validated)."""
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        """Plain parameters, without the planet."""
        return {
            "initial_distance": self.initial_distance,
            "width": self.width,
            "mass": self.mass,
            "time_step": self.time_step,
            "tartarus": self.tartarus,
            "depth_aware_gravity": self.depth_aware_gravity,
            "max_steps": self.max_steps,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], planet: Planet = EARTH) -> SimulationConfig:
        """
        Build a config from a mapping.

        Accepts the CLI spellings ``distance`` and ``integration_time`` as
        aliases. Unknown keys are rejected.
        """
        aliases = {"distance": "initial_distance", "integration_time": "time_step"}
        allowed = {f.name for f in dataclasses.fields(cls)} - {"planet"}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            key = aliases.get(key, key)
            if key not in allowed:
                raise ConfigurationError(
                    f"Unknown config key '{key}'. Valid keys: {sorted(allowed)}"
                )
            kwargs[key] = value
        return cls(planet=planet, **kwargs)

    @classmethod
    def from_file(cls, filepath: str | Path, planet: Planet = EARTH) -> SimulationConfig:
        """Load a config from a JSON file."""
        return cls.from_dict(load_simulation_config(str(filepath)), planet=planet)
