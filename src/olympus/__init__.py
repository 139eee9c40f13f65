"""
Olympus - how long does an anvil take to fall from Olympus?

Core Components
---------------
SimulationConfig : Immutable run parameters
FallSimulation : Forward-Euler fall integrator
Planet : Physical constants (EARTH by default)

Models
------
air_density : Layered atmosphere
gravity_force, enclosed_mass : Newtonian gravity, shell theorem below the surface
drag_force : Quadratic drag on a cube

Examples
--------
>>> from olympus import FallSimulation, SimulationConfig, TextReporter
>>> config = SimulationConfig(initial_distance=573_851_000, time_step=0.01)
>>> result = FallSimulation(config, TextReporter()).run()
"""

__version__ = "0.1.0"

# Core simulation classes
from olympus.core.config import SimulationConfig
from olympus.core.simulation import FallSimulation, should_continue, should_report
from olympus.core.state import FallResult, ReportRecord, SimulationState

# Errors
from olympus.exceptions import (
    ConfigurationError,
    IterationLimitError,
    NumericDegeneracyError,
)

# Models
from olympus.models import (
    EARTH,
    LayeredAtmosphere,
    Planet,
    air_density,
    drag_force,
    earth_mass_enclosed,
    enclosed_mass,
    gravity_force,
    stokes_drag,
)

# Logging and reporting
from olympus.logger import CSVLogger
from olympus.reporting import MultiReporter, NullReporter, RecordingReporter, TextReporter

__all__ = [
    # Version
    "__version__",
    # Core
    "SimulationConfig",
    "SimulationState",
    "FallSimulation",
    "FallResult",
    "ReportRecord",
    "should_continue",
    "should_report",
    # Errors
    "ConfigurationError",
    "IterationLimitError",
    "NumericDegeneracyError",
    # Models
    "Planet",
    "EARTH",
    "LayeredAtmosphere",
    "air_density",
    "gravity_force",
    "enclosed_mass",
    "earth_mass_enclosed",
    "drag_force",
    "stokes_drag",
    # Logging
    "CSVLogger",
    "TextReporter",
    "RecordingReporter",
    "NullReporter",
    "MultiReporter",
]
