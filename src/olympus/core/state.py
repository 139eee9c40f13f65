"""
State and result records of a fall simulation.
"""
from __future__ import annotations

from dataclasses import dataclass

from .config import SimulationConfig

SECONDS_PER_DAY = 60.0 * 60.0 * 24.0
MPH_PER_MS = 2.237
LUNAR_DISTANCE = 384_400_000.0  # m


@dataclass
class SimulationState:
    """
    Mutable state of one run, owned by a single FallSimulation.

    Attributes
    ----------
    distance : float
        Altitude above the surface [m]; negative below it.
    velocity : float
        Speed toward the center [m/s]; positive means falling.
    elapsed_time : float
        Simulated time [s]
    steps : int
        Completed integration steps
    """

    distance: float
    velocity: float = 0.0
    elapsed_time: float = 0.0
    steps: int = 0

    @classmethod
    def initial(cls, config: SimulationConfig) -> SimulationState:
        return cls(distance=config.initial_distance)

    @property
    def elapsed_days(self) -> float:
        return self.elapsed_time / SECONDS_PER_DAY


@dataclass(frozen=True)
class ReportRecord:
    """Snapshot handed to report sinks."""

    elapsed_time: float
    velocity: float
    distance: float
    gravity_acceleration: float
    drag_acceleration: float
    enclosed_mass: float
    density: float

    @property
    def elapsed_days(self) -> float:
        return self.elapsed_time / SECONDS_PER_DAY

    @property
    def velocity_mph(self) -> float:
        return self.velocity * MPH_PER_MS

    @property
    def lunar_distance(self) -> float:
        return self.distance / LUNAR_DISTANCE


REPORT_FIELDS = (
    "elapsed_time",
    "velocity",
    "distance",
    "gravity_acceleration",
    "drag_acceleration",
    "enclosed_mass",
    "density",
)


@dataclass(frozen=True)
class FallResult:
    """Outcome of a completed run."""

    config: SimulationConfig
    elapsed_time: float
    distance: float
    velocity: float
    steps: int

    @property
    def elapsed_days(self) -> float:
        return self.elapsed_time / SECONDS_PER_DAY

    @property
    def reached_ground(self) -> bool:
        """True if the next step would have taken the object below the surface."""
        return self.distance - self.velocity * self.config.time_step <= 0.0
