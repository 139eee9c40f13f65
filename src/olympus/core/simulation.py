"""
Fall simulation orchestrator.

Integrates altitude and velocity of a falling cube with forward Euler,
stops at the ground (or after nine days in Tartarus mode) and streams
periodic snapshots to a report sink, with optional CSV logging and
automatic output organization.
"""
from __future__ import annotations

import math
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd

from olympus.exceptions import IterationLimitError, NumericDegeneracyError
from olympus.logger import CSVLogger
from olympus.models.atmosphere import air_density
from olympus.models.drag import drag_force
from olympus.models.gravity import enclosed_mass, gravity_force
from olympus.models.planet import KARMAN_LINE
from olympus.reporting import NullReporter, ReportSink
from olympus.utils.io import save_simulation_history

from .config import SimulationConfig
from .state import FallResult, ReportRecord, SimulationState

# Default output directory
DEFAULT_OUTPUT_DIR = Path("output")

HISTORY_COLUMNS = ["t", "distance", "velocity"]

# Report cadence
EARLY_DETAIL_SECONDS = 20.0
ENTRY_DETAIL_FACTOR = 5.0  # multiples of the Kármán line
HEARTBEAT_SECONDS = 6 * 3600


def should_continue(state: SimulationState, config: SimulationConfig) -> bool:
    """
    Loop guard, evaluated before every step.

    Normal mode keeps going while the predicted next altitude is above the
    surface. Tartarus mode ignores the ground and runs for nine days.
    """
    if config.tartarus:
        return state.elapsed_time < config.duration_limit
    return state.distance - state.velocity * config.time_step > 0.0


def should_report(
    elapsed_time: float,
    distance: float,
    time_step: float,
    karman_line: float = KARMAN_LINE,
) -> bool:
    """
    Sampling predicate for progress reports.

    Fires on the first step of each whole simulated second, and then only
    during the first 20 s, while within five Kármán lines of the surface
    (and still above it), or on a six-hour heartbeat.
    """
    if elapsed_time - math.floor(elapsed_time) >= time_step:
        return False
    return (
        elapsed_time < EARLY_DETAIL_SECONDS
        or 0.0 < distance < ENTRY_DETAIL_FACTOR * karman_line
        or int(elapsed_time) % HEARTBEAT_SECONDS == 0
    )


class FallSimulation:
    """
    Time-stepped fall of a single object toward a planet.

    Parameters
    ----------
    config : SimulationConfig
        Validated run parameters.
    reporter : ReportSink | None
        Receives the header, sampled ReportRecords and the final result.
        Defaults to a NullReporter.
    logger : CSVLogger | None
        Optional CSV logger receiving the same sampled records.
    record_history : bool
        If True, keep (t, distance, velocity) of every step in ``history``.

    Attributes
    ----------
    state : SimulationState
        Current state; distance and velocity change together once per step.
    terminated : bool
        True once the loop guard has failed.
    history : list[dict]
        Per-step samples when ``record_history`` is enabled.
    output_path : Path | None
        Simulation output directory, when logging was enabled.

    Notes
    -----
    Each step, in order:
    1. Enclosed mass and air density at the current altitude
    2. Gravity from the planet center, drag only below the density table limit
    3. velocity += (a_g - a_d) * dt
    4. Report (velocity already updated, altitude not yet)
    5. distance -= velocity * dt, t += dt

    Examples
    --------
    >>> from olympus import FallSimulation, SimulationConfig, TextReporter
    >>> sim = FallSimulation(SimulationConfig(initial_distance=1000.0), TextReporter())
    >>> result = sim.run()
    >>> result.velocity > 0
    True
    """

    def __init__(
        self,
        config: SimulationConfig,
        reporter: ReportSink | None = None,
        logger: CSVLogger | None = None,
        record_history: bool = False,
    ) -> None:
        self.config = config
        self.reporter: ReportSink = reporter if reporter is not None else NullReporter()
        self.logger = logger
        self.record_history = record_history
        self.state = SimulationState.initial(config)
        self.terminated = False
        self.history: list[dict[str, float]] = []
        self.output_path: Path | None = None
        self.last_record: ReportRecord | None = None

    @classmethod
    def with_logging(
        cls,
        config: SimulationConfig,
        name: str,
        reporter: ReportSink | None = None,
        output_dir: Path | str | None = None,
        auto_timestamp: bool = True,
    ) -> FallSimulation:
        """
        Create a simulation that logs report records to CSV.

        Creates ``output_dir/name_timestamp/logs/reports.csv`` and an empty
        ``plots/`` directory for :meth:`save_plots`.
        """
        base = Path(output_dir) if output_dir else DEFAULT_OUTPUT_DIR
        if auto_timestamp:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            folder_name = f"{name}_{timestamp}"
        else:
            folder_name = name
        output_path = base / folder_name

        logs_dir = output_path / "logs"
        plots_dir = output_path / "plots"
        logs_dir.mkdir(parents=True, exist_ok=True)
        plots_dir.mkdir(parents=True, exist_ok=True)

        sim = cls(config, reporter=reporter, logger=CSVLogger(logs_dir / "reports.csv"))
        sim.output_path = output_path
        print(f"[FallSimulation] Logging enabled: {output_path}")
        return sim

    # --- Integration ---

    def accelerations(self) -> tuple[float, float, float, float]:
        """
        Gravity and drag at the current state.

        Returns
        -------
        tuple
            (a_gravity [m/s²], a_drag [m/s²], enclosed mass [kg], density [kg/m³])
        """
        cfg = self.config
        planet = cfg.planet
        distance = self.state.distance
        m_planet = enclosed_mass(distance, planet, cfg.depth_aware_gravity)
        density = air_density(distance, planet)
        a_g = gravity_force(cfg.mass, m_planet, distance + planet.radius, planet.G) / cfg.mass
        if distance < planet.table_limit:
            velocity = self.state.velocity
            a_d = math.copysign(drag_force(density, velocity, cfg.width) / cfg.mass, velocity)
        else:
            a_d = 0.0
        return a_g, a_d, m_planet, density

    def step(self) -> ReportRecord | None:
        """
        Advance the state by one time step.

        Returns
        -------
        ReportRecord | None
            The snapshot emitted during this step, if the sampling predicate held.

        Raises
        ------
        NumericDegeneracyError
            If an acceleration or the new state is not finite, or drag
            overshoots and reverses a falling object.
        """
        cfg = self.config
        dt = cfg.time_step
        s = self.state

        a_g, a_d, m_planet, density = self.accelerations()
        if not (math.isfinite(a_g) and math.isfinite(a_d)):
            raise NumericDegeneracyError(
                f"Non-finite acceleration at t={s.elapsed_time}s, d={s.distance} m: "
                f"a_g={a_g}, a_d={a_d}"
            )

        velocity = s.velocity + (a_g - a_d) * dt
        distance = s.distance - velocity * dt
        if not (math.isfinite(velocity) and math.isfinite(distance)):
            raise NumericDegeneracyError(
                f"Non-finite state at t={s.elapsed_time}s: v={velocity}, d={distance}. "
                "Try a smaller time step."
            )
        if velocity < 0.0 <= s.velocity:
            raise NumericDegeneracyError(
                f"Velocity reversed at t={s.elapsed_time}s, d={s.distance} m: "
                f"v={s.velocity} -> {velocity}. Drag overshoot, try a smaller time step."
            )

        record = None
        if should_report(s.elapsed_time, s.distance, dt, cfg.planet.karman_line):
            record = ReportRecord(
                elapsed_time=s.elapsed_time,
                velocity=velocity,
                distance=s.distance,
                gravity_acceleration=a_g,
                drag_acceleration=a_d,
                enclosed_mass=m_planet,
                density=density,
            )
            self.reporter.report(record)
            if self.logger is not None:
                self.logger.log(record)
            self.last_record = record

        s.velocity = velocity
        s.distance = distance
        s.elapsed_time += dt
        s.steps += 1

        if self.record_history:
            self.history.append(
                {"t": s.elapsed_time, "distance": s.distance, "velocity": s.velocity}
            )
        return record

    def iter_states(self) -> Iterator[tuple[float, float, float]]:
        """
        Step until the loop guard fails, yielding (t, distance, velocity)
        after every step.
        """
        max_steps = self.config.max_steps
        while should_continue(self.state, self.config):
            if max_steps is not None and self.state.steps >= max_steps:
                raise IterationLimitError(
                    f"Simulation exceeded max_steps={max_steps} at "
                    f"t={self.state.elapsed_time:.2f}s without terminating"
                )
            self.step()
            yield self.state.elapsed_time, self.state.distance, self.state.velocity
        self.terminated = True

    def run(self) -> FallResult:
        """
        Run to termination and return the final result.

        Writes the header, the sampled records and the summary to the
        reporter. The CSV logger (if any) is flushed and closed even when
        the run fails.
        """
        self.reporter.header(self.config)
        try:
            for _ in self.iter_states():
                pass
        finally:
            if self.logger is not None:
                self.logger.close()

        result = self.result()
        self.reporter.summary(result)
        return result

    def result(self) -> FallResult:
        """Snapshot of the current state as a FallResult."""
        s = self.state
        return FallResult(
            config=self.config,
            elapsed_time=s.elapsed_time,
            distance=s.distance,
            velocity=s.velocity,
            steps=s.steps,
        )

    # --- History and plots ---

    def history_frame(self) -> pd.DataFrame:
        """Recorded per-step history as a DataFrame (columns t, distance, velocity)."""
        return pd.DataFrame(self.history, columns=HISTORY_COLUMNS)

    def save_history(self, filepath: str | Path) -> Path:
        """Write the recorded history to CSV (header only if no step was taken)."""
        if not self.record_history:
            raise RuntimeError(
                "History recording is disabled. Create the simulation with record_history=True."
            )
        return save_simulation_history(self.history, str(filepath), columns=HISTORY_COLUMNS)

    def save_plots(self, show: bool = False) -> list[Path]:
        """
        Render fall profile and acceleration plots from the CSV log.

        Raises
        ------
        RuntimeError
            If logging is not enabled or nothing has been logged yet.
        """
        if self.logger is None or self.output_path is None:
            raise RuntimeError(
                "Logging must be enabled to save plots. Use FallSimulation.with_logging()."
            )

        from olympus.visualization.plotting import plot_accelerations, plot_fall_profile

        csv_path = self.logger.filepath
        plots_dir = self.output_path / "plots"
        if not csv_path.exists() or self.logger.rows_logged == 0:
            raise RuntimeError(
                f"No log data found at {csv_path}. Has the simulation been run yet?"
            )

        profile = plots_dir / "fall_profile.png"
        accel = plots_dir / "accelerations.png"
        plot_fall_profile(str(csv_path), save_path=str(profile), show=show)
        plot_accelerations(str(csv_path), save_path=str(accel), show=show)
        print(f"[FallSimulation] Plots saved to: {plots_dir}")
        return [profile, accel]

    def summary_dict(self) -> dict[str, Any]:
        """Config echo plus final state, e.g. for tabulating parameter studies."""
        out = self.config.as_dict()
        out.update(
            elapsed_time=self.state.elapsed_time,
            elapsed_days=self.state.elapsed_days,
            final_distance=self.state.distance,
            final_velocity=self.state.velocity,
            steps=self.state.steps,
        )
        return out
