"""
End-to-end verification of complete falls.

These runs integrate up to a couple of million steps. Time steps are
coarser than the CLI default but small enough that explicit Euler stays
stable in the lowest atmosphere bands (k·v·dt < 1 with k = ρ·w²·Cd / 2m).
"""

import pytest

from olympus.core.config import SimulationConfig
from olympus.core.simulation import FallSimulation
from olympus.reporting import RecordingReporter


@pytest.fixture(scope="module")
def olympus_config():
    """The default anvil from Olympus, with a 0.5 s step."""
    return SimulationConfig(
        initial_distance=573_851_000.0,
        width=0.279,
        mass=117.0,
        time_step=0.5,
        tartarus=False,
    )


@pytest.fixture(scope="module")
def olympus_run(olympus_config):
    """(result, reporter) of one full drop, shared by the module."""
    reporter = RecordingReporter()
    result = FallSimulation(olympus_config, reporter).run()
    return result, reporter
