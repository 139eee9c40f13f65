from .config import TARTARUS_DURATION, SimulationConfig
from .state import FallResult, ReportRecord, SimulationState
from .simulation import FallSimulation, should_continue, should_report
