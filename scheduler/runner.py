import logging
from typing import Optional, Tuple, Union
from ortools.sat.python import cp_model
from core.state import ShiftScheduleState, TimetableState
from utils.constants import SOLVER_TIME_LIMIT_SECONDS
from .extractor import ScheduleReport, build_report
from .solver import SolverResult, solve_model

logger = logging.getLogger(__name__)


def solve_schedule(
    model: cp_model.CpModel,
    state: Union[ShiftScheduleState, TimetableState],
    timeout: float = SOLVER_TIME_LIMIT_SECONDS,
    params: Optional[str] = None,
) -> Tuple[SolverResult, Optional[ScheduleReport]]:
    """
    Solve a built model once and decode the solution.

    Args:
        model (cp_model.CpModel): The CP model, objective already applied.
        state (ShiftScheduleState | TimetableState): The state the model was built from.
        timeout (float): Wall-clock limit of the solve, in seconds.
        params (str, optional): Extra text-format solver parameters.

    Returns:
        tuple: A tuple of (result, report)
            result (SolverResult): Status, cached values and statistics.
            report (ScheduleReport | None): The decoded schedule and penalties, or None when
                the solver returned no assignment (INFEASIBLE, UNKNOWN, MODEL_INVALID).
    """
    grid = state.work if isinstance(state, ShiftScheduleState) else state.scheduled
    result = solve_model(model, grid, state.objective, timeout, params)

    if not result.status.has_solution:
        logger.info(f"⏭️ Skipping report: solver status is {result.status.value}.")
        return result, None

    report = build_report(state, result)
    logger.info("✅ Done!")
    logger.info(f"📊 Total penalties = {report.total_penalty}")
    logger.info(f"🔍 Active cost terms = {len(report.penalties)}")
    return result, report
