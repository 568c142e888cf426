from fastapi import APIRouter, HTTPException
import logging
import traceback
from schemas.schedule.shifts import ShiftProblem
from schemas.schedule.timetable import TimetableConfig
from scheduler.builder import build_shift_schedule, build_timetable
from core.state import SolveStatus
from exceptions.custom_errors import *
from docs.schedule.shifts import shift_schedule_description
from docs.schedule.timetable import timetable_description

router = APIRouter(prefix="/schedule", tags=["Schedule"])
logger = logging.getLogger(__name__)


def _report_or_raise(result, report) -> dict:
    """Turn a solve outcome into a response body, raising for outcomes without an assignment."""
    if result.status is SolveStatus.INFEASIBLE:
        raise NoFeasibleSolutionError(
            "❌ No feasible solution: the hard constraints cannot all be satisfied."
        )
    if result.status is SolveStatus.MODEL_INVALID:
        raise ModelInvalidError(
            "❌ The solver rejected the built model as invalid."
        )
    if report is None:
        raise NoSolutionError(
            f"❌ No solution available (solver status {result.status.value})."
        )
    return report.to_dict()


# generate shift schedule
@router.post(
    "/shifts",
    response_model=dict,
    description=shift_schedule_description,
    summary="Generate Shift Schedule",
)
def generate_shift_schedule(problem: ShiftProblem):
    try:
        result, report = build_shift_schedule(problem)
        return _report_or_raise(result, report)
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        logger.error(tb)
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")


# generate timetable
@router.post(
    "/timetable",
    response_model=dict,
    description=timetable_description,
    summary="Generate Timetable",
)
def generate_timetable(config: TimetableConfig):
    try:
        result, report = build_timetable(config)
        return _report_or_raise(result, report)
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        logger.error(tb)
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
