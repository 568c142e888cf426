from pathlib import Path
from typing import Optional, Tuple
import logging
from ortools.sat.python import cp_model
from core.constraint_manager import ConstraintManager
from core.state import ShiftScheduleState, TimetableState
from schemas.schedule.shifts import ShiftProblem
from schemas.schedule.timetable import TimetableConfig
from scheduler.rules import (
    fixed_assignment_rule,
    min_cover_rule,
    one_hot_rule,
    resource_exclusivity_rule,
    room_change_rule,
    shift_request_rule,
    shift_sequence_rule,
    shift_transition_rule,
    weekly_class_count_rule,
    weekly_sum_rule,
)
from scheduler.runner import solve_schedule
from scheduler.extractor import ScheduleReport
from scheduler.setup import build_shift_grid, build_timetable_grid, make_model
from scheduler.solver import SolverResult, export_model
from utils.constants import DAYS_PER_WEEK
from utils.validate import validate_shift_problem, validate_timetable_config

logger = logging.getLogger(__name__)


# == Build Shift Model ==
def build_shift_model(problem: ShiftProblem) -> Tuple[cp_model.CpModel, ShiftScheduleState]:
    """
    Builds the shift scheduling model: one-hot assignment, fixed assignments, run-length and
    weekly count rules, shift successions, minimum coverage and employee requests, with every
    cost term aggregated into the objective.

    Raises:
        InvalidConfigError: If the problem is malformed. No model is built in that case.
    """
    # === Validate inputs ===
    validate_shift_problem(problem)
    sequence_rules = [r.to_rule() for r in problem.shiftConstraints]
    weekly_sum_rules = [r.to_rule() for r in problem.weeklySumConstraints]

    # === Model setup ===
    logger.info("📋 Building shift model...")
    model = make_model()
    work = build_shift_grid(model, problem.numEmployees, problem.shifts, problem.numDays)

    state = ShiftScheduleState(
        work=work,
        shift_labels=list(problem.shifts),
        num_weeks=problem.numWeeks,
        fixed_assignments=[fa.to_rule() for fa in problem.fixedAssignments],
        requests=[r.to_rule() for r in problem.requests],
        sequence_rules=sequence_rules,
        weekly_sum_rules=weekly_sum_rules,
        transition_rules=[t.to_rule() for t in problem.penalizedTransitions],
        weekly_cover_demands=[list(row) for row in problem.weeklyCoverDemands],
        excess_cover_penalties=list(problem.excessCoverPenalties),
        days_per_week=DAYS_PER_WEEK,
    )

    cm = ConstraintManager(model, state)
    cm.add_rule(one_hot_rule)  # Exactly one shift per employee and day
    cm.add_rule(fixed_assignment_rule, bool(state.fixed_assignments))
    cm.add_rule(shift_sequence_rule, bool(state.sequence_rules))
    cm.add_rule(weekly_sum_rule, bool(state.weekly_sum_rules))
    cm.add_rule(shift_transition_rule, bool(state.transition_rules))
    cm.add_rule(min_cover_rule)  # Minimum staffing per shift and day
    cm.add_rule(shift_request_rule, bool(state.requests))
    cm.apply_all()  # Apply all rules

    state.objective.apply(model)
    return model, state


# == Build Timetable Model ==
def build_timetable_model(config: TimetableConfig) -> Tuple[cp_model.CpModel, TimetableState]:
    """
    Builds the timetabling model: weekly block count per class, teacher and room exclusivity
    per slot, and the room change penalty of teachers between consecutive blocks.

    Raises:
        InvalidConfigError: If the configuration is malformed. No model is built in that case.
    """
    # === Validate inputs ===
    validate_timetable_config(config)

    # === Model setup ===
    logger.info("📋 Building timetable model...")
    model = make_model()
    classes = [c.to_class() for c in config.classes]
    scheduled = build_timetable_grid(model, classes, config.numSlots)

    state = TimetableState(
        scheduled=scheduled,
        days=list(config.days),
        blocks_per_day=config.blocksPerDay,
        teachers=[t.name for t in config.teachers],
        classes=classes,
        room_change_penalty=config.roomChangePenalty,
    )

    cm = ConstraintManager(model, state)
    cm.add_rule(weekly_class_count_rule)  # Required blocks per class
    cm.add_rule(resource_exclusivity_rule)  # One class per teacher / room and slot
    cm.add_rule(room_change_rule, config.roomChangePenalty > 0)
    cm.apply_all()  # Apply all rules

    state.objective.apply(model)
    return model, state


def build_shift_schedule(
    problem: ShiftProblem, export_path: Optional[Path | str] = None
) -> Tuple[SolverResult, Optional[ScheduleReport]]:
    """Build, optionally export, and solve the shift scheduling model."""
    model, state = build_shift_model(problem)
    if export_path:
        export_model(model, export_path)
    return solve_schedule(model, state, problem.timeLimitSeconds, problem.solverParams)


def build_timetable(
    config: TimetableConfig, export_path: Optional[Path | str] = None
) -> Tuple[SolverResult, Optional[ScheduleReport]]:
    """Build, optionally export, and solve the timetabling model."""
    model, state = build_timetable_model(config)
    if export_path:
        export_model(model, export_path)
    return solve_schedule(model, state, config.timeLimitSeconds, config.solverParams)
