"""Shared fixtures and helpers for the planner tests."""

import os

# Keep the API from writing a log file while under test.
os.environ.setdefault("LOG_TO_FILE", "false")

from typing import List, Sequence, Tuple

import pytest
from ortools.sat.python import cp_model

from core.objective import CostTerm, ObjectiveAggregator
from core.variables import VariableGrid
from schemas.schedule.shifts import (
    FixedAssignmentItem,
    PenalizedTransition,
    ShiftProblem,
)
from schemas.schedule.timetable import ClassItem, TeacherItem, TimetableConfig
from scheduler.solver import SolverResult, solve_model


def make_sequence(length: int) -> Tuple[cp_model.CpModel, VariableGrid, List]:
    """A fresh model holding one unit, one category and `length` slots."""
    model = cp_model.CpModel()
    grid = VariableGrid(model, [0], ["X"], length)
    return model, grid, grid.sequence(0, 0)


def fix_pattern(model: cp_model.CpModel, works: List, pattern: Sequence[int]):
    """Force each variable to the matching 0/1 value of `pattern`."""
    assert len(works) == len(pattern)
    for var, value in zip(works, pattern):
        model.Add(var == value)


def minimize(
    model: cp_model.CpModel, grid: VariableGrid, terms: List[CostTerm]
) -> Tuple[SolverResult, ObjectiveAggregator]:
    """Minimise the given cost terms and solve on a single worker."""
    objective = ObjectiveAggregator()
    objective.extend(terms)
    objective.apply(model)
    result = solve_model(model, grid, objective, timeout=10.0, num_workers=1)
    return result, objective


@pytest.fixture
def small_shift_problem() -> ShiftProblem:
    """Three employees, one week, one morning and one afternoon worker per day, no soft rules."""
    return ShiftProblem(
        numEmployees=3,
        numWeeks=1,
        fixedAssignments=[],
        requests=[],
        shiftConstraints=[],
        weeklySumConstraints=[],
        penalizedTransitions=[],
        weeklyCoverDemands=[[1, 1, 0] for _ in range(7)],
        excessCoverPenalties=[0, 0, 0],
        timeLimitSeconds=10.0,
    )


@pytest.fixture
def transition_problem() -> ShiftProblem:
    """One employee forced into Afternoon on day 2 and Night on day 3 under an A->N penalty of 4."""
    return ShiftProblem(
        numEmployees=1,
        numWeeks=1,
        fixedAssignments=[
            FixedAssignmentItem(employee=0, shift=2, day=2),
            FixedAssignmentItem(employee=0, shift=3, day=3),
        ],
        requests=[],
        shiftConstraints=[],
        weeklySumConstraints=[],
        penalizedTransitions=[PenalizedTransition(previousShift=2, nextShift=3, penalty=4)],
        weeklyCoverDemands=[[0, 0, 0] for _ in range(7)],
        excessCoverPenalties=[0, 0, 0],
        timeLimitSeconds=10.0,
    )


@pytest.fixture
def small_timetable() -> TimetableConfig:
    return TimetableConfig(
        days=["Mon", "Tue"],
        blocksPerDay=3,
        teachers=[TeacherItem(name="Ada"), TeacherItem(name="Brook")],
        classes=[
            ClassItem(id="1A-math", teacher="Ada", room="R1", weeklyBlocks=2),
            ClassItem(id="1B-math", teacher="Ada", room="R2", weeklyBlocks=2),
            ClassItem(id="1A-art", teacher="Brook", room="R1", weeklyBlocks=3),
        ],
        roomChangePenalty=2,
        timeLimitSeconds=10.0,
    )
