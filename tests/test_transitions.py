"""Tests for the succession rules: shift transitions and room changes."""

import itertools

import pytest
from ortools.sat.python import cp_model

from core.objective import PenaltyRecord
from core.state import SolveStatus
from core.variables import VariableGrid
from scheduler.builder import build_timetable
from scheduler.rules.transitions import add_room_change_penalty, add_transition_penalty
from schemas.schedule.timetable import ClassItem, TeacherItem, TimetableConfig
from .conftest import fix_pattern, minimize

RECORD = PenaltyRecord("transition", "employee=0, day=0", 0, "A->N")


def transition_pair(penalty, previous_value, following_value):
    model = cp_model.CpModel()
    grid = VariableGrid(model, [0], ["X"], 2)
    works = grid.sequence(0, 0)
    term = add_transition_penalty(model, works[0], works[1], penalty, RECORD)
    fix_pattern(model, works, [previous_value, following_value])
    return minimize(model, grid, [term] if term else [])


def test_penalised_transition_is_charged():
    result, objective = transition_pair(4, 1, 1)

    assert result.status is SolveStatus.OPTIMAL
    assert result.objective_value == 4
    assert objective.terms[0].record.name == "transition(employee=0, day=0): A->N"


@pytest.mark.parametrize("values", [(0, 0), (0, 1), (1, 0)])
def test_transition_is_free_when_not_taken(values):
    result, _ = transition_pair(4, *values)

    assert result.status is SolveStatus.OPTIMAL
    assert result.objective_value == 0


def test_zero_penalty_forbids_the_transition():
    result, objective = transition_pair(0, 1, 1)

    assert len(objective) == 0
    assert result.status is SolveStatus.INFEASIBLE


@pytest.mark.parametrize("current, following", itertools.product([0, 1], repeat=2))
def test_room_change_indicator_is_exact(current, following):
    model = cp_model.CpModel()
    grid = VariableGrid(model, [0], ["X"], 2)
    works = grid.sequence(0, 0)
    term = add_room_change_penalty(
        model, works[0], works[1], 3, PenaltyRecord("room_change", "teacher Ada, Mon block 0")
    )
    fix_pattern(model, works, [current, following])

    # No objective: the indicator is pinned by the constraints alone.
    solver = cp_model.CpSolver()
    assert solver.Solve(model) == cp_model.OPTIMAL
    assert solver.Value(term.variable) == current * following


def test_room_change_between_consecutive_blocks():
    config = TimetableConfig(
        days=["Mon"],
        blocksPerDay=2,
        teachers=[TeacherItem(name="Ada")],
        classes=[
            ClassItem(id="1A", teacher="Ada", room="R1", weeklyBlocks=1),
            ClassItem(id="1B", teacher="Ada", room="R2", weeklyBlocks=1),
        ],
        roomChangePenalty=3,
        timeLimitSeconds=10.0,
    )

    result, report = build_timetable(config)

    assert result.status is SolveStatus.OPTIMAL
    assert result.objective_value == 3
    assert report.total_penalty == 3
    (entry,) = report.penalties_for("room_change")
    assert entry.context == "teacher Ada, Mon block 0"


def test_no_room_change_across_days():
    config = TimetableConfig(
        days=["Mon", "Tue"],
        blocksPerDay=1,
        teachers=[TeacherItem(name="Ada")],
        classes=[
            ClassItem(id="1A", teacher="Ada", room="R1", weeklyBlocks=1),
            ClassItem(id="1B", teacher="Ada", room="R2", weeklyBlocks=1),
        ],
        roomChangePenalty=3,
        timeLimitSeconds=10.0,
    )

    result, report = build_timetable(config)

    assert result.status is SolveStatus.OPTIMAL
    assert result.objective_value == 0
    assert report.penalties == []


def test_same_room_classes_are_never_charged():
    config = TimetableConfig(
        days=["Mon"],
        blocksPerDay=2,
        teachers=[TeacherItem(name="Ada")],
        classes=[
            ClassItem(id="1A", teacher="Ada", room="R1", weeklyBlocks=1),
            ClassItem(id="1B", teacher="Ada", room="R1", weeklyBlocks=1),
        ],
        roomChangePenalty=3,
        timeLimitSeconds=10.0,
    )

    result, report = build_timetable(config)

    assert result.status is SolveStatus.OPTIMAL
    assert report.total_penalty == 0
