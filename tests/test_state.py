"""Tests for the immutable rule descriptors and the solve status."""

import pytest
from ortools.sat.python import cp_model

from core.state import SoftConstraintSpec, SolveStatus
from exceptions.custom_errors import InvalidConfigError, InvalidConstraintSpecError


def test_spec_accepts_ordered_bounds():
    spec = SoftConstraintSpec.from_values([1, 2, 20, 3, 4, 5])

    assert (spec.hard_min, spec.soft_min, spec.soft_max, spec.hard_max) == (1, 2, 3, 4)
    assert (spec.min_cost, spec.max_cost) == (20, 5)


@pytest.mark.parametrize(
    "values",
    [
        (2, 1, 0, 3, 4, 0),  # soft_min below hard_min
        (1, 3, 0, 2, 4, 0),  # soft_max below soft_min
        (1, 2, 0, 5, 4, 0),  # hard_max below soft_max
        (1, 2, -1, 3, 4, 0),  # negative cost
    ],
)
def test_spec_rejects_inconsistent_values(values):
    with pytest.raises(InvalidConstraintSpecError):
        SoftConstraintSpec(*values)


def test_spec_error_is_a_configuration_error():
    assert issubclass(InvalidConstraintSpecError, InvalidConfigError)


def test_spec_is_immutable():
    spec = SoftConstraintSpec(0, 1, 3, 4, 4, 0)

    with pytest.raises(AttributeError):
        spec.hard_min = 2


@pytest.mark.parametrize(
    "cp_status, expected, has_solution",
    [
        (cp_model.OPTIMAL, SolveStatus.OPTIMAL, True),
        (cp_model.FEASIBLE, SolveStatus.FEASIBLE, True),
        (cp_model.INFEASIBLE, SolveStatus.INFEASIBLE, False),
        (cp_model.UNKNOWN, SolveStatus.UNKNOWN, False),
        (cp_model.MODEL_INVALID, SolveStatus.MODEL_INVALID, False),
    ],
)
def test_solve_status_mapping(cp_status, expected, has_solution):
    status = SolveStatus.from_cp_status(cp_status)

    assert status is expected
    assert status.has_solution is has_solution


def test_timetable_slot_index(small_timetable):
    from scheduler.builder import build_timetable_model

    _, state = build_timetable_model(small_timetable)

    assert state.num_slots == 6
    assert state.slot(0, 0) == 0
    assert state.slot(1, 2) == 5
    assert state.classes_of_teacher("Ada") == [0, 1]
    assert state.classes_in_room("R1") == [0, 2]
    with pytest.raises(IndexError):
        state.slot(0, 3)
