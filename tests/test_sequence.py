"""Tests for the run-length rule encoding."""

import pytest

from core.state import SoftConstraintSpec, SolveStatus
from scheduler.rules.sequence import add_soft_sequence_constraint, negated_bounded_span
from .conftest import fix_pattern, make_sequence, minimize

# hard_min=1, soft_min=2 (cost 20 per missing day), soft_max=3, hard_max=4 (cost 5 per extra day)
SPEC = SoftConstraintSpec(1, 2, 20, 3, 4, 5)


def solve_pattern(pattern, spec=SPEC):
    model, grid, works = make_sequence(len(pattern))
    terms = add_soft_sequence_constraint(model, works, spec, "employee 0, shift 0", unit=0)
    fix_pattern(model, works, pattern)
    result, _ = minimize(model, grid, terms)
    return result


def test_bounded_span_borders():
    _, _, works = make_sequence(5)

    inner = negated_bounded_span(works, 1, 2)
    assert len(inner) == 4
    assert inner[0] is works[0]
    assert inner[-1] is works[3]

    assert len(negated_bounded_span(works, 0, 2)) == 3
    assert len(negated_bounded_span(works, 3, 2)) == 3
    assert len(negated_bounded_span(works, 0, 5)) == 5


@pytest.mark.parametrize(
    "pattern, cost",
    [
        ([0, 0, 1, 1, 0, 0, 0, 0, 0, 0], 0),
        ([0, 0, 1, 1, 1, 0, 0, 0, 0, 0], 0),
        ([0, 0, 0, 1, 0, 0, 0, 0, 0, 0], 20),
        ([0, 1, 1, 1, 1, 0, 0, 0, 0, 0], 5),
        ([1, 0, 0, 0, 0, 0, 0, 0, 0, 0], 20),
        ([0, 0, 0, 0, 0, 0, 1, 1, 1, 1], 5),
        ([1, 0, 0, 1, 1, 1, 1, 0, 0, 0], 25),
        ([0, 0, 0, 0, 0, 0, 0, 0, 0, 0], 0),
    ],
)
def test_run_costs(pattern, cost):
    result = solve_pattern(pattern)

    assert result.status is SolveStatus.OPTIMAL
    assert result.objective_value == cost


@pytest.mark.parametrize(
    "spec, pattern, cost",
    [
        (SoftConstraintSpec(0, 1, 5, 3, 4, 0), [1, 1, 0, 0, 1, 1], 0),
        (SoftConstraintSpec(0, 1, 5, 3, 4, 0), [0, 0, 0, 0, 0, 0], 0),
        (SoftConstraintSpec(0, 1, 5, 3, 4, 0), [0, 1, 1, 1, 0, 0], 0),
        (SoftConstraintSpec(0, 2, 5, 3, 4, 0), [0, 1, 0, 0, 1, 1], 5),
        (SoftConstraintSpec(0, 2, 5, 3, 4, 0), [0, 0, 1, 1, 0, 0], 0),
    ],
)
def test_gaps_are_not_runs_without_hard_min(spec, pattern, cost):
    result = solve_pattern(pattern, spec)

    assert result.status is SolveStatus.OPTIMAL
    assert result.objective_value == cost

@pytest.mark.parametrize(
    "pattern",
    [
        [0, 1, 1, 1, 1, 1, 0, 0, 0, 0],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    ],
)
def test_run_above_hard_max_is_infeasible(pattern):
    assert solve_pattern(pattern).status is SolveStatus.INFEASIBLE


@pytest.mark.parametrize(
    "pattern, status",
    [
        ([0, 0, 1, 1, 0, 0], SolveStatus.OPTIMAL),
        ([0, 0, 1, 1, 1, 0], SolveStatus.OPTIMAL),
        ([0, 0, 1, 0, 0, 0], SolveStatus.INFEASIBLE),
        ([1, 0, 0, 0, 0, 0], SolveStatus.INFEASIBLE),
        ([0, 0, 0, 0, 0, 1], SolveStatus.INFEASIBLE),
        ([1, 1, 1, 1, 0, 0], SolveStatus.INFEASIBLE),
    ],
)
def test_hard_bounds_without_costs(pattern, status):
    assert solve_pattern(pattern, SoftConstraintSpec(2, 2, 0, 3, 3, 0)).status is status


def test_degenerate_spec_adds_no_terms():
    model, _, works = make_sequence(7)

    terms = add_soft_sequence_constraint(
        model, works, SoftConstraintSpec(0, 0, 0, 7, 7, 0), "employee 0, shift 0"
    )

    assert terms == []
    assert len(model.Proto().constraints) == 0


def test_active_indicator_names_the_run():
    model, grid, works = make_sequence(10)
    terms = add_soft_sequence_constraint(model, works, SPEC, "employee 0, shift 3", unit=0)
    fix_pattern(model, works, [0, 0, 0, 1, 0, 0, 0, 0, 0, 0])

    result, objective = minimize(model, grid, terms)
    active = [t for t, v in zip(objective.terms, result.term_values) if v]

    assert len(active) == 1
    assert active[0].coefficient == 20
    assert active[0].record.name == (
        "shift_constraint(employee 0, shift 3): under_span(start=3, length=1)"
    )
