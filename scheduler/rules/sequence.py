from core.objective import CostTerm, PenaltyRecord
from core.state import ShiftScheduleState, SoftConstraintSpec
from typing import List, Optional

"""
This module contains the run-length rules: how many consecutive days an employee may hold the same shift.
"""


def negated_bounded_span(works: List, start: int, length: int) -> List:
    """
    Literals of a clause forbidding an isolated run of `length` true values starting at `start`.

    The clause is `works[start - 1] or not works[start] or ... or not works[start + length - 1]
    or works[start + length]`, where the neighbours outside the sequence are omitted. At least
    one literal must hold, so the run is either not all true or it extends past the window.
    """
    sequence = []
    # left border (start of works, or works[start - 1])
    if start > 0:
        sequence.append(works[start - 1])
    for i in range(length):
        sequence.append(works[start + i].Not())
    # right border (end of works or works[start + length])
    if start + length < len(works):
        sequence.append(works[start + length])
    return sequence


def add_soft_sequence_constraint(
    model,
    works: List,
    spec: SoftConstraintSpec,
    context: str,
    unit: Optional[int] = None,
    rule: str = "shift_constraint",
) -> List[CostTerm]:
    """
    Constrain every run of true values in `works` to a length in `[hard_min, hard_max]`.

    Runs shorter than `soft_min` cost `min_cost * (soft_min - length)` and runs longer than
    `soft_max` cost `max_cost * (length - soft_max)`. One boolean indicator is created per
    penalised (start, length) window; the indicator is the only way to satisfy the window's
    clause, so it is true exactly when the solver accepts that run.

    Returns the cost terms to add to the objective.
    """
    cost_terms = []

    # Forbid sequences that are too short.
    for length in range(1, spec.hard_min):
        for start in range(len(works) - length + 1):
            model.AddBoolOr(negated_bounded_span(works, start, length))

    # Penalize sequences that are below the soft limit.
    if spec.min_cost > 0:
        for length in range(max(1, spec.hard_min), spec.soft_min):
            for start in range(len(works) - length + 1):
                span = negated_bounded_span(works, start, length)
                record = PenaltyRecord(
                    rule, context, unit, f"under_span(start={start}, length={length})"
                )
                lit = model.NewBoolVar(record.name)
                span.append(lit)
                model.AddBoolOr(span)
                # We filter exactly the sequence with a short length.
                # The penalty is proportional to the delta with soft_min.
                cost_terms.append(
                    CostTerm(lit, spec.min_cost * (spec.soft_min - length), record)
                )

    # Penalize sequences that are above the soft limit.
    if spec.max_cost > 0:
        for length in range(spec.soft_max + 1, spec.hard_max + 1):
            for start in range(len(works) - length + 1):
                span = negated_bounded_span(works, start, length)
                record = PenaltyRecord(
                    rule, context, unit, f"over_span(start={start}, length={length})"
                )
                lit = model.NewBoolVar(record.name)
                span.append(lit)
                model.AddBoolOr(span)
                # Cost paid is max_cost * excess length.
                cost_terms.append(
                    CostTerm(lit, spec.max_cost * (length - spec.soft_max), record)
                )

    # Just forbid any sequence of true variables with length hard_max + 1
    for start in range(len(works) - spec.hard_max):
        model.AddBoolOr([works[i].Not() for i in range(start, start + spec.hard_max + 1)])

    return cost_terms


def shift_sequence_rule(model, state: ShiftScheduleState):
    """Apply every run-length rule to every employee over the whole horizon."""
    for rule in state.sequence_rules:
        for e in range(state.num_employees):
            works = state.work.sequence(e, rule.shift)
            state.objective.extend(
                add_soft_sequence_constraint(
                    model,
                    works,
                    rule.spec,
                    f"employee {e}, shift {rule.shift}",
                    unit=e,
                )
            )
