from core.objective import CostTerm, PenaltyRecord
from core.state import ShiftScheduleState, SoftConstraintSpec
from typing import List, Optional

"""
This module contains the count rules: how many times an employee holds a shift within a window.
"""


def add_soft_sum_constraint(
    model,
    works: List,
    spec: SoftConstraintSpec,
    context: str,
    unit: Optional[int] = None,
    rule: str = "weekly_sum_constraint",
) -> List[CostTerm]:
    """
    Constrain `sum(works)` to `[hard_min, hard_max]` and penalise it outside `[soft_min, soft_max]`.

    The shortfall `max(0, soft_min - sum)` and the surplus `max(0, sum - soft_max)` are integer
    variables tied to the sum through `AddMaxEquality`, so they equal the deviation exactly.

    Returns the cost terms to add to the objective.
    """
    cost_terms = []
    bound = len(works) + max(abs(spec.soft_min), abs(spec.soft_max))

    sum_var = model.NewIntVar(spec.hard_min, spec.hard_max, "")
    # This adds the hard constraints on the sum.
    model.Add(sum_var == sum(works))

    # Penalize sums below the soft_min target.
    if spec.soft_min > spec.hard_min and spec.min_cost > 0:
        delta = model.NewIntVar(-bound, bound, "")
        model.Add(delta == spec.soft_min - sum_var)
        record = PenaltyRecord(rule, context, unit, "under_sum")
        excess = model.NewIntVar(0, bound, record.name)
        model.AddMaxEquality(excess, [delta, model.NewConstant(0)])
        cost_terms.append(CostTerm(excess, spec.min_cost, record, is_integer=True))

    # Penalize sums above the soft_max target.
    if spec.soft_max < spec.hard_max and spec.max_cost > 0:
        delta = model.NewIntVar(-bound, bound, "")
        model.Add(delta == sum_var - spec.soft_max)
        record = PenaltyRecord(rule, context, unit, "over_sum")
        excess = model.NewIntVar(0, bound, record.name)
        model.AddMaxEquality(excess, [delta, model.NewConstant(0)])
        cost_terms.append(CostTerm(excess, spec.max_cost, record, is_integer=True))

    return cost_terms


def weekly_sum_rule(model, state: ShiftScheduleState):
    """Apply every weekly count rule to every employee and every complete week."""
    for rule in state.weekly_sum_rules:
        for e in range(state.num_employees):
            for w in range(state.num_weeks):
                works = state.work.window(
                    e, rule.shift, w * state.days_per_week, (w + 1) * state.days_per_week
                )
                state.objective.extend(
                    add_soft_sum_constraint(
                        model,
                        works,
                        rule.spec,
                        f"employee {e}, shift {rule.shift}, week {w}",
                        unit=e,
                    )
                )
