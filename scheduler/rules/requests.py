from core.objective import CostTerm, PenaltyRecord
from core.state import ShiftScheduleState

"""
This module contains the request rule: employee wishes added straight to the objective.
"""


def shift_request_rule(model, state: ShiftScheduleState):
    """
    Add each request as a single-variable cost term.

    A negative weight is a gain when the employee gets the requested shift, a positive one
    is a penalty when they get a shift they asked to avoid.
    """
    for r in state.requests:
        record = PenaltyRecord(
            "shift_request",
            f"employee {r.employee}, shift {state.shift_labels[r.shift]}, day {r.day}",
            r.employee,
        )
        state.objective.add(CostTerm(state.work[r.employee, r.shift, r.day], r.weight, record))
