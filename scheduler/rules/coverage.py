from core.objective import CostTerm, PenaltyRecord
from core.state import ShiftScheduleState, TimetableState
from utils.constants import OFF_SHIFT
from typing import List, Optional

"""
This module contains the cross-unit rules: minimum staffing per shift and day, and the exclusive
use of a teacher or a room per timetable slot.
"""


def add_min_cover_constraint(
    model, works: List, min_demand: int, excess_penalty: int, record: PenaltyRecord
) -> Optional[CostTerm]:
    """
    Require at least `min_demand` of `works` to be true and charge `excess_penalty` per extra one.

    Returns the excess cost term, or None when extra staff is free.
    """
    worked = model.NewIntVar(0, len(works), "")
    model.Add(worked == sum(works))
    model.Add(worked >= min_demand)
    if excess_penalty > 0:
        excess = model.NewIntVar(0, max(0, len(works) - min_demand), record.name)
        model.Add(excess == worked - min_demand)
        return CostTerm(excess, excess_penalty, record, is_integer=True)
    return None


def cover_demand(state: ShiftScheduleState, shift: int, day_of_week: int) -> int:
    """Minimum staffing of a working shift on a day of the week."""
    if shift == OFF_SHIFT or not 0 <= shift < state.num_shifts:
        raise IndexError(f"shift {shift} has no cover demand")
    return state.weekly_cover_demands[day_of_week][shift - 1]


def min_cover_rule(model, state: ShiftScheduleState):
    """Ensure that every working shift meets its daily demand, penalising each employee above it."""
    for s in range(1, state.num_shifts):
        for w in range(state.num_weeks):
            for d in range(state.days_per_week):
                day = w * state.days_per_week + d
                works = state.work.across_units(s, day)
                record = PenaltyRecord(
                    "excess_demand", f"shift={s}, week={w}, day={d}"
                )
                term = add_min_cover_constraint(
                    model,
                    works,
                    cover_demand(state, s, d),
                    state.excess_cover_penalties[s - 1],
                    record,
                )
                if term is not None:
                    state.objective.add(term)


def resource_exclusivity_rule(model, state: TimetableState):
    """Ensure that a teacher or a room holds at most one class per slot."""
    teacher_groups = [state.classes_of_teacher(t) for t in state.teachers]
    rooms = sorted({c.room for c in state.classes})
    room_groups = [state.classes_in_room(r) for r in rooms]

    for class_ids in teacher_groups + room_groups:
        if len(class_ids) < 2:
            continue
        for slot in range(state.num_slots):
            model.AddAtMostOne(state.scheduled[i, 0, slot] for i in class_ids)
