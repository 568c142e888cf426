from core.objective import CostTerm, PenaltyRecord
from core.state import ShiftScheduleState, TimetableState
from typing import Optional

"""
This module contains the succession rules: what an employee may do the day after a given shift,
and what a teacher pays for changing rooms between consecutive blocks.
"""


def add_transition_penalty(
    model, previous, following, penalty: int, record: PenaltyRecord
) -> Optional[CostTerm]:
    """
    Forbid or penalise `previous` and `following` being true together.

    With a zero penalty the pair is forbidden by the clause `not previous or not following`.
    Otherwise a boolean indicator is added to the clause and charged `penalty`.
    """
    transition = [previous.Not(), following.Not()]
    if penalty == 0:
        model.AddBoolOr(transition)
        return None
    trans_var = model.NewBoolVar(record.name)
    transition.append(trans_var)
    model.AddBoolOr(transition)
    return CostTerm(trans_var, penalty, record)


def shift_transition_rule(model, state: ShiftScheduleState):
    """Apply every shift succession rule to every employee and every pair of consecutive days."""
    for rule in state.transition_rules:
        names = (
            f"{state.shift_labels[rule.previous_shift]}->"
            f"{state.shift_labels[rule.next_shift]}"
        )
        for e in range(state.num_employees):
            for d in range(state.num_days - 1):
                record = PenaltyRecord("transition", f"employee={e}, day={d}", e, names)
                term = add_transition_penalty(
                    model,
                    state.work[e, rule.previous_shift, d],
                    state.work[e, rule.next_shift, d + 1],
                    rule.penalty,
                    record,
                )
                if term is not None:
                    state.objective.add(term)


def add_room_change_penalty(
    model, current, following, penalty: int, record: PenaltyRecord
) -> CostTerm:
    """
    Charge `penalty` when both `current` and `following` are true.

    The indicator is linearised as the logical AND of its operands:
    `changed <= current`, `changed <= following`, `changed >= current + following - 1`.
    """
    changed = model.NewBoolVar(record.name)
    model.Add(changed <= current)
    model.Add(changed <= following)
    model.Add(changed >= current + following - 1)
    return CostTerm(changed, penalty, record)


def room_change_rule(model, state: TimetableState):
    """
    Penalise a teacher teaching class `a` in one block and class `b` in the next block of the
    same day when the two classes use different rooms. A class is never paired with itself,
    since it keeps its own room.
    """
    if state.room_change_penalty <= 0:
        return

    for teacher in state.teachers:
        class_ids = state.classes_of_teacher(teacher)
        for a in class_ids:
            for b in class_ids:
                if a == b or state.classes[a].room == state.classes[b].room:
                    continue
                for day, day_name in enumerate(state.days):
                    for block in range(state.blocks_per_day - 1):
                        slot = state.slot(day, block)
                        record = PenaltyRecord(
                            "room_change",
                            f"teacher {teacher}, {day_name} block {block}",
                            teacher,
                            f"{state.classes[a].id}@{state.classes[a].room}->"
                            f"{state.classes[b].id}@{state.classes[b].room}",
                        )
                        state.objective.add(
                            add_room_change_penalty(
                                model,
                                state.scheduled[a, 0, slot],
                                state.scheduled[b, 0, slot + 1],
                                state.room_change_penalty,
                                record,
                            )
                        )
