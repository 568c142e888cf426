from core.state import ShiftScheduleState, TimetableState

"""
This module contains the assignment-shape rules: one shift per employee and day, fixed
pre-assignments, and the weekly block count of each class.
"""


def one_hot_rule(model, state: ShiftScheduleState):
    """Ensure that each employee holds exactly one shift (possibly off) per day."""
    for e in range(state.num_employees):
        for d in range(state.num_days):
            model.AddExactlyOne(state.work.categories_at(e, d))


def fixed_assignment_rule(model, state: ShiftScheduleState):
    """Force every fixed assignment on."""
    for fa in state.fixed_assignments:
        model.Add(state.work[fa.employee, fa.shift, fa.day] == 1)


def weekly_class_count_rule(model, state: TimetableState):
    """Ensure that each class is scheduled exactly its required number of blocks per week."""
    for i, school_class in enumerate(state.classes):
        model.Add(sum(state.scheduled.sequence(i, 0)) == school_class.weekly_blocks)
