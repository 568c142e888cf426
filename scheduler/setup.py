from ortools.sat.python import cp_model
from typing import List, Sequence
from core.state import SchoolClass
from core.variables import VariableGrid


def make_model() -> cp_model.CpModel:
    """Creates a new CP-SAT model instance."""
    model = cp_model.CpModel()
    return model


def build_shift_grid(
    model: cp_model.CpModel, num_employees: int, shift_labels: Sequence[str], num_days: int
) -> VariableGrid:
    """Builds the work[e, s, d] BoolVars for every employee/shift/day."""
    return VariableGrid(model, range(num_employees), shift_labels, num_days, prefix="work")


def build_timetable_grid(
    model: cp_model.CpModel, classes: List[SchoolClass], num_slots: int
) -> VariableGrid:
    """Builds the scheduled[c, 0, t] BoolVars for every class/slot; the category axis has a single entry."""
    return VariableGrid(
        model, [c.id for c in classes], ["scheduled"], num_slots, prefix="class"
    )
