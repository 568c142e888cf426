from dataclasses import dataclass, field
from enum import Enum
from ortools.sat.python import cp_model
from typing import List, Sequence
from core.objective import ObjectiveAggregator
from core.variables import VariableGrid
from exceptions.custom_errors import InvalidConstraintSpecError


class SolveStatus(str, Enum):
    """Outcome of a single solve."""

    OPTIMAL = "OPTIMAL"
    FEASIBLE = "FEASIBLE"
    INFEASIBLE = "INFEASIBLE"
    UNKNOWN = "UNKNOWN"
    MODEL_INVALID = "MODEL_INVALID"

    @property
    def has_solution(self) -> bool:
        return self in (SolveStatus.OPTIMAL, SolveStatus.FEASIBLE)

    @classmethod
    def from_cp_status(cls, status: int) -> "SolveStatus":
        return {
            cp_model.OPTIMAL: cls.OPTIMAL,
            cp_model.FEASIBLE: cls.FEASIBLE,
            cp_model.INFEASIBLE: cls.INFEASIBLE,
            cp_model.MODEL_INVALID: cls.MODEL_INVALID,
        }.get(status, cls.UNKNOWN)


@dataclass(frozen=True)
class SoftConstraintSpec:
    """
    Hard bounds plus a preferred (soft) band with linear violation costs.

    Values in `[soft_min, soft_max]` are free, values in `[hard_min, soft_min)`
    cost `min_cost` per unit of shortfall, values in `(soft_max, hard_max]` cost
    `max_cost` per unit of excess, values outside `[hard_min, hard_max]` are
    infeasible. A zero cost disables the corresponding soft band.
    """

    hard_min: int
    soft_min: int
    min_cost: int
    soft_max: int
    hard_max: int
    max_cost: int

    def __post_init__(self):
        if not self.hard_min <= self.soft_min <= self.soft_max <= self.hard_max:
            raise InvalidConstraintSpecError(
                f"❌ Bounds must satisfy hard_min <= soft_min <= soft_max <= hard_max, got "
                f"{self.hard_min} <= {self.soft_min} <= {self.soft_max} <= {self.hard_max}"
            )
        if self.min_cost < 0 or self.max_cost < 0:
            raise InvalidConstraintSpecError(
                f"❌ Violation costs must be non-negative, got min_cost={self.min_cost}, max_cost={self.max_cost}"
            )

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "SoftConstraintSpec":
        """Build from `(hard_min, soft_min, min_cost, soft_max, hard_max, max_cost)`."""
        return cls(*values)


@dataclass(frozen=True)
class ShiftRule:
    """A soft constraint specification applied to one shift type."""

    shift: int
    spec: SoftConstraintSpec


@dataclass(frozen=True)
class TransitionRule:
    """Shift `previous_shift` on day d followed by `next_shift` on day d+1. A zero penalty forbids it."""

    previous_shift: int
    next_shift: int
    penalty: int


@dataclass(frozen=True)
class FixedAssignment:
    employee: int
    shift: int
    day: int


@dataclass(frozen=True)
class ShiftRequest:
    """A direct preference; a negative weight rewards granting the request."""

    employee: int
    shift: int
    day: int
    weight: int


@dataclass(frozen=True)
class SchoolClass:
    id: str
    teacher: str
    room: str
    weekly_blocks: int


@dataclass
class ShiftScheduleState:
    """
    A dataclass to hold all the state relevant to creating and solving a shift
    scheduling problem.
    """

    # model inputs
    work: VariableGrid
    """The `(employee, shift, day)` grid of boolean assignment variables."""
    shift_labels: List[str]
    """One short label per shift type; index 0 is the off shift."""
    num_weeks: int
    """The number of weeks in the scheduling period."""
    fixed_assignments: List[FixedAssignment]
    """Pre-assignments that every solution must keep."""
    requests: List[ShiftRequest]
    """Weighted employee requests, added directly to the objective."""
    sequence_rules: List[ShiftRule]
    """Run-length rules (e.g. consecutive nights) per shift type."""
    weekly_sum_rules: List[ShiftRule]
    """Per-week count rules per shift type."""
    transition_rules: List[TransitionRule]
    """Penalised or forbidden shift successions."""
    weekly_cover_demands: List[List[int]]
    """For each day of the week, the minimum staffing of each non-off shift."""
    excess_cover_penalties: List[int]
    """Per non-off shift, the penalty per employee above the demand."""
    days_per_week: int = 7

    # collections to fill
    objective: ObjectiveAggregator = field(default_factory=ObjectiveAggregator)
    """Every cost term produced by the rules."""

    @property
    def num_employees(self) -> int:
        return self.work.num_units

    @property
    def num_shifts(self) -> int:
        return self.work.num_categories

    @property
    def num_days(self) -> int:
        return self.work.num_slots


@dataclass
class TimetableState:
    """
    A dataclass to hold all the state relevant to creating and solving a
    timetable. Each class is a unit with a single category: scheduled or not
    at a `(day, block)` slot.
    """

    # model inputs
    scheduled: VariableGrid
    """The `(class, 0, slot)` grid; slot = day * blocks_per_day + block."""
    days: List[str]
    """Ordered day names."""
    blocks_per_day: int
    """Number of teaching blocks per day."""
    teachers: List[str]
    """Declared teacher names."""
    classes: List[SchoolClass]
    """Classes in unit order."""
    room_change_penalty: int
    """Cost of a teacher changing rooms between consecutive blocks."""

    # collections to fill
    objective: ObjectiveAggregator = field(default_factory=ObjectiveAggregator)
    """Every cost term produced by the rules."""

    @property
    def num_slots(self) -> int:
        return len(self.days) * self.blocks_per_day

    def slot(self, day: int, block: int) -> int:
        if not 0 <= block < self.blocks_per_day:
            raise IndexError(f"block index {block} out of range [0, {self.blocks_per_day})")
        return day * self.blocks_per_day + block

    def classes_of_teacher(self, teacher: str) -> List[int]:
        return [i for i, c in enumerate(self.classes) if c.teacher == teacher]

    def classes_in_room(self, room: str) -> List[int]:
        return [i for i, c in enumerate(self.classes) if c.room == room]
