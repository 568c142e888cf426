from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from core.state import (
    FixedAssignment,
    ShiftRequest,
    ShiftRule,
    SoftConstraintSpec,
    TransitionRule,
)
from utils.constants import *


class FixedAssignmentItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    employee: int
    shift: int
    day: int

    def to_rule(self) -> FixedAssignment:
        return FixedAssignment(self.employee, self.shift, self.day)


class ShiftRequestItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    employee: int
    shift: int
    day: int
    weight: int = Field(description="Negative rewards granting the request, positive penalises it.")

    def to_rule(self) -> ShiftRequest:
        return ShiftRequest(self.employee, self.shift, self.day, self.weight)


class SoftShiftRule(BaseModel):
    model_config = ConfigDict(extra="forbid")

    shift: int
    hardMin: int
    softMin: int
    minCost: int
    softMax: int
    hardMax: int
    maxCost: int

    @classmethod
    def from_values(cls, values: List[int]) -> "SoftShiftRule":
        """Build from `[shift, hardMin, softMin, minCost, softMax, hardMax, maxCost]`."""
        keys = ["shift", "hardMin", "softMin", "minCost", "softMax", "hardMax", "maxCost"]
        return cls(**dict(zip(keys, values)))

    def to_rule(self) -> ShiftRule:
        spec = SoftConstraintSpec(
            self.hardMin, self.softMin, self.minCost, self.softMax, self.hardMax, self.maxCost
        )
        return ShiftRule(self.shift, spec)


class PenalizedTransition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    previousShift: int
    nextShift: int
    penalty: int = Field(default=0, ge=0, description="0 forbids the transition.")

    def to_rule(self) -> TransitionRule:
        return TransitionRule(self.previousShift, self.nextShift, self.penalty)


class ShiftProblem(BaseModel):
    """Fully resolved input of the shift scheduling variant. Defaults reproduce the bundled sample."""

    model_config = ConfigDict(extra="forbid")

    numEmployees: int = Field(default=NUM_EMPLOYEES)
    numWeeks: int = Field(default=NUM_WEEKS)
    shifts: List[str] = Field(default_factory=lambda: list(SHIFT_LABELS))
    fixedAssignments: List[FixedAssignmentItem] = Field(
        default_factory=lambda: [
            FixedAssignmentItem(employee=e, shift=s, day=d) for e, s, d in FIXED_ASSIGNMENTS
        ]
    )
    requests: List[ShiftRequestItem] = Field(
        default_factory=lambda: [
            ShiftRequestItem(employee=e, shift=s, day=d, weight=w)
            for e, s, d, w in SHIFT_REQUESTS
        ]
    )
    shiftConstraints: List[SoftShiftRule] = Field(
        default_factory=lambda: [
            SoftShiftRule.from_values(v) for v in SHIFT_SEQUENCE_CONSTRAINTS
        ]
    )
    weeklySumConstraints: List[SoftShiftRule] = Field(
        default_factory=lambda: [
            SoftShiftRule.from_values(v) for v in WEEKLY_SUM_CONSTRAINTS
        ]
    )
    penalizedTransitions: List[PenalizedTransition] = Field(
        default_factory=lambda: [
            PenalizedTransition(previousShift=p, nextShift=n, penalty=c)
            for p, n, c in PENALIZED_TRANSITIONS
        ]
    )
    weeklyCoverDemands: List[List[int]] = Field(
        default_factory=lambda: [list(row) for row in WEEKLY_COVER_DEMANDS]
    )
    excessCoverPenalties: List[int] = Field(
        default_factory=lambda: list(EXCESS_COVER_PENALTIES)
    )
    timeLimitSeconds: float = Field(default=SOLVER_TIME_LIMIT_SECONDS, gt=0)
    solverParams: Optional[str] = None

    @property
    def numDays(self) -> int:
        return self.numWeeks * DAYS_PER_WEEK
