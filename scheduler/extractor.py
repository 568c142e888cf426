from dataclasses import dataclass, field
from typing import Any, List, Optional, Union
import logging
import pandas as pd
from core.objective import ObjectiveAggregator
from core.state import ShiftScheduleState, TimetableState
from exceptions.custom_errors import NoSolutionError
from utils.constants import DAY_LABELS
from utils.slot_utils import shift_day_columns, timetable_slot_columns
from .solver import SolveStats, SolverResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PenaltyEntry:
    """An active cost term of the solution."""

    name: str
    rule: str
    unit: Optional[Any]
    context: str
    detail: str
    coefficient: int
    value: int
    is_integer: bool

    @property
    def penalty(self) -> int:
        return self.coefficient * self.value

    @property
    def kind(self) -> str:
        return "violated" if self.penalty > 0 else "fulfilled"

    def describe(self) -> str:
        if self.is_integer:
            return f"{self.name} violated by {self.value}, linear penalty={self.coefficient}"
        if self.coefficient > 0:
            return f"{self.name} violated, penalty={self.coefficient}"
        return f"{self.name} fulfilled, gain={-self.coefficient}"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "rule": self.rule,
            "unit": self.unit,
            "context": self.context,
            "detail": self.detail,
            "coefficient": self.coefficient,
            "value": self.value,
            "penalty": self.penalty,
            "kind": self.kind,
        }


@dataclass
class ScheduleReport:
    """
    Structured result of a solved model.

    `schedule` has one row per unit and one column per slot. In shift mode the cells are
    shift labels; in timetable mode they are the class's room when the class is scheduled
    in that slot and an empty string otherwise.
    """

    mode: str
    schedule: pd.DataFrame
    penalties: List[PenaltyEntry]
    stats: SolveStats
    days: List[str] = field(default_factory=list)
    """Day names of a timetable report, in slot order."""

    @property
    def total_penalty(self) -> int:
        return sum(p.penalty for p in self.penalties)

    def penalties_for(self, rule: str) -> List[PenaltyEntry]:
        return [p for p in self.penalties if p.rule == rule]

    def to_dict(self) -> dict:
        schedule_df = self.schedule.reset_index()
        return {
            "mode": self.mode,
            "schedule": schedule_df.to_dict(orient="records"),
            "penalties": [p.to_dict() for p in self.penalties],
            "totalPenalty": self.total_penalty,
            "stats": self.stats.to_dict(),
        }


def extract_shift_schedule(state: ShiftScheduleState, result: SolverResult) -> pd.DataFrame:
    """One row per employee, one column per day, holding the label of the assigned shift."""
    rows = {}
    for e in range(state.num_employees):
        row = []
        for d in range(state.num_days):
            picked = [
                s for s in range(state.num_shifts) if result.grid_values[(e, s, d)]
            ]
            row.append(" / ".join(state.shift_labels[s] for s in picked))
        rows[e] = row
    df = pd.DataFrame.from_dict(
        rows, orient="index", columns=shift_day_columns(state.num_days)
    )
    df.index.name = "employee"
    return df


def extract_timetable(state: TimetableState, result: SolverResult) -> pd.DataFrame:
    """One row per class, one column per (day, block), holding the room where the class is taught."""
    rows = {}
    for i, school_class in enumerate(state.classes):
        rows[school_class.id] = [
            school_class.room if result.grid_values[(i, 0, t)] else ""
            for t in range(state.num_slots)
        ]
    df = pd.DataFrame.from_dict(
        rows,
        orient="index",
        columns=timetable_slot_columns(state.days, state.blocks_per_day),
    )
    df.index.name = "class"
    return df


def extract_penalties(objective: ObjectiveAggregator, result: SolverResult) -> List[PenaltyEntry]:
    """Every cost term whose variable is true (boolean) or positive (integer) in the solution."""
    entries = []
    for term, value in zip(objective.terms, result.term_values):
        if value <= 0:
            continue
        record = term.record
        entries.append(
            PenaltyEntry(
                name=record.name,
                rule=record.rule,
                unit=record.unit,
                context=record.context,
                detail=record.detail,
                coefficient=term.coefficient,
                value=int(value),
                is_integer=term.is_integer,
            )
        )
    return entries


def build_report(
    state: Union[ShiftScheduleState, TimetableState], result: SolverResult
) -> ScheduleReport:
    """
    Decode a solution into a ScheduleReport. Pure: reads the state and the result only.

    Raises:
        NoSolutionError: If the solve produced no assignment (INFEASIBLE, UNKNOWN, MODEL_INVALID).
    """
    if not result.status.has_solution:
        raise NoSolutionError(
            f"❌ No assignment to report: solver status is {result.status.value}."
        )

    if isinstance(state, ShiftScheduleState):
        mode, schedule = "shifts", extract_shift_schedule(state, result)
    else:
        mode, schedule = "timetable", extract_timetable(state, result)

    penalties = extract_penalties(state.objective, result)
    days = list(state.days) if isinstance(state, TimetableState) else []
    return ScheduleReport(mode, schedule, penalties, result.stats, days)


def render_report(report: ScheduleReport) -> str:
    """Render a report as plain text: the grid, the active penalties and the solver statistics."""
    lines = [""]
    df = report.schedule

    if report.mode == "shifts":
        num_weeks = (len(df.columns) + len(DAY_LABELS) - 1) // len(DAY_LABELS)
        header = " " * 10 + "".join(f"{label} " for label in DAY_LABELS) * num_weeks
        lines.append(header.rstrip())
        for e, row in df.iterrows():
            lines.append(f"worker {e}: " + " ".join(row.tolist()))
    else:
        width = max(len(str(i)) for i in df.index)
        days = report.days
        blocks = len(df.columns) // len(days)
        header = " " * (width + 2) + " ".join(f"{d[:blocks * 2 - 1]:<{blocks * 2 - 1}}" for d in days)
        lines.append(header.rstrip())
        for class_id, row in df.iterrows():
            cells = ["#" if room else "." for room in row.tolist()]
            per_day = [" ".join(cells[i:i + blocks]) for i in range(0, len(cells), blocks)]
            lines.append(f"{str(class_id):<{width}}: " + " ".join(per_day))

    lines.append("")
    lines.append("Penalties:")
    for p in report.penalties:
        lines.append(f"  {p.describe()}")
    lines.append(f"  total={report.total_penalty}")

    lines.append("")
    lines.append(report.stats.response_stats)
    return "\n".join(lines)
