from collections import Counter
from schemas.schedule.shifts import ShiftProblem
from schemas.schedule.timetable import TimetableConfig
from exceptions.custom_errors import (
    InputMismatchError,
    InsufficientSlotsError,
    InvalidConfigError,
    UnknownTeacherError,
)
from utils.constants import DAYS_PER_WEEK, OFF_SHIFT


def validate_timetable_config(config: TimetableConfig):
    """
    Fail fast on a timetable configuration that cannot describe a model.

    Checks, in order: a non-empty day list, a positive block count, a non-empty class list,
    unique class ids, every class referencing a declared teacher, and every class demanding
    no more weekly blocks than the timetable has slots.

    Raises:
        InvalidConfigError: On an empty or malformed configuration.
        UnknownTeacherError: If a class references an undeclared teacher.
        InsufficientSlotsError: If a class demands more blocks than there are slots.
    """
    if not config.days:
        raise InvalidConfigError("❌ The day list is empty.")
    if config.blocksPerDay <= 0:
        raise InvalidConfigError(
            f"❌ Blocks per day must be positive, got {config.blocksPerDay}."
        )
    if not config.classes:
        raise InvalidConfigError("❌ The class list is empty.")
    if config.roomChangePenalty < 0:
        raise InvalidConfigError(
            f"❌ Room change penalty must be non-negative, got {config.roomChangePenalty}."
        )

    duplicates = [i for i, n in Counter(c.id for c in config.classes).items() if n > 1]
    if duplicates:
        raise InvalidConfigError(
            f"❌ Duplicate class ids: {', '.join(sorted(duplicates))}."
        )

    teacher_names = {t.name for t in config.teachers}
    total_slots = config.numSlots
    for c in config.classes:
        if c.teacher not in teacher_names:
            raise UnknownTeacherError(
                f"❌ Class {c.id} references unknown teacher {c.teacher!r}."
            )
        if c.weeklyBlocks < 0:
            raise InvalidConfigError(
                f"❌ Class {c.id} demands a negative number of weekly blocks ({c.weeklyBlocks})."
            )
        if c.weeklyBlocks > total_slots:
            raise InsufficientSlotsError(
                f"❌ Class {c.id} demands {c.weeklyBlocks} weekly blocks but only "
                f"{total_slots} slots exist ({len(config.days)} days x {config.blocksPerDay} blocks)."
            )


def validate_shift_problem(problem: ShiftProblem):
    """
    Fail fast on a shift problem whose indexes do not fit its own dimensions.

    Raises:
        InvalidConfigError: On non-positive dimensions or malformed demand tables.
        InputMismatchError: If a fixed assignment, request or rule references an unknown
            employee, shift or day.
    """
    if problem.numEmployees <= 0:
        raise InvalidConfigError(
            f"❌ Number of employees must be positive, got {problem.numEmployees}."
        )
    if problem.numWeeks <= 0:
        raise InvalidConfigError(
            f"❌ Number of weeks must be positive, got {problem.numWeeks}."
        )
    num_shifts = len(problem.shifts)
    if num_shifts < 2:
        raise InvalidConfigError(
            "❌ At least an off shift and one working shift are required."
        )

    def check_shift(shift: int, where: str):
        if not 0 <= shift < num_shifts:
            raise InputMismatchError(
                f"❌ {where} references unknown shift {shift} (known: 0..{num_shifts - 1})."
            )

    def check_cell(employee: int, shift: int, day: int, where: str):
        if not 0 <= employee < problem.numEmployees:
            raise InputMismatchError(
                f"❌ {where} references unknown employee {employee}."
            )
        check_shift(shift, where)
        if not 0 <= day < problem.numDays:
            raise InputMismatchError(
                f"❌ {where} references day {day} outside the {problem.numDays}-day horizon."
            )

    for fa in problem.fixedAssignments:
        check_cell(fa.employee, fa.shift, fa.day, "Fixed assignment")
    for r in problem.requests:
        check_cell(r.employee, r.shift, r.day, "Request")
    for rule in problem.shiftConstraints + problem.weeklySumConstraints:
        check_shift(rule.shift, "Shift constraint")
    for t in problem.penalizedTransitions:
        check_shift(t.previousShift, "Transition")
        check_shift(t.nextShift, "Transition")

    if len(problem.weeklyCoverDemands) != DAYS_PER_WEEK:
        raise InvalidConfigError(
            f"❌ Cover demands need one row per day of the week ({DAYS_PER_WEEK}), "
            f"got {len(problem.weeklyCoverDemands)}."
        )
    working_shifts = num_shifts - 1
    for d, row in enumerate(problem.weeklyCoverDemands):
        if len(row) != working_shifts or any(v < 0 for v in row):
            raise InvalidConfigError(
                f"❌ Cover demand row {d} must hold {working_shifts} non-negative values, got {row}."
            )
    if len(problem.excessCoverPenalties) != working_shifts:
        raise InvalidConfigError(
            f"❌ Expected {working_shifts} excess cover penalties (one per shift except "
            f"{problem.shifts[OFF_SHIFT]!r}), got {len(problem.excessCoverPenalties)}."
        )
