from typing import List, Tuple
from utils.constants import DAYS_PER_WEEK


def week_and_weekday(day: int) -> Tuple[int, int]:
    """Split an absolute day index into (week, day of week)."""
    return divmod(day, DAYS_PER_WEEK)


def shift_day_columns(num_days: int) -> List[str]:
    """Column names of a shift schedule, e.g. `w0d0` for the first day of the first week."""
    return ["w{}d{}".format(*week_and_weekday(d)) for d in range(num_days)]


def timetable_slot_columns(days: List[str], blocks_per_day: int) -> List[str]:
    """Column names of a timetable, e.g. `Mon 0` for the first block on Monday."""
    return [f"{day} {block}" for day in days for block in range(blocks_per_day)]
