import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
SHIFT_LABELS = _constants["SHIFT_LABELS"]
DAY_LABELS = _constants["DAY_LABELS"]
DAYS_PER_WEEK = _constants["DAYS_PER_WEEK"]
OFF_SHIFT = 0

NUM_EMPLOYEES = _constants["NUM_EMPLOYEES"]
NUM_WEEKS = _constants["NUM_WEEKS"]
FIXED_ASSIGNMENTS = _constants["FIXED_ASSIGNMENTS"]
SHIFT_REQUESTS = _constants["SHIFT_REQUESTS"]
SHIFT_SEQUENCE_CONSTRAINTS = _constants["SHIFT_SEQUENCE_CONSTRAINTS"]
WEEKLY_SUM_CONSTRAINTS = _constants["WEEKLY_SUM_CONSTRAINTS"]
PENALIZED_TRANSITIONS = _constants["PENALIZED_TRANSITIONS"]
WEEKLY_COVER_DEMANDS = _constants["WEEKLY_COVER_DEMANDS"]
EXCESS_COVER_PENALTIES = _constants["EXCESS_COVER_PENALTIES"]

TIMETABLE_DAYS = _constants["TIMETABLE_DAYS"]
BLOCKS_PER_DAY = _constants["BLOCKS_PER_DAY"]
ROOM_CHANGE_PENALTY = _constants["ROOM_CHANGE_PENALTY"]
TIMETABLE_TEACHERS = _constants["TIMETABLE_TEACHERS"]
TIMETABLE_CLASSES = _constants["TIMETABLE_CLASSES"]

SOLVER_TIME_LIMIT_SECONDS = _constants["SOLVER_TIME_LIMIT_SECONDS"]
SOLVER_NUM_WORKERS = _constants["SOLVER_NUM_WORKERS"]
SOLVER_RANDOM_SEED = _constants["SOLVER_RANDOM_SEED"]
ENV_PREFIX = _constants["ENV_PREFIX"]
