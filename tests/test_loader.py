"""Tests for configuration resolution from defaults, environment, file and command line."""

import json

import pytest

from exceptions.custom_errors import ConfigFileError, InvalidConfigError
from utils.constants import BLOCKS_PER_DAY, NUM_EMPLOYEES, TIMETABLE_DAYS
from utils.loader import (
    env_key_to_field,
    load_shift_problem,
    load_timetable_config,
    read_env_overrides,
)
from schemas.schedule.timetable import TimetableConfig


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults_without_any_source():
    config = load_timetable_config(environ={})

    assert config.days == TIMETABLE_DAYS
    assert config.blocksPerDay == BLOCKS_PER_DAY
    assert load_shift_problem(environ={}).numEmployees == NUM_EMPLOYEES


def test_env_key_to_field():
    assert env_key_to_field("BLOCKS_PER_DAY") == "blocksPerDay"
    assert env_key_to_field("DAYS") == "days"


def test_env_overrides_ignore_unknown_keys():
    environ = {
        "PLANNER_BLOCKS_PER_DAY": "4",
        "PLANNER_DAYS": "Mon, Tue",
        "PLANNER_NOT_A_FIELD": "1",
        "BLOCKS_PER_DAY": "9",
    }

    assert read_env_overrides(TimetableConfig, environ) == {
        "blocksPerDay": 4,
        "days": ["Mon", "Tue"],
    }


def test_precedence_env_then_file_then_cli(tmp_path):
    environ = {
        "PLANNER_BLOCKS_PER_DAY": "4",
        "PLANNER_ROOM_CHANGE_PENALTY": "3",
        "PLANNER_DAYS": '["Mon", "Tue", "Wed"]',
    }
    path = write_json(tmp_path / "timetable.json", {"blocksPerDay": 5, "days": ["Mon", "Tue"]})

    config = load_timetable_config(
        path, {"days": ["Fri"], "roomChangePenalty": None}, environ=environ
    )

    assert config.days == ["Fri"]
    assert config.blocksPerDay == 5
    assert config.roomChangePenalty == 3


def test_plain_teacher_names_in_file(tmp_path):
    path = write_json(
        tmp_path / "timetable.json",
        {
            "teachers": ["Ada"],
            "classes": [{"id": "1A", "teacher": "Ada", "room": "R1", "weeklyBlocks": 2}],
        },
    )

    config = load_timetable_config(path, environ={})

    assert [t.name for t in config.teachers] == ["Ada"]
    assert config.classes[0].weeklyBlocks == 2


def test_missing_file(tmp_path):
    with pytest.raises(ConfigFileError, match="not found"):
        load_timetable_config(tmp_path / "absent.json", environ={})


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_malformed_file(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigFileError):
        load_shift_problem(path, environ={})


def test_schema_errors_become_config_errors(tmp_path):
    path = write_json(tmp_path / "shifts.json", {"numEmployees": "many"})

    with pytest.raises(InvalidConfigError):
        load_shift_problem(path, environ={})

    with pytest.raises(InvalidConfigError):
        load_timetable_config(cli_overrides={"unknownField": 1}, environ={})
