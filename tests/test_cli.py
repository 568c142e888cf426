"""Tests for the command-line entry point."""

import json

import pytest

import main as cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    for key in [
        "PLANNER_DAYS",
        "PLANNER_BLOCKS_PER_DAY",
        "PLANNER_ROOM_CHANGE_PENALTY",
        "PLANNER_NUM_EMPLOYEES",
        "PLANNER_NUM_WEEKS",
    ]:
        monkeypatch.delenv(key, raising=False)


def test_timetable_command(capsys):
    code = cli.main(
        ["timetable", "--days", "Mon,Tue", "--blocks-per-day", "6", "--time-limit", "10"]
    )

    assert code == 0
    out = capsys.readouterr().out
    assert "1A-math" in out
    assert "Penalties:" in out


def test_shifts_command_from_file(tmp_path, capsys, small_shift_problem):
    path = tmp_path / "shifts.json"
    path.write_text(json.dumps(small_shift_problem.model_dump()), encoding="utf-8")

    code = cli.main(["shifts", "--config", str(path), "--params", "num_workers:1"])

    assert code == 0
    assert "worker 2: " in capsys.readouterr().out


def test_config_error_exit_code(tmp_path):
    assert cli.main(["timetable", "--config", str(tmp_path / "absent.json")]) == 2
    assert cli.main(["timetable", "--blocks-per-day", "0"]) == 2
    assert cli.main(["shifts", "--params", "not a parameter"]) == 2


def test_infeasible_exit_code(tmp_path, capsys, small_shift_problem):
    payload = small_shift_problem.model_dump()
    payload["weeklyCoverDemands"] = [[2, 2, 0] for _ in range(7)]
    path = tmp_path / "shifts.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    assert cli.main(["shifts", "--config", str(path)]) == 1
