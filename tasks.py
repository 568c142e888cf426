""" Invoke tasks. """
import io
import sys
from invoke.tasks import task

if isinstance(sys.stdout, io.TextIOWrapper):
    sys.stdout.reconfigure(encoding='utf-8')


@task
def install(c):
    c.run('pip install -e ".[test]"')


@task
def test(c):
    c.run("pytest -q tests")


@task
def api(c):
    c.run("uvicorn api.main:app --reload --host 127.0.0.1 --port 8001")


@task
def shifts(c, config=None):
    c.run("python main.py shifts" + (f" --config {config}" if config else ""), env={"PYTHONUTF8": "1"})


@task
def timetable(c, config=None):
    c.run("python main.py timetable" + (f" --config {config}" if config else ""), env={"PYTHONUTF8": "1"})
