import argparse
import logging
import sys
from pathlib import Path
from scheduler.builder import build_shift_schedule, build_timetable
from scheduler.extractor import render_report
from exceptions.custom_errors import InvalidConfigError
from utils.loader import load_shift_problem, load_timetable_config
from utils.logger import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build and solve shift schedules and school timetables with CP-SAT."
    )
    subparsers = parser.add_subparsers(dest="mode", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON configuration file; overrides PLANNER_* environment variables.",
    )
    common.add_argument(
        "--time-limit",
        dest="timeLimitSeconds",
        type=float,
        default=None,
        help="Solver wall-clock limit in seconds.",
    )
    common.add_argument(
        "--params",
        dest="solverParams",
        default=None,
        help='Text-format solver parameters, e.g. "max_time_in_seconds:10.0".',
    )
    common.add_argument(
        "--export-model",
        type=Path,
        default=None,
        help="Write the model proto (text format) to this path before solving.",
    )
    common.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")

    subparsers.add_parser(
        "shifts", parents=[common], help="Solve the employee shift scheduling problem."
    )

    timetable = subparsers.add_parser(
        "timetable", parents=[common], help="Solve the class timetabling problem."
    )
    timetable.add_argument(
        "--days",
        type=lambda s: [d.strip() for d in s.split(",") if d.strip()],
        default=None,
        help="Comma separated day names, e.g. Mon,Tue,Wed.",
    )
    timetable.add_argument(
        "--blocks-per-day", dest="blocksPerDay", type=int, default=None
    )
    timetable.add_argument(
        "--room-change-penalty", dest="roomChangePenalty", type=int, default=None
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    overrides = {
        "timeLimitSeconds": args.timeLimitSeconds,
        "solverParams": args.solverParams,
    }
    try:
        if args.mode == "shifts":
            problem = load_shift_problem(args.config, overrides)
            result, report = build_shift_schedule(problem, args.export_model)
        else:
            overrides.update(
                days=args.days,
                blocksPerDay=args.blocksPerDay,
                roomChangePenalty=args.roomChangePenalty,
            )
            config = load_timetable_config(args.config, overrides)
            result, report = build_timetable(config, args.export_model)
    except InvalidConfigError as e:
        logger.error(str(e))
        return 2

    if report is None:
        logger.warning(f"No schedule produced (status {result.status.value}).")
        print(result.stats.response_stats)
        return 1

    print(render_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
