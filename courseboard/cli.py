"""
CLI (Command Line Interface).

    courseboard interactive          browse a term and build a schedule
    courseboard list --term Winter   print the courses of one term
    courseboard check F213 F214      tell whether two courses conflict

Note:
- The interactive UI lives in courseboard/interactive.py
- list/check print plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import logging

from courseboard.conflicts import course_conflict
from courseboard.fetch import SCHEDULE_URL, ScheduleFetchError, fetch_schedule
from courseboard.model import Schedule
from courseboard.terms import DEFAULT_TERM, TERMS, filter_by_term, get_course_number, get_course_term


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> None:
    """
    Console logging only. Warnings by default, everything with --verbose.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)

    # Prevent duplicate handlers
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    root.addHandler(handler)


def _load(url: str) -> Schedule | None:
    try:
        return fetch_schedule(url)
    except ScheduleFetchError as exc:
        print(str(exc))
        return None


def _cmd_list(args: argparse.Namespace) -> int:
    """
    Print all courses of one term.
    """
    schedule = _load(args.url)
    if schedule is None:
        return 1

    courses = filter_by_term(schedule.courses, args.term)
    print(schedule.title)
    if not courses:
        print(f"No {args.term} courses.")
        return 0

    for c in courses:
        meets = c.meets or "(no meeting time)"
        print(f"{c.id} | {args.term} CS {get_course_number(c)} | {c.title} | {meets}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """
    Check whether two courses (by id) can be taken together.
    """
    first = (args.first or "").strip()
    second = (args.second or "").strip()
    if not first or not second:
        print("Please provide two course ids.")
        return 1

    schedule = _load(args.url)
    if schedule is None:
        return 1

    missing = [cid for cid in (first, second) if cid not in schedule.courses]
    if missing:
        print(f"Unknown course id(s): {', '.join(missing)}")
        return 1

    a = schedule.courses[first]
    b = schedule.courses[second]
    if course_conflict(a, b):
        print(f"Conflict: {a.id} ({a.meets}) <-> {b.id} ({b.meets}), both {get_course_term(a)}")
    else:
        print(f"No conflict: {a.id} and {b.id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="courseboard", description="Course schedule viewer")
    parser.add_argument("--url", type=str, default=SCHEDULE_URL, help="Catalog JSON endpoint")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("interactive", help="Interactive mode: pick courses without conflicts")

    p_list = sub.add_parser("list", help="List courses of a term")
    p_list.add_argument("--term", "-t", choices=list(TERMS.values()), default=DEFAULT_TERM, help="Term to show")

    p_check = sub.add_parser("check", help="Check two courses for a schedule conflict")
    p_check.add_argument("first", type=str, help="Course ID (e.g. F213)")
    p_check.add_argument("second", type=str, help="Course ID (e.g. F214)")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "list":
        raise SystemExit(_cmd_list(args))
    if args.command == "check":
        raise SystemExit(_cmd_check(args))

    if args.command == "interactive":
        from courseboard.interactive import run_interactive
        from courseboard.session import ScheduleSession

        raise SystemExit(run_interactive(ScheduleSession(url=args.url)))

    raise SystemExit(2)
