"""
Tests for CLI entry points.

These tests focus on:
- Basic CLI argument validation
- Exit codes of list/check with a patched catalog fetch
"""

import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from courseboard.cli import main
from courseboard.fetch import ScheduleFetchError, add_schedule_times


CATALOG = {
    "title": "CS Courses",
    "courses": {
        "F101": {"id": "F101", "title": "Intro", "meets": "MWF 9:00-9:50"},
        "F102": {"id": "F102", "title": "Data Structures", "meets": "MW 9:30-10:50"},
        "W101": {"id": "W101", "title": "Intro (Winter)", "meets": "MWF 9:00-9:50"},
    },
}


def _run(argv: list[str]) -> tuple[int, str]:
    out = io.StringIO()
    with redirect_stdout(out):
        with mock.patch("courseboard.cli.fetch_schedule", return_value=add_schedule_times(CATALOG)):
            try:
                main(argv)
            except SystemExit as exc:
                return exc.code, out.getvalue()
    raise AssertionError("main() did not exit")


class TestCLI(unittest.TestCase):
    def test_cli_requires_command(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main([])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_cli_rejects_unknown_term(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["list", "--term", "Summer"])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_list_prints_term_courses(self) -> None:
        code, out = _run(["list", "--term", "Winter"])
        self.assertEqual(code, 0)
        self.assertIn("W101 | Winter CS 101 | Intro (Winter)", out)
        self.assertNotIn("F101", out)

    def test_check_conflict(self) -> None:
        code, out = _run(["check", "F101", "F102"])
        self.assertEqual(code, 0)
        self.assertIn("Conflict", out)

    def test_check_different_terms(self) -> None:
        code, out = _run(["check", "F101", "W101"])
        self.assertEqual(code, 0)
        self.assertIn("No conflict", out)

    def test_check_unknown_id(self) -> None:
        code, out = _run(["check", "F101", "F999"])
        self.assertEqual(code, 1)
        self.assertIn("F999", out)

    def test_fetch_error_exits_nonzero(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out), mock.patch(
            "courseboard.cli.fetch_schedule", side_effect=ScheduleFetchError("Could not load schedule: 500")
        ):
            with self.assertRaises(SystemExit) as ctx:
                main(["list"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("500", out.getvalue())


if __name__ == "__main__":
    unittest.main()
