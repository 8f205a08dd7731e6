"""
Unit tests for conflict detection.

Definition used here:
- A conflict exists if two courses are in the same term, share a weekday
  and their meeting windows overlap.
- Touching endpoints (end == start) is NOT a conflict.
"""

import itertools
import unittest

from courseboard.conflicts import course_conflict, days_overlap, has_conflict, hours_overlap
from courseboard.meets import add_course_times
from courseboard.model import Course, Hours


def _course(cid: str, meets: str) -> Course:
    return add_course_times(Course(id=cid, title=cid, meets=meets))


class TestConflicts(unittest.TestCase):
    def test_overlap_same_day(self) -> None:
        a = _course("F201", "MWF 9:00-9:50")
        b = _course("F202", "MW 9:30-10:20")
        self.assertTrue(course_conflict(a, b))

    def test_no_overlap_touching_end(self) -> None:
        self.assertFalse(hours_overlap(Hours(540, 590), Hours(590, 650)))
        a = _course("F201", "MWF 9:00-9:50")
        b = _course("F202", "MWF 9:50-10:50")
        self.assertFalse(course_conflict(a, b))

    def test_different_day_no_conflict(self) -> None:
        a = _course("F201", "MWF 9:00-9:50")
        b = _course("F202", "TuTh 9:00-9:50")
        self.assertFalse(course_conflict(a, b))

    def test_different_terms_never_conflict(self) -> None:
        a = _course("F201", "MWF 9:00-9:50")
        b = _course("W201", "MWF 9:00-9:50")
        self.assertFalse(course_conflict(a, b))

    def test_unknown_terms_never_conflict(self) -> None:
        a = _course("X201", "MWF 9:00-9:50")
        b = _course("X202", "MWF 9:00-9:50")
        self.assertFalse(course_conflict(a, b))
        self.assertFalse(course_conflict(a, a))

    def test_unparsed_course_never_conflicts(self) -> None:
        a = _course("F201", "TBA")
        b = _course("F202", "MWF 9:00-9:50")
        self.assertFalse(course_conflict(a, b))
        self.assertFalse(course_conflict(a, a))

    def test_course_conflicts_with_itself(self) -> None:
        a = _course("F201", "MWF 9:00-9:50")
        self.assertTrue(course_conflict(a, a))

    def test_days_overlap_is_substring_based(self) -> None:
        self.assertTrue(days_overlap("TuTh", "Th"))
        self.assertFalse(days_overlap("Tu", "Th"))
        self.assertTrue(days_overlap("MWF", "F"))

    def test_conflict_is_symmetric(self) -> None:
        courses = [
            _course("F201", "MWF 9:00-9:50"),
            _course("F202", "MW 9:30-10:20"),
            _course("F203", "TuTh 9:00-10:20"),
            _course("W204", "MWF 9:00-9:50"),
            _course("F205", ""),
        ]
        for a, b in itertools.product(courses, repeat=2):
            with self.subTest(a=a.id, b=b.id):
                self.assertEqual(course_conflict(a, b), course_conflict(b, a))

    def test_has_conflict(self) -> None:
        a = _course("F201", "MWF 9:00-9:50")
        b = _course("F202", "F 9:45-11:00")
        c = _course("F203", "TuTh 9:00-9:50")
        self.assertTrue(has_conflict(b, [c, a]))
        self.assertFalse(has_conflict(c, [a, b]))
        self.assertFalse(has_conflict(a, []))


if __name__ == "__main__":
    unittest.main()
