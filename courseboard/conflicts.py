"""
Conflict detection.

Two courses conflict when they are in the same term, share a weekday
and their meeting windows overlap.
Overlap rule:
    max(start) < min(end)
so back-to-back courses (end == other start) do NOT conflict.
"""

from __future__ import annotations

from typing import Iterable

from courseboard.model import Course, Hours
from courseboard.terms import get_course_term


DAYS = ("M", "Tu", "W", "Th", "F")


def days_overlap(days1: str, days2: str) -> bool:
    # substring test on the undivided day strings ("MWF", "TuTh")
    return any(day in days1 and day in days2 for day in DAYS)


def hours_overlap(hours1: Hours, hours2: Hours) -> bool:
    return max(hours1.start, hours2.start) < min(hours1.end, hours2.end)


def time_conflict(course1: Course, course2: Course) -> bool:
    """
    Weekday + time window overlap. Courses without a parsed meeting time never overlap.
    """
    if course1.hours is None or course2.hours is None:
        return False
    if not course1.days or not course2.days:
        return False
    return days_overlap(course1.days, course2.days) and hours_overlap(course1.hours, course2.hours)


def course_conflict(course1: Course, course2: Course) -> bool:
    """
    True if both courses cannot be attended together.
    """
    term = get_course_term(course1)
    if term is None or term != get_course_term(course2):
        return False
    return time_conflict(course1, course2)


def has_conflict(course: Course, selected: Iterable[Course]) -> bool:
    return any(course_conflict(course, other) for other in selected)
