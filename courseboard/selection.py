"""
Selection handling.

A selection is a plain list of Course objects, newest first.
Membership is by identity (a Course is the same object as the one in the catalog).
All functions return new lists and never mutate their input.
"""

from __future__ import annotations

from typing import List, Sequence

from courseboard.conflicts import has_conflict
from courseboard.model import Course


def is_selected(course: Course, selected: Sequence[Course]) -> bool:
    return any(c is course for c in selected)


def toggle(course: Course, selected: Sequence[Course]) -> List[Course]:
    """
    Remove the course if selected, otherwise add it in front.
    """
    if is_selected(course, selected):
        return [c for c in selected if c is not course]
    return [course, *selected]


def is_disabled(course: Course, selected: Sequence[Course]) -> bool:
    """
    A course is disabled if picking it would create a conflict.

    Selected courses are never disabled, otherwise they could not be removed again.
    """
    return not is_selected(course, selected) and has_conflict(course, selected)


def click(course: Course, selected: Sequence[Course]) -> List[Course]:
    # clicking a disabled course does nothing
    if is_disabled(course, selected):
        return list(selected)
    return toggle(course, selected)
