"""
Terms and course numbers derived from course ids.

Course id format: <term code><3-digit number>..., e.g. "F213" -> Fall, CS 213.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Union

from courseboard.model import Course


TERMS = {"F": "Fall", "W": "Winter", "S": "Spring"}

DEFAULT_TERM = "Fall"


def get_course_term(course: Course) -> Optional[str]:
    # unknown or missing code -> None, never a term name
    return TERMS.get(course.id[:1])


def get_course_number(course: Course) -> str:
    return course.id[1:4]


def filter_by_term(courses: Union[Mapping[str, Course], Iterable[Course]], term: str) -> List[Course]:
    """
    Return the courses of one term, in the catalog's own order.
    """
    values = courses.values() if isinstance(courses, Mapping) else courses
    return [c for c in values if get_course_term(c) == term]
