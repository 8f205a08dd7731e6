"""
Meeting-time parsing.

Turns a free-text meeting descriptor like "MWF 9:00 - 9:50" into
days + start/end minutes.

Important rules:
- unparsable text is NOT an error, it just means "no meeting time"
- days stay one undivided string ("MWF"), conflict detection works on substrings
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from courseboard.model import Course, Hours


# days, then "hh:mm", a space or hyphen separator, then "hh:mm"
MEET_PATTERN = re.compile(
    r" *((?:M|Tu|W|Th|F)+) +(\d\d?):(\d\d) *[ -] *(\d\d?):(\d\d) *",
    re.ASCII,
)


def parse_meets(meets: Optional[str]) -> Dict[str, Any]:
    """
    Parse one meeting descriptor.

    Returns {"days": "MWF", "hours": Hours(540, 590)} on success,
    an empty dict for empty, missing or malformed input.
    """
    if not meets:
        return {}

    match = MEET_PATTERN.fullmatch(meets)
    if not match:
        return {}

    days, hh1, mm1, hh2, mm2 = match.groups()
    return {
        "days": days,
        "hours": Hours(start=int(hh1) * 60 + int(mm1), end=int(hh2) * 60 + int(mm2)),
    }


def add_course_times(course: Course) -> Course:
    """
    Fill `days` and `hours` of a course from its `meets` text.
    """
    parts = parse_meets(course.meets)
    course.days = parts.get("days")
    course.hours = parts.get("hours")
    return course
