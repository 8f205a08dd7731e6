"""
Central data model definitions used across the project.

This module defines the canonical structure of Course and Schedule objects so that:
- all modules share the same field names
- the catalog JSON, the conflict checks and the UI work on the same objects
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Hours:
    """
    Weekly meeting window in minutes since midnight.
    """

    start: int
    end: int


@dataclass(eq=False)
class Course:
    """
    Represents one course of the catalog.

    `days` and `hours` are filled by the meeting-time parser.
    They are either both set or both None (no parsable meeting time).

    eq=False keeps identity semantics: two courses with the same fields
    are still two different entries of a selection.
    """

    id: str
    title: str
    meets: str = ""
    days: Optional[str] = None
    hours: Optional[Hours] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any], fallback_id: str = "") -> "Course":
        cid = str(data.get("id") or fallback_id).strip()
        title = str(data.get("title") or "").strip()
        meets = data.get("meets")
        return cls(id=cid, title=title, meets="" if meets is None else str(meets))


@dataclass
class Schedule:
    """
    Root object of the catalog: a title and all courses keyed by id.
    """

    title: str
    courses: Dict[str, Course] = field(default_factory=dict)
