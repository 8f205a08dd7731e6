"""
State of one viewer session.

Owns everything the UI mutates:
- load status of the catalog (loading / error / ready)
- the term currently shown
- the selected courses

Nothing is persisted; the state lives as long as the session object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from courseboard import selection
from courseboard.fetch import SCHEDULE_URL, ScheduleFetchError, fetch_schedule
from courseboard.model import Course, Schedule
from courseboard.terms import DEFAULT_TERM, TERMS, filter_by_term


logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass
class ScheduleSession:
    url: str = SCHEDULE_URL
    status: SessionStatus = SessionStatus.LOADING
    schedule: Optional[Schedule] = None
    error: Optional[str] = None
    term: str = DEFAULT_TERM
    selected: List[Course] = field(default_factory=list)

    def load(self, fetch_fn: Callable[[str], Schedule] = fetch_schedule) -> None:
        """
        Fetch the catalog. Ends in READY or ERROR, never stays LOADING.
        """
        self.status = SessionStatus.LOADING
        try:
            self.schedule = fetch_fn(self.url)
        except ScheduleFetchError as exc:
            self.schedule = None
            self.error = str(exc)
            self.status = SessionStatus.ERROR
            return
        self.error = None
        self.status = SessionStatus.READY

    @property
    def title(self) -> str:
        return self.schedule.title if self.schedule else ""

    def set_term(self, term: str) -> None:
        if term not in TERMS.values():
            raise ValueError(f"Unknown term: {term!r}")
        self.term = term

    def term_courses(self) -> List[Course]:
        if self.schedule is None:
            return []
        return filter_by_term(self.schedule.courses, self.term)

    def is_selected(self, course: Course) -> bool:
        return selection.is_selected(course, self.selected)

    def is_disabled(self, course: Course) -> bool:
        return selection.is_disabled(course, self.selected)

    def toggle_selection(self, course: Course) -> bool:
        """
        Handle a click on a course. Returns False if the course is disabled.
        """
        if self.is_disabled(course):
            logger.debug("Ignoring click on disabled course %s", course.id)
            return False
        self.selected = selection.toggle(course, self.selected)
        return True
