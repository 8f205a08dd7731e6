from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from courseboard.meets import add_course_times
from courseboard.model import Course, Schedule


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------

SCHEDULE_URL = "https://courses.cs.northwestern.edu/394/data/cs-courses.php"


class ScheduleFetchError(RuntimeError):
    """
    Raised when the catalog cannot be loaded (network error, non-2xx, bad JSON).
    """


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


def add_schedule_times(raw: Dict[str, Any]) -> Schedule:
    """
    Build a Schedule from the catalog JSON and parse every course's meeting time.

    Expected shape:
        {"title": "...", "courses": {"F101": {"id": "F101", "title": "...", "meets": "MWF 9:00-9:50"}}}
    """
    courses_raw = raw.get("courses") or {}
    if not isinstance(courses_raw, dict):
        raise ScheduleFetchError("Catalog 'courses' is not an object")

    courses: Dict[str, Course] = {}
    for key, entry in courses_raw.items():
        if not isinstance(entry, dict):
            logger.debug("Skipping malformed course entry %r", key)
            continue
        courses[key] = add_course_times(Course.from_json(entry, fallback_id=key))

    return Schedule(title=str(raw.get("title") or ""), courses=courses)


def fetch_schedule(url: str = SCHEDULE_URL, timeout: float = 30) -> Schedule:
    """
    Download the catalog once and return it with meeting times parsed.

    No retry: any failure is raised as ScheduleFetchError.
    """
    logger.info("Fetching schedule from %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        raw = resp.json()
    except requests.RequestException as exc:
        logger.error("Schedule fetch failed: %s", exc)
        raise ScheduleFetchError(f"Could not load schedule: {exc}") from exc
    except ValueError as exc:
        logger.error("Schedule response is not valid JSON: %s", exc)
        raise ScheduleFetchError("Could not load schedule: invalid JSON") from exc

    if not isinstance(raw, dict):
        raise ScheduleFetchError("Could not load schedule: unexpected JSON shape")

    schedule = add_schedule_times(raw)
    logger.info("Loaded %d courses", len(schedule.courses))
    return schedule
