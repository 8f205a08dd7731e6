from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from courseboard.model import Course
from courseboard.session import ScheduleSession, SessionStatus
from courseboard.terms import TERMS, get_course_number, get_course_term


console = Console()

# card background per state, as in the web version
STYLE_DISABLED = "black on grey70"
STYLE_SELECTED = "black on pale_green1"
STYLE_NORMAL = ""


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    return console.input(msg)


def course_label(course: Course) -> str:
    term = get_course_term(course) or "?"
    return f"{term} CS {get_course_number(course)}"


def course_style(session: ScheduleSession, course: Course) -> str:
    if session.is_disabled(course):
        return STYLE_DISABLED
    if session.is_selected(course):
        return STYLE_SELECTED
    return STYLE_NORMAL


def build_course_table(session: ScheduleSession) -> Table:
    """
    One row per course of the current term, styled like the course cards.
    """
    table = Table(title=f"{session.term} courses", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Course")
    table.add_column("Title")
    table.add_column("Meets")

    for i, course in enumerate(session.term_courses(), start=1):
        table.add_row(
            str(i),
            course_label(course),
            Text(course.title),
            Text(course.meets),
            style=course_style(session, course),
        )
    return table


def _print_header(session: ScheduleSession) -> None:
    _println(f"\n[bold]=== {escape(session.title)} ===[/]")
    terms = "  ".join(f"[bold green]({t})[/]" if t == session.term else f"({t})" for t in TERMS.values())
    _println(f"Terms: {terms}")
    _println(f"Selected courses: {len(session.selected)}")


def _flow_term(session: ScheduleSession) -> None:
    names = list(TERMS.values())
    for i, name in enumerate(names, start=1):
        _println(f"[{i}] {name}")
    pick = _prompt("Select term [blank = back]: ").strip()
    if not pick:
        return
    if not pick.isdecimal() or not (1 <= int(pick) <= len(names)):
        _println("Invalid choice.")
        return
    session.set_term(names[int(pick) - 1])


def _flow_toggle(session: ScheduleSession, pick: str) -> None:
    courses = session.term_courses()
    i = int(pick)
    if not (1 <= i <= len(courses)):
        _println("Out of range.")
        return

    course = courses[i - 1]
    was_selected = session.is_selected(course)
    if not session.toggle_selection(course):
        _println(f"{course_label(course)} conflicts with your selection.")
    elif was_selected:
        _println(f"Removed: {course_label(course)}")
    else:
        _println(f"Added: {course_label(course)}")


def run_interactive(session: ScheduleSession, load: bool = True) -> int:
    """
    Interactive loop: show the current term's courses and toggle them by number.

    Returns an exit code (1 if the catalog could not be loaded).
    """
    if load:
        _println("Loading the schedule...")
        session.load()

    if session.status is SessionStatus.ERROR:
        _println(f"[bold red]{escape(session.error or '')}[/]")
        return 1

    while True:
        _print_header(session)
        console.print(build_course_table(session))

        choice = _prompt("Number = select/unselect, \\[t] term, [0] exit: ").strip().lower()

        if choice == "0":
            _println("Bye.")
            return 0
        if choice == "t":
            _flow_term(session)
        elif choice.isdecimal():
            _flow_toggle(session, choice)
        else:
            _println("Invalid choice.")
