# tasks/due_dates.py

"""
Due-date parsing and rendering.

Input is always `DD.MM.YYYY HH:MM` interpreted as UTC. Rendering is
deliberately asymmetric: an overdue task shows the time of day, a task that
is not overdue shows only the date.
"""

from __future__ import annotations

from datetime import UTC, datetime

from ..errors import DueDateFormatError

DUE_INPUT_FORMAT = "%d.%m.%Y %H:%M"
DUE_INPUT_HINT = "DD.MM.YYYY HH:MM"
DUE_DATE_DISPLAY_FORMAT = "%d.%m.%Y"
DUE_OVERDUE_DISPLAY_FORMAT = "%d.%m.%Y %H:%M"

NO_DUE_DATE = "no due date"
OVERDUE_MARK = "(OVERDUE)"


def parse_due(text: str) -> datetime:
    """Parse user input into an aware UTC datetime or raise DueDateFormatError."""
    try:
        naive = datetime.strptime(text.strip(), DUE_INPUT_FORMAT)
    except ValueError as e:
        raise DueDateFormatError(text, DUE_INPUT_HINT) from e
    return naive.replace(tzinfo=UTC)


def is_overdue(due: datetime | None, now: datetime, completed: bool) -> bool:
    if due is None or completed:
        return False
    return due < now


def render_due(due: datetime | None, now: datetime, completed: bool) -> str:
    if due is None:
        return NO_DUE_DATE
    if is_overdue(due, now, completed):
        return f"{due.strftime(DUE_OVERDUE_DISPLAY_FORMAT)} {OVERDUE_MARK}"
    return due.strftime(DUE_DATE_DISPLAY_FORMAT)
