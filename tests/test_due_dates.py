# tests/test_due_dates.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from todo_tracker.errors import DueDateFormatError
from todo_tracker.tasks.due_dates import is_overdue, parse_due, render_due


def test_parse_due_is_utc() -> None:
    assert parse_due("01.01.2020 10:00") == datetime(2020, 1, 1, 10, 0, tzinfo=UTC)


def test_parse_due_ignores_surrounding_whitespace() -> None:
    assert parse_due("  31.12.2024 23:59 ") == datetime(2024, 12, 31, 23, 59, tzinfo=UTC)


@pytest.mark.parametrize(
    "text",
    ["", "2020-01-01 10:00", "01.01.2020", "32.01.2020 10:00", "01.13.2020 10:00", "tomorrow"],
)
def test_parse_due_rejects_other_formats(text: str) -> None:
    with pytest.raises(DueDateFormatError) as exc:
        parse_due(text)
    assert "DD.MM.YYYY HH:MM" in str(exc.value)
    assert exc.value.text == text


def test_due_date_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_due("nope")


def test_is_overdue(now: datetime) -> None:
    past = now - timedelta(minutes=1)
    future = now + timedelta(minutes=1)

    assert is_overdue(past, now, completed=False)
    assert not is_overdue(future, now, completed=False)
    assert not is_overdue(now, now, completed=False)  # strictly before
    assert not is_overdue(past, now, completed=True)
    assert not is_overdue(None, now, completed=False)


def test_render_due_variants(now: datetime) -> None:
    due = datetime(2020, 1, 1, 10, 0, tzinfo=UTC)

    assert render_due(None, now, completed=False) == "no due date"
    assert render_due(due, now, completed=False) == "01.01.2020 10:00 (OVERDUE)"
    assert render_due(due, now, completed=True) == "01.01.2020"
    assert render_due(datetime(2030, 5, 6, 7, 8, tzinfo=UTC), now, completed=False) == "06.05.2030"
