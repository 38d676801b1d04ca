# src/todo_tracker/errors.py

"""Project exception hierarchy.

Only TaskFileError subclasses are meant to reach the entrypoint; everything
else is handled where it happens.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all todo_tracker errors."""


class TaskFileError(TodoError):
    """The persisted task file could not be used."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class TaskFileIOError(TaskFileError):
    """Reading or writing the task file failed (permissions, device errors, ...)."""


class TaskFileParseError(TaskFileError):
    """The task file exists and is non-empty, but is not valid task data."""


class DueDateFormatError(TodoError, ValueError):
    """A user-supplied due date does not match the expected input format."""

    def __init__(self, text: str, expected: str) -> None:
        self.text = text
        self.expected = expected
        super().__init__(f"Invalid due date {text!r}. Expected format: {expected}")
