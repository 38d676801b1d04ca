# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

DEFAULT_PRIORITY = "Medium"


class TaskStatus(StrEnum):
    """
    Display status of a task.

    Derived from TaskRecord.completed, never stored. The only transition is
    OPEN -> COMPLETED.
    """

    OPEN = "Open"
    COMPLETED = "Completed"

    @classmethod
    def of(cls, completed: bool) -> TaskStatus:
        return cls.COMPLETED if completed else cls.OPEN


@dataclass(slots=True)
class TaskRecord:
    id: int
    description: str
    completed: bool = False
    priority: str = DEFAULT_PRIORITY
    due_date: datetime | None = None  # UTC-aware

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.of(self.completed)

    def mark_completed(self) -> None:
        # no way back to open
        self.completed = True


def next_task_id(tasks: list[TaskRecord]) -> int:
    """Highest existing id + 1 (1 for an empty collection). Gaps are never refilled."""
    return max((t.id for t in tasks), default=0) + 1
