# tests/fakes.py

from __future__ import annotations

import copy
from collections.abc import Iterable

from todo_tracker.errors import TaskFileIOError
from todo_tracker.tasks.task_models import TaskRecord


class FakeTaskStore:
    """
    In-memory stand-in for TaskStore used by handler tests.

    - Captures every save() as a deep snapshot for assertions
    - Can be told to fail on save to exercise error propagation
    """

    def __init__(
        self, tasks: list[TaskRecord] | None = None, *, fail_on_save: bool = False
    ) -> None:
        self.tasks = list(tasks or [])
        self.fail_on_save = fail_on_save
        self.saves: list[list[TaskRecord]] = []

    def load(self) -> list[TaskRecord]:
        return copy.deepcopy(self.tasks)

    def save(self, tasks: Iterable[TaskRecord]) -> None:
        if self.fail_on_save:
            raise TaskFileIOError("fake.json", "disk full")
        snapshot = copy.deepcopy(list(tasks))
        self.saves.append(snapshot)
        self.tasks = snapshot
