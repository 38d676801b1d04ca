# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import assert_never

from ..errors import DueDateFormatError
from ..tasks.due_dates import parse_due, render_due
from ..tasks.task_models import DEFAULT_PRIORITY, TaskRecord, next_task_id
from ..tasks.task_store import TaskStore

Clock = Callable[[], datetime]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddCommand:
    description: str
    priority: str = DEFAULT_PRIORITY
    due: str | None = None


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class CompleteCommand:
    id: int


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    id: int


Command = AddCommand | ListCommand | CompleteCommand | DeleteCommand


@dataclass(slots=True)
class CommandResult:
    lines: list[str] = field(default_factory=list)
    mutated: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def format_task_line(task: TaskRecord, now: datetime) -> str:
    due = render_due(task.due_date, now, task.completed)
    return (
        f"[{task.id}] {task.description} - Status: [{task.status}] "
        f"Priority: [{task.priority}] - Due: {due}"
    )


def _not_found(task_id: int) -> CommandResult:
    return CommandResult([f"No task with ID {task_id} found."])


class CommandHandler:
    """
    Applies one Command to the in-memory task list.

    Mutating commands save the full list through the store right after the
    change; commands that change nothing never touch the file. TaskFileError
    from the store propagates to the caller.
    """

    def __init__(
        self, store: TaskStore, tasks: list[TaskRecord], *, clock: Clock | None = None
    ) -> None:
        self.store = store
        self.tasks = tasks
        self._clock = clock or _utc_now

    def apply(self, command: Command) -> CommandResult:
        if isinstance(command, AddCommand):
            return self.add(command.description, command.priority, command.due)
        if isinstance(command, ListCommand):
            return self.list_tasks()
        if isinstance(command, CompleteCommand):
            return self.complete(command.id)
        if isinstance(command, DeleteCommand):
            return self.delete(command.id)
        assert_never(command)

    def add(
        self, description: str, priority: str = DEFAULT_PRIORITY, due: str | None = None
    ) -> CommandResult:
        task_id = next_task_id(self.tasks)

        due_date = None
        if due is not None:
            try:
                due_date = parse_due(due)
            except DueDateFormatError as e:
                logger.info("Rejected due date %r: %s", due, e)
                return CommandResult([str(e)])

        task = TaskRecord(
            id=task_id,
            description=description,
            completed=False,
            priority=priority,
            due_date=due_date,
        )
        self.tasks.append(task)
        self.store.save(self.tasks)
        logger.info("Task added id=%s priority=%s due=%s", task_id, priority, due_date)
        return CommandResult([f"Task added: [{task_id}] {description}"], mutated=True)

    def list_tasks(self) -> CommandResult:
        if not self.tasks:
            return CommandResult(["No tasks."])
        now = self._clock()
        return CommandResult([format_task_line(t, now) for t in self.tasks])

    def complete(self, task_id: int) -> CommandResult:
        task = next((t for t in self.tasks if t.id == task_id), None)
        if task is None:
            logger.debug("Complete: no task id=%s", task_id)
            return _not_found(task_id)

        # already completed is fine; we still re-save
        task.mark_completed()
        self.store.save(self.tasks)
        logger.info("Task completed id=%s", task_id)
        return CommandResult([f"Task completed: [{task_id}] {task.description}"], mutated=True)

    def delete(self, task_id: int) -> CommandResult:
        before = len(self.tasks)
        self.tasks[:] = [t for t in self.tasks if t.id != task_id]
        if len(self.tasks) == before:
            logger.debug("Delete: no task id=%s", task_id)
            return _not_found(task_id)

        self.store.save(self.tasks)
        logger.info("Task deleted id=%s", task_id)
        return CommandResult([f"Task deleted: ID {task_id}"], mutated=True)
