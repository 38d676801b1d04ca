# tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ..errors import TaskFileIOError, TaskFileParseError
from .task_models import DEFAULT_PRIORITY, TaskRecord

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.json"

_REQUIRED = object()


class TaskStore:
    """
    JSON file task store.

    The whole collection is read on load() and rewritten on save(); there are
    no partial updates. A missing or blank file is the empty collection.

    save() writes a sibling temp file and moves it over the target, so the
    file holds either the old or the new content.
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_FILE) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    @staticmethod
    def _timestamp_to_str(ts: datetime | None) -> str | None:
        if ts is None:
            return None
        return ts.astimezone(UTC).isoformat()

    def _str_to_timestamp(self, raw: Any, idx: int) -> datetime | None:
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise TaskFileParseError(self._path, f"task #{idx}: 'due_date' must be a string or null")
        try:
            ts = datetime.fromisoformat(raw)
        except ValueError as e:
            raise TaskFileParseError(self._path, f"task #{idx}: bad 'due_date' {raw!r}") from e
        if ts.tzinfo is None:
            return ts.replace(tzinfo=UTC)
        try:
            return ts.astimezone(UTC)
        except (ValueError, OverflowError) as e:
            raise TaskFileParseError(
                self._path, f"task #{idx}: 'due_date' {raw!r} is out of range in UTC"
            ) from e

    def _field(
        self, raw: dict[str, Any], idx: int, name: str, kind: type, default: Any = _REQUIRED
    ) -> Any:
        if name not in raw:
            if default is not _REQUIRED:
                return default
            raise TaskFileParseError(self._path, f"task #{idx}: missing field {name!r}")
        val = raw[name]
        # bool is an int subclass; an id of `true` is not valid.
        if not isinstance(val, kind) or (kind is int and isinstance(val, bool)):
            raise TaskFileParseError(
                self._path, f"task #{idx}: field {name!r} must be {kind.__name__}"
            )
        return val

    def _dict_to_task(self, raw: Any, idx: int) -> TaskRecord:
        if not isinstance(raw, dict):
            raise TaskFileParseError(self._path, f"task #{idx} is not an object")
        task_id = self._field(raw, idx, "id", int)
        if task_id < 1:
            raise TaskFileParseError(self._path, f"task #{idx}: id must be positive, got {task_id}")
        return TaskRecord(
            id=task_id,
            description=self._field(raw, idx, "description", str),
            completed=self._field(raw, idx, "completed", bool),
            priority=self._field(raw, idx, "priority", str, default=DEFAULT_PRIORITY),
            due_date=self._str_to_timestamp(raw.get("due_date"), idx),
        )

    def _task_to_dict(self, task: TaskRecord) -> dict[str, Any]:
        return {
            "id": task.id,
            "description": task.description,
            "completed": task.completed,
            "priority": task.priority,
            "due_date": self._timestamp_to_str(task.due_date),
        }

    # ---- public API ----

    def load(self) -> list[TaskRecord]:
        try:
            content = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("Task file %s does not exist; starting empty.", self._path)
            return []
        except UnicodeDecodeError as e:
            raise TaskFileParseError(self._path, "not valid UTF-8") from e
        except OSError as e:
            raise TaskFileIOError(self._path, f"cannot read ({e.strerror or e})") from e

        if not content.strip():
            logger.debug("Task file %s is blank; starting empty.", self._path)
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise TaskFileParseError(self._path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
        except RecursionError as e:
            raise TaskFileParseError(self._path, "invalid JSON (too deeply nested)") from e

        if not isinstance(data, list):
            raise TaskFileParseError(self._path, "top-level value must be a list of tasks")

        tasks = [self._dict_to_task(raw, idx) for idx, raw in enumerate(data, start=1)]

        seen: set[int] = set()
        for t in tasks:
            if t.id in seen:
                raise TaskFileParseError(self._path, f"duplicate task id {t.id}")
            seen.add(t.id)

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[TaskRecord]) -> None:
        payload = [self._task_to_dict(t) for t in tasks]
        text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp, exc_info=True)
            raise TaskFileIOError(self._path, f"cannot write ({e.strerror or e})") from e

        logger.debug("Saved %d tasks to %s", len(payload), self._path)
