# tests/conftest.py

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

import pytest

from todo_tracker.config import Settings
from todo_tracker.tasks.task_store import TaskStore

from .fakes import FakeTaskStore

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() reconfigures the root logger; drop the handlers it installed after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        # pytest's own capture handlers are subclasses and manage themselves
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def clock():
    return lambda: NOW


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def fake_store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def settings(tmp_path: Path, tasks_path: Path) -> Settings:
    """
    Settings pointing at a per-test task file.

    Built directly rather than from the environment to keep tests isolated
    from the developer's shell and .env.
    """
    return Settings(
        app_name="todo",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tasks_path,
        default_priority="Medium",
    )
