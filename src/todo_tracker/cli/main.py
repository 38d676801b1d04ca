# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Parses argv, initializes logging, loads the task file, applies exactly one
command and prints the result. Exit code 1 only when the task file cannot be
read, parsed or written.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import Settings, get_settings
from ..errors import TaskFileError
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore
from .commands import Clock, CommandHandler
from .parser import parse_command

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    clock: Clock | None = None,
) -> int:
    if settings is None:
        settings = get_settings()

    invocation = parse_command(
        argv, default_priority=settings.default_priority, prog=settings.app_name
    )
    if invocation.tasks_file is not None:
        settings = settings.with_tasks_path(invocation.tasks_file)

    if invocation.verbose:
        console_level = logging.DEBUG
    else:
        console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    logger.debug(
        "Running %s with tasks file %s", type(invocation.command).__name__, settings.tasks_path
    )

    store = TaskStore(settings.tasks_path)
    try:
        tasks = store.load()
        handler = CommandHandler(store, tasks, clock=clock)
        result = handler.apply(invocation.command)
    except TaskFileError as e:
        logger.debug("Task file failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(result.text)
    return EXIT_OK


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
