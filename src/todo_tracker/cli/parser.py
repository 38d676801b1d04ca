# src/todo_tracker/cli/parser.py

"""
Argument grammar: argv -> Command.

  todo [--file PATH] [-v] add <description> [--priority TEXT] [--due "DD.MM.YYYY HH:MM"]
  todo [--file PATH] [-v] list
  todo [--file PATH] [-v] complete <id>
  todo [--file PATH] [-v] delete <id>
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .. import __version__
from ..tasks.due_dates import DUE_INPUT_HINT
from ..tasks.task_models import DEFAULT_PRIORITY
from .commands import AddCommand, Command, CompleteCommand, DeleteCommand, ListCommand


@dataclass(frozen=True, slots=True)
class Invocation:
    command: Command
    tasks_file: Path | None
    verbose: bool


def positive_int(text: str) -> int:
    """argparse type for task ids: integers >= 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"task id must be a positive integer, got {value}")
    return value


def build_parser(prog: str = "todo") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="A simple to-do list program.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--file",
        dest="tasks_file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Task file to use (default: $TODO_TASKS_FILE or ./tasks.json).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logs on stderr."
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    add_p = sub.add_parser("add", help="Add a new task.")
    add_p.add_argument("description")
    add_p.add_argument("--priority", default=None, help="Free-text priority label.")
    add_p.add_argument(
        "--due",
        default=None,
        metavar="DATETIME",
        help=f"Due date as \"{DUE_INPUT_HINT}\", interpreted as UTC.",
    )

    sub.add_parser("list", help="List all tasks.")

    complete_p = sub.add_parser("complete", help="Mark a task as completed.")
    complete_p.add_argument("id", type=positive_int)

    delete_p = sub.add_parser("delete", help="Delete a task.")
    delete_p.add_argument("id", type=positive_int)

    return parser


def parse_command(
    argv: Sequence[str] | None = None,
    *,
    default_priority: str = DEFAULT_PRIORITY,
    prog: str = "todo",
) -> Invocation:
    """Parse argv; argparse exits with status 2 on usage errors."""
    args = build_parser(prog).parse_args(argv)

    command: Command
    if args.command == "add":
        priority = args.priority if args.priority is not None else default_priority
        command = AddCommand(description=args.description, priority=priority, due=args.due)
    elif args.command == "list":
        command = ListCommand()
    elif args.command == "complete":
        command = CompleteCommand(id=args.id)
    else:
        command = DeleteCommand(id=args.id)

    return Invocation(command=command, tasks_file=args.tasks_file, verbose=args.verbose)
