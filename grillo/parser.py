"""Command-line parsing into command objects."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Add:
    """Add a task with the given description."""

    description: str


@dataclass(frozen=True)
class ListTasks:
    """List all tasks."""


@dataclass(frozen=True)
class Delete:
    """Delete tasks; no ids means choose interactively."""

    ids: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class Done:
    """Mark tasks done; no ids means choose interactively."""

    ids: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class Help:
    """Show usage."""


def _task_id(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}") from None
    if not text.lstrip("+").isdigit() or not 0 <= value <= _U64_MAX:
        raise argparse.ArgumentTypeError(f"invalid task id: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="grillo", description="A task management tool")
    parser.add_argument("-V", "--version", action="version", version="grillo 0.1.0")
    sub = parser.add_subparsers(dest="command")

    add = sub.add_parser("add", help="Add a new task")
    add.add_argument("description", help="Task description")

    delete = sub.add_parser("del", help="Delete tasks")
    delete.add_argument("ids", nargs="*", type=_task_id, help="Task IDs to delete")

    done = sub.add_parser("done", help="Mark tasks as done")
    done.add_argument("ids", nargs="*", type=_task_id, help="Task IDs to mark as done")

    sub.add_parser("ls", help="List all tasks")
    return parser


def parse_args(argv=None):
    """Parse arguments into a command object; exits on invalid input."""
    args = _build_parser().parse_args(argv)
    if args.command == "add":
        return Add(args.description)
    if args.command == "del":
        return Delete(list(args.ids))
    if args.command == "done":
        return Done(list(args.ids))
    if args.command == "ls":
        return ListTasks()
    return Help()