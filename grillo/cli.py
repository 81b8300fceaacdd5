"""Command-line entry point for the task manager."""

from __future__ import annotations

import re
import sys

from grillo.db import Database
from grillo.parser import Add, Delete, Done, Help, ListTasks, parse_args
from grillo.task import Task, TaskStatus

_ID_PATTERN = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1

_HELP = """Usage: grillo [COMMAND]
Commands:
  add <description>  Add a new task
  ls                 List all tasks
  del [id...]        Delete tasks
  done [id...]       Mark tasks as done
"""


def _row(task_id, symbol, description, scheduled) -> str:
    return f"{task_id!s:<6} {symbol:<2} {description:<30} {scheduled!s:<10}"


def format_table(tasks) -> str:
    """Render tasks as the header, a rule and one line per task."""
    lines = [_row("ID", "✓", "Description", "Scheduled"), "-" * 50]
    lines.extend(
        _row(t.id, t.status.display_symbol(), t.description, t.scheduled) for t in tasks
    )
    return "\n".join(lines) + "\n"


def _read_ids(stdin, stdout) -> list[int]:
    stdout.write("Enter task IDs (space-separated): ")
    stdout.flush()
    line = stdin.readline()
    return [
        int(word)
        for word in line.split()
        if _ID_PATTERN.fullmatch(word) and int(word) <= _U64_MAX
    ]


def _choose(tasks: list[Task], title: str, stdin, stdout) -> list[int]:
    stdout.write(f"{title}\n")
    stdout.write(format_table(tasks))
    return _read_ids(stdin, stdout)


def run(command, db, stdin, stdout) -> None:
    """Carry out one parsed command against the database."""
    if isinstance(command, Add):
        task = Task(description=command.description)
        db.save_task(task)
        stdout.write(f"Added task: {task.description}\n")
    elif isinstance(command, Delete):
        ids = command.ids
        if not ids:
            tasks = db.get_all_tasks()
            if not tasks:
                stdout.write("No tasks to delete.\n")
                return
            ids = _choose(tasks, "Select tasks to delete:", stdin, stdout)
        for task_id in ids:
            db.delete_task(task_id)
            stdout.write(f"Deleted task {task_id}\n")
    elif isinstance(command, Done):
        ids = command.ids
        if not ids:
            active = [t for t in db.get_all_tasks() if t.status is TaskStatus.ACTIVE]
            if not active:
                stdout.write("No active tasks to mark as done.\n")
                return
            ids = _choose(active, "Select tasks to mark as done:", stdin, stdout)
        for task_id in ids:
            db.complete_task(task_id)
            stdout.write(f"Marked task {task_id} as done\n")
    elif isinstance(command, ListTasks):
        tasks = db.get_all_tasks()
        if not tasks:
            stdout.write("No tasks found.\n")
        else:
            stdout.write(format_table(tasks))
    elif isinstance(command, Help):
        stdout.write(_HELP)
    else:
        raise TypeError(f"unknown command: {command!r}")


def main(argv=None) -> int:
    """Open ``tasks.db`` in the current directory and run the command."""
    with Database("tasks.db") as db:
        command = parse_args(argv)
        run(command, db, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())