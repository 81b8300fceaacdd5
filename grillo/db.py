"""SQLite storage for tasks."""

from __future__ import annotations

import sqlite3
from datetime import date, datetime, timedelta, timezone

from grillo.task import Task, TaskStatus

_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_DATE_FORMAT = "%Y-%m-%d"

_INSERT = (
    "INSERT INTO tasks (description, created, scheduled, deadline, status, context, project) "
    "VALUES (?, ?, ?, ?, ?, ?, ?)"
)


def _fmt_date(value: date | None) -> str | None:
    return None if value is None else value.strftime(_DATE_FORMAT)


class Database:
    """A task store backed by an SQLite file, seeded with samples when new."""

    def __init__(self, path):
        self._conn = sqlite3.connect(path)
        if self._create_tables():
            self.insert_sample_data()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def _create_tables(self) -> bool:
        exists = self._conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='tasks'"
        ).fetchone()
        if exists:
            return False
        with self._conn:
            self._conn.execute(
                """CREATE TABLE tasks (
                    id INTEGER PRIMARY KEY,
                    description TEXT NOT NULL,
                    created DATETIME NOT NULL,
                    scheduled DATE NOT NULL,
                    deadline DATE,
                    status TEXT NOT NULL,
                    context INTEGER,
                    project INTEGER
                )"""
            )
        return True

    def insert_sample_data(self) -> None:
        """Insert the five example tasks."""
        now = datetime.now(timezone.utc)
        today = now.date()
        yesterday = today - timedelta(days=1)
        tomorrow = today + timedelta(days=1)
        next_week = today + timedelta(days=7)
        samples = [
            ("Review project proposal", today, None, "Active", 1, None),
            ("Buy groceries", today, None, "Active", 2, None),
            ("Fix bug in parser", yesterday, None, "Done", 3, None),
            ("Team meeting", tomorrow, next_week, "Active", 1, None),
            ("Read research paper", tomorrow, None, "Active", None, None),
        ]
        created = now.strftime(_DATETIME_FORMAT)
        with self._conn:
            self._conn.executemany(
                _INSERT,
                [
                    (desc, created, _fmt_date(sched), _fmt_date(deadline), status, ctx, proj)
                    for desc, sched, deadline, status, ctx, proj in samples
                ],
            )

    def save_task(self, task: Task) -> None:
        """Insert a new task (setting its id) or update an existing one."""
        with self._conn:
            if task.id is None:
                cursor = self._conn.execute(
                    _INSERT,
                    (
                        task.description,
                        task.created.strftime(_DATETIME_FORMAT),
                        _fmt_date(task.scheduled),
                        _fmt_date(task.deadline),
                        str(task.status),
                        task.context,
                        task.project,
                    ),
                )
                task.id = cursor.lastrowid
            else:
                self._conn.execute(
                    "UPDATE tasks SET description=?, scheduled=?, deadline=?, status=?, context=? "
                    "WHERE id=?",
                    (
                        task.description,
                        _fmt_date(task.scheduled),
                        _fmt_date(task.deadline),
                        str(task.status),
                        task.context,
                        task.id,
                    ),
                )

    def get_all_tasks(self) -> list[Task]:
        """Return every task, ordered by scheduled date and then id."""
        rows = self._conn.execute(
            "SELECT id, description, created, scheduled, deadline, status, context, project "
            "FROM tasks ORDER BY scheduled ASC, id ASC"
        )
        return [self._row_to_task(row) for row in rows]

    def complete_task(self, task_id: int) -> None:
        """Mark the task with this id as done."""
        with self._conn:
            self._conn.execute("UPDATE tasks SET status='Done' WHERE id=?", (task_id,))

    def delete_task(self, task_id: int) -> None:
        """Remove the task with this id."""
        with self._conn:
            self._conn.execute("DELETE FROM tasks WHERE id=?", (task_id,))

    @staticmethod
    def _row_to_task(row) -> Task:
        task_id, description, created_str, scheduled_str, deadline_str, status_str, context, project = row

        deadline = None
        if deadline_str:
            try:
                deadline = datetime.strptime(deadline_str, _DATE_FORMAT).date()
            except (ValueError, TypeError):
                deadline = None

        status = TaskStatus.DONE if status_str == "Done" else TaskStatus.ACTIVE

        try:
            created = datetime.strptime(created_str, _DATETIME_FORMAT).replace(tzinfo=timezone.utc)
        except (ValueError, TypeError) as exc:
            raise ValueError(f"invalid value in column 'created': {created_str!r}") from exc

        try:
            scheduled = datetime.strptime(scheduled_str, _DATE_FORMAT).date()
        except (ValueError, TypeError) as exc:
            raise ValueError(f"invalid value in column 'scheduled': {scheduled_str!r}") from exc

        return Task(
            id=task_id,
            description=description,
            created=created,
            scheduled=scheduled,
            deadline=deadline,
            status=status,
            context=context,
            project=project,
        )