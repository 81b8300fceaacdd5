"""Task records and their status."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum


class TaskStatus(Enum):
    """Whether a task is still open or finished."""

    ACTIVE = "Active"
    DONE = "Done"

    def display_symbol(self) -> str:
        """Return the symbol shown for this status in task tables."""
        return "○" if self is TaskStatus.ACTIVE else "✓"

    def __str__(self) -> str:
        return self.value


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass
class Task:
    """A single task; ``id`` is ``None`` until the task has been saved."""

    description: str = ""
    id: int | None = None
    created: datetime = field(default_factory=_utc_now)
    scheduled: date = field(default_factory=_utc_today)
    deadline: date | None = None
    status: TaskStatus = TaskStatus.ACTIVE
    project: int | None = None
    context: int | None = None