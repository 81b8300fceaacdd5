import sqlite3
from datetime import date, datetime, timedelta, timezone

import pytest

from grillo.db import Database
from grillo.task import Task, TaskStatus


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "tasks.db")


@pytest.fixture
def db(db_path):
    database = Database(db_path)
    yield database
    database.close()


def test_new_database_has_samples(db):
    tasks = db.get_all_tasks()
    assert len(tasks) == 5
    descriptions = {t.description for t in tasks}
    assert "Buy groceries" in descriptions
    assert "Team meeting" in descriptions


def test_samples_statuses_and_deadline(db):
    by_desc = {t.description: t for t in db.get_all_tasks()}
    assert by_desc["Fix bug in parser"].status is TaskStatus.DONE
    assert by_desc["Review project proposal"].status is TaskStatus.ACTIVE
    meeting = by_desc["Team meeting"]
    assert meeting.deadline == meeting.scheduled + timedelta(days=6)
    assert by_desc["Read research paper"].context is None


def test_tasks_ordered_by_scheduled_then_id(db):
    tasks = db.get_all_tasks()
    keys = [(t.scheduled, t.id) for t in tasks]
    assert keys == sorted(keys)


def test_reopen_does_not_duplicate_samples(db_path):
    with Database(db_path) as first:
        count = len(first.get_all_tasks())
    with Database(db_path) as second:
        assert len(second.get_all_tasks()) == count


def test_save_new_task_assigns_id(db):
    task = Task(description="Write notes", scheduled=date(2000, 1, 1), deadline=date(2000, 2, 1))
    db.save_task(task)
    assert task.id is not None
    stored = next(t for t in db.get_all_tasks() if t.id == task.id)
    assert stored.description == "Write notes"
    assert stored.scheduled == date(2000, 1, 1)
    assert stored.deadline == date(2000, 2, 1)
    assert stored.created == task.created.replace(microsecond=0)
    assert db.get_all_tasks()[0].id == task.id


def test_update_keeps_project(db):
    task = Task(description="first", project=7)
    db.save_task(task)
    task.description = "second"
    task.status = TaskStatus.DONE
    task.context = 4
    task.project = 9
    db.save_task(task)
    stored = next(t for t in db.get_all_tasks() if t.id == task.id)
    assert stored.description == "second"
    assert stored.status is TaskStatus.DONE
    assert stored.context == 4
    assert stored.project == 7


def test_complete_task(db):
    task = Task(description="finish")
    db.save_task(task)
    db.complete_task(task.id)
    stored = next(t for t in db.get_all_tasks() if t.id == task.id)
    assert stored.status is TaskStatus.DONE


def test_delete_task(db):
    task = Task(description="gone")
    db.save_task(task)
    db.delete_task(task.id)
    assert all(t.id != task.id for t in db.get_all_tasks())
    assert len(db.get_all_tasks()) == 5


def test_unknown_status_and_bad_deadline(db_path):
    Database(db_path).close()
    with sqlite3.connect(db_path) as conn:
        conn.execute("DELETE FROM tasks")
        conn.execute(
            "INSERT INTO tasks (id, description, created, scheduled, deadline, status) "
            "VALUES (1, 'x', '2020-01-02 03:04:05', '2020-01-02', 'soon', 'Weird')"
        )
    with Database(db_path) as db:
        (task,) = db.get_all_tasks()
    assert task.status is TaskStatus.ACTIVE
    assert task.deadline is None
    assert task.created == datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_bad_created_raises(db_path):
    Database(db_path).close()
    with sqlite3.connect(db_path) as conn:
        conn.execute(
            "INSERT INTO tasks (description, created, scheduled, status) "
            "VALUES ('x', 'yesterday', '2020-01-02', 'Active')"
        )
    with Database(db_path) as db, pytest.raises(ValueError):
        db.get_all_tasks()


def test_bad_scheduled_raises(db_path):
    Database(db_path).close()
    with sqlite3.connect(db_path) as conn:
        conn.execute(
            "INSERT INTO tasks (description, created, scheduled, status) "
            "VALUES ('x', '2020-01-02 03:04:05', 'later', 'Active')"
        )
    with Database(db_path) as db, pytest.raises(ValueError):
        db.get_all_tasks()