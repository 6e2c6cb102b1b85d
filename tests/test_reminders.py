import datetime as dt

import pytest

from organizer.academic import AcademicSchedule
from organizer.database import connect
from organizer.reminders import Reminder, first_reminder, upcoming_assignments

DUE_DATE = dt.date(2024, 5, 10)
DUE_TIME = dt.time(12, 0)


@pytest.fixture
def conn():
    connection = connect(":memory:")
    AcademicSchedule(connection, 1).add(DUE_DATE, DUE_TIME, "Math", "Assignment")
    yield connection
    connection.close()


def test_message_text():
    reminder = Reminder("Math", "2024-05-10", "12:00:00")
    assert reminder.message() == (
        "Reminder: You have an assignment 'Math' due on 2024-05-10 at 12:00:00."
    )


def test_assignment_within_window_is_reported(conn):
    now = dt.datetime.combine(DUE_DATE, DUE_TIME) - dt.timedelta(hours=1)
    assert upcoming_assignments(conn, 1, now) == [
        Reminder("Math", "2024-05-10", "12:00:00")
    ]


def test_due_exactly_now_is_reported(conn):
    now = dt.datetime.combine(DUE_DATE, DUE_TIME)
    assert [r.subject for r in upcoming_assignments(conn, 1, now)] == ["Math"]


def test_window_end_is_exclusive(conn):
    now = dt.datetime.combine(DUE_DATE, DUE_TIME) - dt.timedelta(hours=2)
    assert upcoming_assignments(conn, 1, now) == []


def test_past_assignment_is_not_reported(conn):
    now = dt.datetime.combine(DUE_DATE, DUE_TIME) + dt.timedelta(seconds=1)
    assert first_reminder(conn, 1, now) is None


def test_only_assignments_of_the_user(conn):
    AcademicSchedule(conn, 1).add(DUE_DATE, DUE_TIME, "Physics", "Exam")
    AcademicSchedule(conn, 2).add(DUE_DATE, DUE_TIME, "History", "Assignment")
    now = dt.datetime.combine(DUE_DATE, DUE_TIME) - dt.timedelta(minutes=30)
    assert [r.subject for r in upcoming_assignments(conn, 1, now)] == ["Math"]


def test_first_reminder_is_earliest_added(conn):
    AcademicSchedule(conn, 1).add(DUE_DATE, dt.time(11, 30), "Art", "Assignment")
    now = dt.datetime.combine(DUE_DATE, dt.time(11, 0))
    reminder = first_reminder(conn, 1, now)
    assert reminder is not None
    assert reminder.subject == "Math"


def test_unreadable_due_time_counts_as_due(conn):
    AcademicSchedule(conn, 1).add("someday", "noon", "Music", "Assignment")
    now = dt.datetime(2030, 1, 1)
    assert [r.subject for r in upcoming_assignments(conn, 1, now)] == ["Music"]