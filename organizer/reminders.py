"""Reminders for assignments that are due soon."""

from __future__ import annotations

import datetime as _dt
import sqlite3
from dataclasses import dataclass

REMINDER_WINDOW_SECONDS = 7200
CHECK_INTERVAL_SECONDS = 60


@dataclass(frozen=True)
class Reminder:
    """An assignment that is due within the reminder window."""

    subject: str
    date: str
    time: str

    def message(self) -> str:
        """Return the text shown to the user."""
        return (
            f"Reminder: You have an assignment '{self.subject}' "
            f"due on {self.date} at {self.time}."
        )


def _seconds_until(date: str, time: str, now: _dt.datetime) -> int:
    try:
        due = _dt.datetime.strptime(f"{date} {time}", "%Y-%m-%d %H:%M:%S")
    except ValueError:
        # A due time that cannot be read counts as due right now.
        return 0
    return int((due - now).total_seconds())


def upcoming_assignments(
    conn: sqlite3.Connection, user_id: int, now: _dt.datetime | None = None
) -> list[Reminder]:
    """Return the user's assignments due within the next two hours."""
    now = now or _dt.datetime.now()
    rows = conn.execute(
        "SELECT subject, date, time FROM academic "
        "WHERE uid=? AND type='Assignment' ORDER BY id",
        (user_id,),
    )
    return [
        Reminder(subject, date, time)
        for subject, date, time in rows
        if 0 <= _seconds_until(date, time, now) < REMINDER_WINDOW_SECONDS
    ]


def first_reminder(
    conn: sqlite3.Connection, user_id: int, now: _dt.datetime | None = None
) -> Reminder | None:
    """Return the first upcoming assignment, or None if there is none."""
    reminders = upcoming_assignments(conn, user_id, now)
    return reminders[0] if reminders else None