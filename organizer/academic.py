"""Academic schedule: classes, assignments and exams per user."""

from __future__ import annotations

import datetime as _dt
import sqlite3
from dataclasses import dataclass

from .database import DuplicateEntryError, OrganizerError


@dataclass(frozen=True)
class AcademicEntry:
    """One scheduled academic item."""

    id: int
    date: str
    time: str
    subject: str
    kind: str


def _date_text(value: str | _dt.date) -> str:
    if isinstance(value, _dt.date):
        return value.strftime("%Y-%m-%d")
    return str(value)


def _time_text(value: str | _dt.time) -> str:
    if isinstance(value, _dt.time):
        return value.strftime("%H:%M:%S")
    return str(value)


class AcademicSchedule:
    """The academic entries of one user."""

    def __init__(self, conn: sqlite3.Connection, user_id: int) -> None:
        self.conn = conn
        self.user_id = user_id

    def add(
        self,
        date: str | _dt.date,
        time: str | _dt.time,
        subject: str,
        kind: str,
    ) -> int:
        """Schedule an entry and return its id; identical entries are refused."""
        date_text = _date_text(date)
        time_text = _time_text(time)
        params = (self.user_id, subject, kind, date_text, time_text)
        try:
            existing = self.conn.execute(
                "SELECT id FROM academic WHERE uid=? AND subject=? AND type=? "
                "AND date=? AND time=?",
                params,
            ).fetchone()
            if existing is not None:
                raise DuplicateEntryError("You Cannot enter same entry twice!")
            with self.conn:
                cursor = self.conn.execute(
                    "INSERT INTO academic(date, time, subject, type, uid) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (date_text, time_text, subject, kind, self.user_id),
                )
        except sqlite3.Error as exc:
            raise OrganizerError(f"Insert query error: {exc}") from exc
        return cursor.lastrowid

    def entries(self) -> list[AcademicEntry]:
        """Return the user's entries in the order they were added."""
        rows = self.conn.execute(
            "SELECT id, date, time, subject, type FROM academic WHERE uid=? ORDER BY id",
            (self.user_id,),
        )
        return [AcademicEntry(*row) for row in rows]

    def delete(self, entry_id: int) -> bool:
        """Delete one of the user's entries; return whether it existed."""
        with self.conn:
            cursor = self.conn.execute(
                "DELETE FROM academic WHERE uid=? AND id=?", (self.user_id, entry_id)
            )
        return cursor.rowcount > 0

    def clear(self) -> int:
        """Delete all of the user's entries and return how many were removed."""
        with self.conn:
            cursor = self.conn.execute(
                "DELETE FROM academic WHERE uid=?", (self.user_id,)
            )
        return cursor.rowcount