"""Monthly budgets per spending category."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from .database import DuplicateEntryError, OrganizerError


@dataclass(frozen=True)
class BudgetEntry:
    """The budget set for one category in one month."""

    id: int
    category: str
    month: str
    amount: float


def month_text(month: int | str) -> str:
    """Return the stored form of a month: a number becomes two digits."""
    if isinstance(month, int):
        return f"{month:02d}"
    return str(month)


class BudgetBook:
    """The budgets of one user."""

    def __init__(self, conn: sqlite3.Connection, user_id: int) -> None:
        self.conn = conn
        self.user_id = user_id

    def add(self, category: str, month: int | str, amount: float) -> int:
        """Set the budget for *category* in *month*; each may be set only once."""
        month_value = month_text(month)
        try:
            existing = self.conn.execute(
                "SELECT id FROM budget WHERE uid=? AND month=? AND category=?",
                (self.user_id, month_value, category),
            ).fetchone()
            if existing is not None:
                raise DuplicateEntryError(
                    "Budget of selected Category for this month has already set."
                )
            with self.conn:
                cursor = self.conn.execute(
                    "INSERT INTO budget(category, month, amount, uid) VALUES (?, ?, ?, ?)",
                    (category, month_value, float(amount), self.user_id),
                )
        except sqlite3.Error as exc:
            raise OrganizerError(f"Insert query error: {exc}") from exc
        return cursor.lastrowid

    def entries(self) -> list[BudgetEntry]:
        """Return the user's budgets in the order they were set."""
        rows = self.conn.execute(
            "SELECT id, category, month, amount FROM budget WHERE uid=? ORDER BY id",
            (self.user_id,),
        )
        return [BudgetEntry(*row) for row in rows]

    def delete(self, entry_id: int) -> bool:
        """Delete one of the user's budgets; return whether it existed."""
        with self.conn:
            cursor = self.conn.execute(
                "DELETE FROM budget WHERE uid=? AND id=?", (self.user_id, entry_id)
            )
        return cursor.rowcount > 0

    def clear(self) -> int:
        """Delete all of the user's budgets and return how many were removed."""
        with self.conn:
            cursor = self.conn.execute("DELETE FROM budget WHERE uid=?", (self.user_id,))
        return cursor.rowcount