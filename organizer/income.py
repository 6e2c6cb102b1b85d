"""Income ledger: money received per user."""

from __future__ import annotations

import datetime as _dt
import sqlite3
from dataclasses import dataclass

from .database import OrganizerError, ValidationError


@dataclass(frozen=True)
class IncomeEntry:
    """One recorded income."""

    id: int
    date: str
    source: str
    amount: float


def _date_text(value: str | _dt.date) -> str:
    # Income dates are kept in the slash form the monthly report looks up.
    if isinstance(value, _dt.date):
        return value.strftime("%Y/%m/%d")
    return str(value)


class IncomeLedger:
    """The income records of one user."""

    def __init__(self, conn: sqlite3.Connection, user_id: int) -> None:
        self.conn = conn
        self.user_id = user_id

    def add(self, date: str | _dt.date, source: str, amount: float) -> int:
        """Record an income and return its id; the amount must be positive."""
        amount = float(amount)
        if amount <= 0:
            raise ValidationError("Amount must be a positive number.")
        try:
            with self.conn:
                cursor = self.conn.execute(
                    "INSERT INTO income(date, source, amount, uid) VALUES (?, ?, ?, ?)",
                    (_date_text(date), source, amount, self.user_id),
                )
        except sqlite3.Error as exc:
            raise OrganizerError(f"Insert query error: {exc}") from exc
        return cursor.lastrowid

    def entries(self) -> list[IncomeEntry]:
        """Return the user's income records in the order they were added."""
        rows = self.conn.execute(
            "SELECT id, date, source, amount FROM income WHERE uid=? ORDER BY id",
            (self.user_id,),
        )
        return [IncomeEntry(*row) for row in rows]

    def delete(self, entry_id: int) -> bool:
        """Delete one of the user's income records; return whether it existed."""
        with self.conn:
            cursor = self.conn.execute(
                "DELETE FROM income WHERE uid=? AND id=?", (self.user_id, entry_id)
            )
        return cursor.rowcount > 0

    def clear(self) -> int:
        """Delete all of the user's income records and return how many were removed."""
        with self.conn:
            cursor = self.conn.execute("DELETE FROM income WHERE uid=?", (self.user_id,))
        return cursor.rowcount