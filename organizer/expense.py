"""Expense ledger: spending per user, checked against the monthly budget."""

from __future__ import annotations

import datetime as _dt
import sqlite3
from dataclasses import dataclass

from .budget import month_text
from .database import OrganizerError, ValidationError


@dataclass(frozen=True)
class ExpenseEntry:
    """One recorded expense."""

    id: int
    date: str
    description: str
    category: str
    amount: float


def _date_text(value: str | _dt.date) -> str:
    if isinstance(value, _dt.date):
        return value.strftime("%Y-%m-%d")
    return str(value)


class ExpenseLedger:
    """The expense records of one user."""

    def __init__(self, conn: sqlite3.Connection, user_id: int) -> None:
        self.conn = conn
        self.user_id = user_id

    def spent(self, category: str, month: int) -> float:
        """Return the total spent on *category* in *month* (of any year)."""
        try:
            row = self.conn.execute(
                "SELECT SUM(amount) FROM expense WHERE uid=? AND category=? "
                "AND strftime('%m', date) = ?",
                (self.user_id, category, month_text(month)),
            ).fetchone()
        except sqlite3.Error:
            return 0.0
        return 0.0 if row is None or row[0] is None else float(row[0])

    def budget_for(self, category: str, month: int) -> float:
        """Return the budget set for *category* in *month*, or 0.0 if none."""
        try:
            row = self.conn.execute(
                "SELECT amount FROM budget WHERE uid=? AND month=? AND category=?",
                (self.user_id, month_text(month), category),
            ).fetchone()
        except sqlite3.Error:
            return 0.0
        return 0.0 if row is None or row[0] is None else float(row[0])

    def add(
        self,
        date: str | _dt.date,
        description: str,
        category: str,
        amount: float,
        today: _dt.date | None = None,
    ) -> int:
        """Record an expense if it fits the remaining budget of the current month."""
        amount = float(amount)
        if amount <= 0:
            raise ValidationError("Amount must be a positive number.")
        if not description:
            raise ValidationError("Description can not be empty.")

        month = (today or _dt.date.today()).month
        budget = self.budget_for(category, month)
        remaining = budget - self.spent(category, month)
        if budget <= 0.0:
            raise ValidationError(
                "Budget is not provided.Please Enter Budget for This Category!"
            )
        if amount > remaining:
            raise ValidationError(
                f"Exceeds remaining budget! \nRemaining: {remaining:g}"
            )

        try:
            with self.conn:
                cursor = self.conn.execute(
                    "INSERT INTO expense(date, description, category, amount, uid) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (_date_text(date), description, category, amount, self.user_id),
                )
        except sqlite3.Error as exc:
            raise OrganizerError(f"Insert query error: {exc}") from exc
        return cursor.lastrowid

    def entries(self) -> list[ExpenseEntry]:
        """Return the user's expenses in the order they were added."""
        rows = self.conn.execute(
            "SELECT id, date, description, category, amount FROM expense "
            "WHERE uid=? ORDER BY id",
            (self.user_id,),
        )
        return [ExpenseEntry(*row) for row in rows]

    def delete(self, entry_id: int) -> bool:
        """Delete one of the user's expenses; return whether it existed."""
        with self.conn:
            cursor = self.conn.execute(
                "DELETE FROM expense WHERE uid=? AND id=?", (self.user_id, entry_id)
            )
        return cursor.rowcount > 0

    def clear(self) -> int:
        """Delete all of the user's expenses and return how many were removed."""
        with self.conn:
            cursor = self.conn.execute("DELETE FROM expense WHERE uid=?", (self.user_id,))
        return cursor.rowcount