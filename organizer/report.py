"""Monthly financial report: income, expenses and savings."""

from __future__ import annotations

import datetime as _dt
import sqlite3
from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyReport:
    """Totals and line items of one user's finances for one month."""

    year: int
    month: int
    total_income: float
    total_expense: float
    total_savings: float
    income: tuple[tuple[str, float], ...]
    expenses: tuple[tuple[str, float], ...]


def _total(conn: sqlite3.Connection, table: str, user_id: int, key: str) -> float:
    try:
        row = conn.execute(
            f"SELECT SUM(amount) FROM {table} WHERE uid=? AND substr(date, 1, 7) = ?",
            (user_id, key),
        ).fetchone()
    except sqlite3.Error:
        return 0.0
    return 0.0 if row is None or row[0] is None else float(row[0])


def _items(
    conn: sqlite3.Connection, table: str, label: str, user_id: int, key: str
) -> tuple[tuple[str, float], ...]:
    rows = conn.execute(
        f"SELECT {label}, amount FROM {table} "
        "WHERE uid=? AND substr(date, 1, 7) = ? ORDER BY id",
        (user_id, key),
    )
    return tuple((name, float(amount)) for name, amount in rows)


def monthly_report(
    conn: sqlite3.Connection, user_id: int, year: int, month: int
) -> MonthlyReport:
    """Build the report of *user_id* for the given month."""
    first_day = _dt.date(year, month, 1)
    income_key = first_day.strftime("%Y/%m")
    expense_key = first_day.strftime("%Y-%m")

    total_income = _total(conn, "income", user_id, income_key)
    total_expense = _total(conn, "expense", user_id, expense_key)
    return MonthlyReport(
        year=year,
        month=month,
        total_income=total_income,
        total_expense=total_expense,
        total_savings=total_income - total_expense,
        income=_items(conn, "income", "source", user_id, income_key),
        expenses=_items(conn, "expense", "category", user_id, expense_key),
    )