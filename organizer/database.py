"""SQLite storage for the organizer: connection set-up, schema and errors."""

from __future__ import annotations

import os
import sqlite3

DEFAULT_DATABASE = "users.db"

# Columns of each per-user table, apart from the row id and the owning user,
# which every such table shares.
_USER_TABLES: dict[str, tuple[tuple[str, str], ...]] = {
    "expense": (
        ("date", "TEXT"),
        ("description", "TEXT"),
        ("category", "TEXT"),
        ("amount", "FLOAT"),
    ),
    "income": (
        ("date", "TEXT"),
        ("source", "TEXT"),
        ("amount", "FLOAT"),
    ),
    "budget": (
        ("category", "TEXT"),
        ("month", "TEXT"),
        ("amount", "FLOAT"),
    ),
    "academic": (
        ("date", "TEXT"),
        ("time", "TEXT"),
        ("subject", "TEXT"),
        ("type", "TEXT"),
    ),
}

TABLES = ("users", *_USER_TABLES)


def _users_statement() -> str:
    parts = [
        "id INTEGER PRIMARY KEY AUTOINCREMENT",
        "username TEXT NOT NULL UNIQUE",
        "password TEXT NOT NULL",
    ]
    return f"CREATE TABLE IF NOT EXISTS users ({', '.join(parts)})"


def _user_table_statement(name: str, columns: tuple[tuple[str, str], ...]) -> str:
    parts = ["id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT"]
    parts.extend(f"{column} {kind} NOT NULL" for column, kind in columns)
    parts.append("uid INTEGER NOT NULL")
    parts.append("FOREIGN KEY(uid) REFERENCES users(id)")
    return f"CREATE TABLE IF NOT EXISTS {name} ({', '.join(parts)})"


def _statements() -> list[str]:
    statements = [_users_statement()]
    statements.extend(
        _user_table_statement(name, columns) for name, columns in _USER_TABLES.items()
    )
    return statements


class OrganizerError(Exception):
    """Base class for errors raised by the organizer."""


class ValidationError(OrganizerError):
    """Input that the organizer refuses to store."""


class DuplicateEntryError(OrganizerError):
    """An entry that is already recorded."""


def create_tables(conn: sqlite3.Connection) -> None:
    """Create every table the organizer uses, leaving existing ones alone."""
    try:
        with conn:
            for statement in _statements():
                conn.execute(statement)
    except sqlite3.Error as exc:
        raise OrganizerError(f"Failed to create tables: {exc}") from exc


def connect(path: str | os.PathLike[str] = DEFAULT_DATABASE) -> sqlite3.Connection:
    """Open the database at *path* and make sure its tables exist."""
    try:
        conn = sqlite3.connect(path)
    except sqlite3.Error as exc:
        raise OrganizerError(f"Unable To Connect to Database! {exc}") from exc
    create_tables(conn)
    return conn