"""User registration."""

from __future__ import annotations

import sqlite3

from .database import DuplicateEntryError, OrganizerError, ValidationError


def username_taken(conn: sqlite3.Connection, username: str) -> bool:
    """Return whether a user with *username* is already registered."""
    try:
        (count,) = conn.execute(
            "SELECT COUNT(*) FROM users WHERE username = ?", (username,)
        ).fetchone()
    except sqlite3.Error as exc:
        raise OrganizerError(str(exc)) from exc
    return count > 0


def register_user(
    conn: sqlite3.Connection, username: str, password: str, confirm_password: str
) -> int:
    """Register a new user and return the new user's id."""
    if not username or not password or not confirm_password:
        raise ValidationError("Please Fill in All Fields!!")
    if password != confirm_password:
        raise ValidationError("Passwords do not match !")
    if username_taken(conn, username):
        raise DuplicateEntryError(
            "This Username is Already Taken. Please Select a Different One."
        )
    try:
        with conn:
            cursor = conn.execute(
                "INSERT INTO users(username, password) VALUES (?, ?)",
                (username, password),
            )
    except sqlite3.Error as exc:
        raise OrganizerError("Failed to register user.") from exc
    return cursor.lastrowid