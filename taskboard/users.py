"""Queries on the ``users`` table."""

from __future__ import annotations

import sqlite3

from .models import NewUser, User
from .schema import TABLES

_COLUMNS = ", ".join(TABLES["users"])


def insert_user(conn: sqlite3.Connection, new_user: NewUser) -> int:
    """Insert ``new_user`` and return its id."""
    with conn:
        cursor = conn.execute(
            "INSERT INTO users (name, email, active) VALUES (?, ?, ?)",
            (new_user.name, new_user.email, new_user.active),
        )
    return cursor.lastrowid


def load_users(conn: sqlite3.Connection, limit: int | None = None) -> list[User]:
    """Return users in id order, at most ``limit`` of them when given."""
    query = f"SELECT {_COLUMNS} FROM users ORDER BY id"
    params: tuple[int, ...] = ()
    if limit is not None:
        query += " LIMIT ?"
        params = (limit,)
    return [User.from_row(row) for row in conn.execute(query, params)]


def set_active_by_name(conn: sqlite3.Connection, name: str, active: bool) -> int:
    """Set the active flag of every user called ``name``; return the count changed."""
    with conn:
        cursor = conn.execute("UPDATE users SET active = ? WHERE name = ?", (active, name))
    return cursor.rowcount


def find_user_by_name(conn: sqlite3.Connection, name: str) -> User:
    """Return the first user called ``name``; raise LookupError if there is none."""
    row = conn.execute(
        f"SELECT {_COLUMNS} FROM users WHERE name = ? ORDER BY id LIMIT 1", (name,)
    ).fetchone()
    if row is None:
        raise LookupError(f"no user named {name!r}")
    return User.from_row(row)


def delete_users_by_name(conn: sqlite3.Connection, name: str) -> int:
    """Delete every user called ``name``; return the count removed."""
    with conn:
        cursor = conn.execute("DELETE FROM users WHERE name = ?", (name,))
    return cursor.rowcount