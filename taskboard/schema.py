"""Table definitions for the task board database."""

from __future__ import annotations

import sqlite3

TABLES: dict[str, tuple[str, ...]] = {
    "task_statuses": ("id", "name"),
    "tasks": ("id", "title", "description", "status_id"),
    "user_tasks": ("id", "user_id", "task_id"),
    "users": ("id", "name", "email", "active"),
}

_DDL = """
CREATE TABLE IF NOT EXISTS task_statuses (
    id INTEGER PRIMARY KEY NOT NULL,
    name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY NOT NULL,
    title TEXT NOT NULL,
    description TEXT,
    status_id INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS user_tasks (
    id INTEGER PRIMARY KEY NOT NULL,
    user_id INTEGER NOT NULL,
    task_id INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY NOT NULL,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    active BOOLEAN NOT NULL
);
"""


def table_names() -> tuple[str, ...]:
    """Return the names of all tables in the schema."""
    return tuple(TABLES)


def create_schema(conn: sqlite3.Connection) -> None:
    """Create any missing tables on ``conn``."""
    conn.executescript(_DDL)