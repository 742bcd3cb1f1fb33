"""Create, read, update and delete operations for the task tables."""

from __future__ import annotations

import sqlite3
import sys
from typing import Any, ClassVar, TextIO

from .models import Task, TaskStatus, UserTask
from .schema import TABLES


class CrudOperations:
    """CRUD access to one table; subclasses name the table and its columns."""

    table: ClassVar[str]
    model: ClassVar[type]
    insert_columns: ClassVar[tuple[str, ...]]
    update_columns: ClassVar[tuple[str, ...]]

    def __init__(self, conn: sqlite3.Connection) -> None:
        if not hasattr(type(self), "table"):
            raise TypeError(f"{type(self).__name__} does not name a table")
        self._conn = conn

    def create(self, item: Any) -> int:
        """Insert ``item`` (its id, if any, is ignored) and return the new id."""
        values = [getattr(item, column) for column in self.insert_columns]
        columns = ", ".join(self.insert_columns)
        placeholders = ", ".join("?" for _ in self.insert_columns)
        with self._conn:
            cursor = self._conn.execute(
                f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})", values
            )
        return cursor.lastrowid

    def read_all(self) -> list[Any]:
        """Return every row of the table."""
        columns = ", ".join(TABLES[self.table])
        rows = self._conn.execute(f"SELECT {columns} FROM {self.table} ORDER BY id")
        return [self.model.from_row(row) for row in rows]

    def update(self, item_id: int, data: Any) -> int:
        """Update the row ``item_id`` from ``data``; return the number of rows changed."""
        assignments = ", ".join(f"{column} = ?" for column in self.update_columns)
        values = [getattr(data, column) for column in self.update_columns]
        with self._conn:
            cursor = self._conn.execute(
                f"UPDATE {self.table} SET {assignments} WHERE id = ?", [*values, item_id]
            )
        return cursor.rowcount

    def delete(self, item_id: int) -> int:
        """Delete the row ``item_id``; return the number of rows removed."""
        with self._conn:
            cursor = self._conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (item_id,))
        return cursor.rowcount

    def print_all(self, out: TextIO | None = None) -> None:
        """Write every row, one per line, to ``out`` (standard output by default)."""
        stream = out if out is not None else sys.stdout
        for item in self.read_all():
            print(repr(item), file=stream)


class TaskOperations(CrudOperations):
    """Operations on ``tasks``; updates change only the title."""

    table = "tasks"
    model = Task
    insert_columns = ("title", "description", "status_id")
    update_columns = ("title",)


class TaskStatusOperations(CrudOperations):
    """Operations on ``task_statuses``."""

    table = "task_statuses"
    model = TaskStatus
    insert_columns = ("name",)
    update_columns = ("name",)


class UserTaskOperations(CrudOperations):
    """Operations on ``user_tasks``."""

    table = "user_tasks"
    model = UserTask
    insert_columns = ("user_id", "task_id")
    update_columns = ("user_id", "task_id")