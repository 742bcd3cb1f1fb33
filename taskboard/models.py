"""Row types for the task board tables and the values used to insert them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    """A row of the ``users`` table."""

    id: int
    name: str
    email: str
    active: bool

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> User:
        """Build a user from ``(id, name, email, active)``."""
        user_id, name, email, active = row
        return cls(int(user_id), name, email, bool(active))


@dataclass(frozen=True)
class NewUser:
    """Values for inserting a user; the id is assigned by the database."""

    name: str
    email: str
    active: bool


@dataclass(frozen=True)
class Task:
    """A row of the ``tasks`` table."""

    id: int
    title: str
    description: str | None
    status_id: int

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> Task:
        """Build a task from ``(id, title, description, status_id)``."""
        task_id, title, description, status_id = row
        return cls(int(task_id), title, description, int(status_id))


@dataclass(frozen=True)
class NewTask:
    """Values for inserting a task."""

    title: str
    description: str | None
    status_id: int


@dataclass(frozen=True)
class UserTask:
    """A row of the ``user_tasks`` table linking a user to a task."""

    id: int
    user_id: int
    task_id: int

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> UserTask:
        """Build a link from ``(id, user_id, task_id)``."""
        link_id, user_id, task_id = row
        return cls(int(link_id), int(user_id), int(task_id))


@dataclass(frozen=True)
class NewUserTask:
    """Values for inserting a user-task link."""

    user_id: int
    task_id: int


@dataclass(frozen=True)
class TaskStatus:
    """A row of the ``task_statuses`` table."""

    id: int
    name: str

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> TaskStatus:
        """Build a status from ``(id, name)``."""
        status_id, name = row
        return cls(int(status_id), name)


@dataclass(frozen=True)
class NewTaskStatus:
    """Values for inserting a task status."""

    name: str