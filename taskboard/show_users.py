"""Command that lists the first users in the database."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from collections.abc import Iterable, Sequence
from contextlib import closing

from .db import ConfigurationError, establish_connection
from .models import User
from .users import load_users

_SEPARATOR = "-----------"
_LIMIT = 5


def format_users(users: Iterable[User]) -> str:
    """Render users as separated blocks of name, e-mail and active flag."""
    lines = []
    for user in users:
        lines.append(_SEPARATOR)
        lines.append(f"Name: {user.name}")
        lines.append(f"Email: {user.email}")
        lines.append(f"Active: {'true' if user.active else 'false'}")
    lines.append(_SEPARATOR)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print up to five users from the configured database."""
    parser = argparse.ArgumentParser(
        prog="show-users", description="Show the first users in the database."
    )
    parser.parse_args(argv)

    print("Requesting connection...")
    try:
        connection = establish_connection()
    except (ConfigurationError, ConnectionError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print("Received connection...")

    with closing(connection):
        print("Querying users...")
        try:
            users = load_users(connection, _LIMIT)
        except sqlite3.Error as exc:
            print(f"Error loading users: {exc}", file=sys.stderr)
            return 1

    print(f"Displaying {len(users)} users")
    print(format_users(users))
    return 0


if __name__ == "__main__":
    sys.exit(main())