"""Locating and opening the task board database."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path

from dotenv import load_dotenv


class ConfigurationError(RuntimeError):
    """Raised when the database location is not configured."""


def database_url(env_file: str | Path | None = None) -> str:
    """Return ``DATABASE_URL``, after loading a ``.env`` file into the environment."""
    load_dotenv(env_file)
    url = os.environ.get("DATABASE_URL")
    if url is None:
        raise ConfigurationError("DATABASE_URL must be set")
    return url


def establish_connection(url: str | None = None) -> sqlite3.Connection:
    """Open the SQLite database at ``url`` or at the configured ``DATABASE_URL``."""
    if url is None:
        url = database_url()
    print(f"Connecting to database at: {url}")
    try:
        return sqlite3.connect(url, uri=url.startswith("file:"))
    except sqlite3.Error as exc:
        raise ConnectionError(f"Error connecting to {url}") from exc