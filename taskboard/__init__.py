"""SQLite-backed storage for users, tasks, task statuses and user-task assignments."""

__version__ = "0.1.0"
__all__ = ["db", "models", "operations", "schema", "show_users", "users"]