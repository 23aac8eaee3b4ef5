"""Adapters module - Repository implementations for storage backends.

- sqlite: Local SQLite database storage
"""

from .sqlite import SqliteNoteRepository, SqliteTaskRepository

__all__ = [
    "SqliteTaskRepository",
    "SqliteNoteRepository",
]
