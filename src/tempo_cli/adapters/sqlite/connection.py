"""Database connection management for the local SQLite database.

One connection per process, reused by every repository, with WAL mode and
foreign keys enabled and the schema migrated on first use.
"""

from __future__ import annotations

import atexit
import os
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from tempo_cli.adapters.sqlite.migrations.m001_initial_schema import ALL_MIGRATIONS
from tempo_cli.adapters.sqlite.migrations.runner import MigrationRunner
from tempo_cli.utils.logger import get_logger

logger = get_logger(__name__)

MEMORY_DB = ":memory:"


def default_db_path() -> Path:
    return Path(user_data_dir("tempo_cli")) / "tempo.db"


class DatabaseConnection:
    """Singleton connection manager for the tempo database."""

    _instance: DatabaseConnection | None = None
    _connection: sqlite3.Connection | None = None
    _db_path: str | None = None

    def __new__(cls) -> DatabaseConnection:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_connection(cls, db_path: str | Path | None = None) -> sqlite3.Connection:
        """Get or create the database connection.

        Args:
            db_path: Database file, ``":memory:"``, or None for the default
                location in the user data directory.

        Returns:
            A migrated sqlite3.Connection with ``sqlite3.Row`` rows
        """
        instance = cls()
        target = str(db_path) if db_path is not None else str(default_db_path())

        if instance._connection is not None and instance._db_path == target:
            return instance._connection
        if instance._connection is not None:
            instance._connection.close()

        is_new_database = False
        if target != MEMORY_DB:
            path = Path(target)
            path.parent.mkdir(parents=True, exist_ok=True)
            is_new_database = not path.exists()

        connection = sqlite3.connect(target, check_same_thread=False, timeout=30.0)
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON")
        if target != MEMORY_DB:
            connection.execute("PRAGMA journal_mode = WAL")

        if is_new_database:
            os.chmod(target, 0o600)
            logger.info("Created database at %s", target)

        MigrationRunner(connection).run_migrations(ALL_MIGRATIONS)

        instance._connection = connection
        instance._db_path = target
        atexit.register(cls.close_connection)
        return connection

    @classmethod
    def close_connection(cls) -> None:
        """Commit and close the connection, if one is open."""
        instance = cls()
        if instance._connection is None:
            return
        try:
            instance._connection.commit()
            instance._connection.close()
        except sqlite3.Error as e:
            logger.warning("Error while closing database: %s", e)
        finally:
            instance._connection = None
            instance._db_path = None

    @classmethod
    def get_db_path(cls) -> str | None:
        return cls()._db_path


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Helper function to get database connection."""
    return DatabaseConnection.get_connection(db_path)
