"""Initial schema: tasks and daily notes."""

import sqlite3

from tempo_cli.adapters.sqlite import schema

from .runner import Migration


class InitialSchemaMigration(Migration):
    """Migration 001: create the tasks and daily_notes tables."""

    @property
    def version(self) -> int:
        return 1

    @property
    def description(self) -> str:
        return "Tasks and daily notes"

    def up(self, connection: sqlite3.Connection) -> None:
        connection.execute(schema.CREATE_TASKS_TABLE)
        connection.execute(schema.CREATE_DAILY_NOTES_TABLE)
        for index_sql in schema.ALL_INDEXES:
            connection.execute(index_sql)


initial_migration = InitialSchemaMigration()

ALL_MIGRATIONS = [initial_migration]
