"""SQLite implementation of NoteRepository."""

from __future__ import annotations

import sqlite3

from tempo_cli.adapters.sqlite.connection import get_connection
from tempo_cli.adapters.sqlite.utils import dump_json, load_json, row_to_dict
from tempo_cli.models import DailyNote
from tempo_cli.repositories import NoteRepository


def _row_to_note(row: sqlite3.Row) -> DailyNote:
    data = row_to_dict(row)
    data["energy_checks"] = load_json(data["energy_checks"])
    return DailyNote.model_validate(data)


class SqliteNoteRepository(NoteRepository):
    """Daily notes keyed by their ISO date."""

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    async def list_all(self) -> list[DailyNote]:
        rows = self.connection.execute(
            "SELECT * FROM daily_notes ORDER BY date ASC"
        ).fetchall()
        return [_row_to_note(row) for row in rows]

    async def get(self, date: str) -> DailyNote | None:
        row = self.connection.execute(
            "SELECT * FROM daily_notes WHERE date = ?", (date,)
        ).fetchone()
        return _row_to_note(row) if row else None

    async def save(self, note: DailyNote) -> DailyNote:
        checks = [check.model_dump(mode="json") for check in note.energy_checks]
        self.connection.execute(
            """INSERT INTO daily_notes (date, intention, notebook, energy_checks)
               VALUES (?, ?, ?, ?)
               ON CONFLICT(date) DO UPDATE SET
                   intention = excluded.intention,
                   notebook = excluded.notebook,
                   energy_checks = excluded.energy_checks""",
            (note.date, note.intention, note.notebook, dump_json(checks)),
        )
        self.connection.commit()
        return note

    async def delete(self, date: str) -> bool:
        cursor = self.connection.execute("DELETE FROM daily_notes WHERE date = ?", (date,))
        self.connection.commit()
        return cursor.rowcount > 0
