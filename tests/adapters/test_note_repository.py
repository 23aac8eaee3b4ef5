"""Unit tests for SqliteNoteRepository."""

from __future__ import annotations

from datetime import datetime

import pytest

from tempo_cli.adapters.sqlite import SqliteNoteRepository
from tempo_cli.models import DailyNote, EnergyCheck


@pytest.fixture()
def repo(db_path):
    return SqliteNoteRepository(db_path=db_path)


@pytest.mark.asyncio
async def test_save_and_get(repo):
    note = DailyNote(
        date="2025-03-10",
        intention="Calme",
        notebook="ligne 1\nligne 2",
        energy_checks=[EnergyCheck(level=3, timestamp=datetime(2025, 3, 10, 9, 30), note="café")],
    )
    await repo.save(note)
    assert await repo.get("2025-03-10") == note


@pytest.mark.asyncio
async def test_save_overwrites(repo):
    await repo.save(DailyNote(date="2025-03-10", intention="a"))
    await repo.save(DailyNote(date="2025-03-10", intention="b"))

    notes = await repo.list_all()
    assert len(notes) == 1
    assert notes[0].intention == "b"


@pytest.mark.asyncio
async def test_missing(repo):
    assert await repo.get("2025-03-10") is None
    assert await repo.delete("2025-03-10") is False
