"""Daily notes: the day's intention, free notes and energy check-ins."""

from __future__ import annotations

from datetime import date, datetime

from tempo_cli.models import DailyNote, EnergyCheck, EnergyCheckSession
from tempo_cli.repositories import NoteRepository


def note_key(day: date | datetime | str) -> str:
    """ISO date string used as the note identity."""
    if isinstance(day, datetime):
        day = day.date()
    if isinstance(day, date):
        return day.isoformat()
    return day


class NoteService:
    """Service for daily notes."""

    def __init__(self, note_repository: NoteRepository):
        self.repository = note_repository

    async def get_note(self, day: date | datetime | str) -> DailyNote:
        """The note for ``day``; an empty, unsaved one if none exists yet."""
        key = note_key(day)
        return await self.repository.get(key) or DailyNote(date=key)

    async def list_notes(self) -> list[DailyNote]:
        return await self.repository.list_all()

    async def set_intention(self, day: date | datetime | str, intention: str) -> DailyNote:
        note = await self.get_note(day)
        note.intention = intention.strip() or None
        return await self.repository.save(note)

    async def append_notebook(self, day: date | datetime | str, text: str) -> DailyNote:
        """Add a line to the day's notebook."""
        note = await self.get_note(day)
        note.notebook = f"{note.notebook}\n{text}" if note.notebook else text
        return await self.repository.save(note)

    async def record_energy_check(
        self,
        level: int,
        now: datetime,
        note: str | None = None,
        session: EnergyCheckSession | None = None,
    ) -> EnergyCheck:
        """Store a 1-5 energy level on today's note.

        When a session is given it is advanced too, so the caller knows when
        to prompt next.
        """
        if session is not None:
            check = session.record(level, now, note)
        else:
            check = EnergyCheck(level=level, timestamp=now, note=note)
        daily = await self.get_note(now)
        daily.energy_checks.append(check)
        await self.repository.save(daily)
        return check
