"""Energy profile models and the energy check session state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Literal

from pydantic import BaseModel, Field, field_validator

Chronotype = Literal["morning", "evening", "flexible"]


class TimeRange(BaseModel):
    """A daily time window such as a peak or a dip ("HH:MM" bounds)."""

    start: str = Field(..., pattern=r"^\d{1,2}:\d{2}$")
    end: str = Field(..., pattern=r"^\d{1,2}:\d{2}$")

    @field_validator("start", "end")
    @classmethod
    def _check_clock(cls, v: str) -> str:
        hour, minute = (int(part) for part in v.split(":"))
        if not (0 <= hour <= 24 and 0 <= minute < 60):
            raise ValueError(f"invalid time of day: {v}")
        return v

    @classmethod
    def parse(cls, value: str) -> TimeRange:
        """Build a range from the "HH:MM-HH:MM" notation."""
        start, sep, end = value.partition("-")
        if not sep:
            raise ValueError(f"expected HH:MM-HH:MM, got {value!r}")
        return cls(start=start.strip(), end=end.strip())

    @property
    def start_hour(self) -> int:
        return int(self.start.split(":")[0])

    @property
    def end_hour(self) -> int:
        return int(self.end.split(":")[0])

    def contains_hour(self, hour: int) -> bool:
        """Whether ``hour`` falls in [start_hour, end_hour), wrapping midnight."""
        if self.start_hour <= self.end_hour:
            return self.start_hour <= hour < self.end_hour
        return hour >= self.start_hour or hour < self.end_hour

    def hours(self) -> list[int]:
        """Every whole hour covered by the range, in chronological order."""
        if self.start_hour <= self.end_hour:
            return list(range(self.start_hour, self.end_hour))
        return list(range(self.start_hour, 24)) + list(range(0, self.end_hour))

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class EnergyProfile(BaseModel):
    """The user's self-reported energy rhythm.

    Attributes:
        chronotype: morning, evening or flexible
        peaks: Windows of high energy
        dips: Windows of low energy
        caffeine_times: Usual caffeine intake times ("HH:MM")
        focus_duration: Preferred focus block length in minutes
        break_preference: Preferred break length in minutes
        work_days: Working weekdays (Monday=0 ... Sunday=6)
    """

    chronotype: Chronotype = "morning"
    peaks: list[TimeRange] = Field(
        default_factory=lambda: [TimeRange(start="09:00", end="12:00")]
    )
    dips: list[TimeRange] = Field(
        default_factory=lambda: [TimeRange(start="14:00", end="16:00")]
    )
    caffeine_times: list[str] = Field(default_factory=lambda: ["08:00"])
    focus_duration: int = Field(default=90, ge=5)
    break_preference: int = Field(default=15, ge=0)
    work_days: list[int] = Field(default_factory=lambda: [0, 1, 2, 3, 4])

    @field_validator("peaks", "dips", mode="before")
    @classmethod
    def _accept_range_strings(cls, v):
        if isinstance(v, list):
            return [TimeRange.parse(item) if isinstance(item, str) else item for item in v]
        return v

    @field_validator("work_days")
    @classmethod
    def _check_work_days(cls, v: list[int]) -> list[int]:
        if any(day < 0 or day > 6 for day in v):
            raise ValueError("work_days must be weekday numbers 0-6")
        return sorted(set(v))

    @property
    def peak_hours(self) -> list[int]:
        return [hour for window in self.peaks for hour in window.hours()]

    @property
    def dip_hours(self) -> list[int]:
        return [hour for window in self.dips for hour in window.hours()]

    def in_peak(self, hour: int) -> bool:
        return any(window.contains_hour(hour) for window in self.peaks)

    def in_dip(self, hour: int) -> bool:
        return any(window.contains_hour(hour) for window in self.dips)


class EnergyCheck(BaseModel):
    """A single self-reported energy level (1 = drained, 5 = great)."""

    level: int = Field(..., ge=1, le=5)
    timestamp: datetime
    note: str | None = None


@dataclass
class EnergyCheckSession:
    """When the next "how is your energy?" prompt is due.

    Owned by the calling layer; the scoring and aggregation code never
    reads or writes it.
    """

    interval_minutes: int = 60
    last_check_at: datetime | None = None
    next_prompt_due_at: datetime | None = None

    def is_due(self, now: datetime) -> bool:
        if self.next_prompt_due_at is None:
            return True
        return now >= self.next_prompt_due_at

    def record(self, level: int, now: datetime, note: str | None = None) -> EnergyCheck:
        """Record a check and push the next prompt one interval ahead."""
        check = EnergyCheck(level=level, timestamp=now, note=note)
        self.last_check_at = now
        self.next_prompt_due_at = now + timedelta(minutes=self.interval_minutes)
        return check

    def snooze(self, now: datetime) -> None:
        """Dismiss the prompt without recording a level."""
        self.next_prompt_due_at = now + timedelta(minutes=self.interval_minutes)
