"""Tests for the energy profile and energy check session."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from tempo_cli.models import EnergyCheckSession, EnergyProfile, TimeRange

NOW = datetime(2025, 3, 10, 10, 0)


class TestTimeRange:
    def test_parse(self):
        window = TimeRange.parse("09:00-12:00")
        assert (window.start_hour, window.end_hour) == (9, 12)
        assert str(window) == "09:00-12:00"

    def test_parse_rejects_missing_dash(self):
        with pytest.raises(ValueError):
            TimeRange.parse("09:00")

    def test_invalid_clock_rejected(self):
        with pytest.raises(ValidationError):
            TimeRange(start="25:00", end="26:00")

    def test_end_is_exclusive(self):
        window = TimeRange.parse("09:00-12:00")
        assert window.contains_hour(9)
        assert window.contains_hour(11)
        assert not window.contains_hour(12)
        assert window.hours() == [9, 10, 11]

    def test_wraps_midnight(self):
        window = TimeRange.parse("22:00-02:00")
        assert window.contains_hour(23)
        assert window.contains_hour(1)
        assert not window.contains_hour(12)
        assert window.hours() == [22, 23, 0, 1]


class TestEnergyProfile:
    def test_defaults(self):
        profile = EnergyProfile()
        assert profile.peak_hours == [9, 10, 11]
        assert profile.dip_hours == [14, 15]
        assert profile.work_days == [0, 1, 2, 3, 4]

    def test_accepts_range_strings(self):
        profile = EnergyProfile(peaks=["08:00-10:00", "16:00-18:00"], dips=[])
        assert profile.peak_hours == [8, 9, 16, 17]
        assert profile.in_peak(16)
        assert not profile.in_dip(15)

    def test_work_days_sorted_and_unique(self):
        assert EnergyProfile(work_days=[4, 0, 0]).work_days == [0, 4]

    def test_work_days_bounds(self):
        with pytest.raises(ValidationError):
            EnergyProfile(work_days=[7])


class TestEnergyCheckSession:
    def test_due_without_history(self):
        assert EnergyCheckSession().is_due(NOW)

    def test_record_pushes_next_prompt(self):
        session = EnergyCheckSession(interval_minutes=60)
        check = session.record(4, NOW, note="ok")

        assert check.level == 4
        assert check.timestamp == NOW
        assert session.last_check_at == NOW
        assert not session.is_due(NOW + timedelta(minutes=59))
        assert session.is_due(NOW + timedelta(minutes=60))

    def test_snooze_does_not_record(self):
        session = EnergyCheckSession(interval_minutes=30)
        session.snooze(NOW)
        assert session.last_check_at is None
        assert session.next_prompt_due_at == NOW + timedelta(minutes=30)

    def test_level_bounds(self):
        with pytest.raises(ValidationError):
            EnergyCheckSession().record(6, NOW)
