"""Tests for productivity insights and the reality check."""

from __future__ import annotations

from datetime import datetime, timedelta

from tempo_cli.services.insights_service import (
    calculate_productivity_stats,
    reality_check,
)

NOW = datetime(2025, 3, 12, 16, 0)  # Wednesday


class TestProductivityStats:
    def test_empty(self, profile):
        stats = calculate_productivity_stats([], NOW, profile)
        assert stats.total_tasks == 0
        assert stats.completion_rate == 0
        assert stats.peak_time_completion_rate == 0
        assert [w.label for w in stats.weekly_trend] == ["W-3", "W-2", "W-1", "W"]

    def test_completion_and_deep_work(self, task_factory, profile):
        tasks = [
            task_factory(energy="deep", size="L", completed=True, completed_at=NOW.replace(hour=10)),
            task_factory(energy="deep", completed=True, completed_at=NOW.replace(hour=15)),
            task_factory(energy="admin", size="S", completed=True, completed_at=NOW.replace(hour=9)),
            task_factory(energy="deep"),
        ]
        stats = calculate_productivity_stats(tasks, NOW, profile)

        assert stats.total_tasks == 4
        assert stats.completed_tasks == 3
        assert stats.completion_rate == 75
        # L=4h plus an unsized deep task counted as M=2h
        assert stats.deep_work_hours == 6
        assert round(stats.deep_work_percentage, 2) == 66.67
        # 10:00 and 09:00 are in the 09-12 peak, 15:00 is not
        assert round(stats.peak_time_completion_rate, 2) == 66.67
        assert stats.energy_distribution["deep"] == 2
        assert stats.energy_distribution["admin"] == 1

    def test_archived_tasks_are_ignored(self, task_factory, profile):
        tasks = [
            task_factory(completed=True, archived=True),
            task_factory(),
        ]
        stats = calculate_productivity_stats(tasks, NOW, profile)
        assert stats.total_tasks == 1
        assert stats.completed_tasks == 0

    def test_peak_rate_falls_back_to_creation_time(self, task_factory, profile):
        task = task_factory(completed=True, created_at=NOW.replace(hour=11))
        stats = calculate_productivity_stats([task], NOW, profile)
        assert stats.peak_time_completion_rate == 100

    def test_priority_completion(self, task_factory, profile):
        tasks = [
            task_factory(priority="urgent", completed=True),
            task_factory(priority="urgent"),
            task_factory(priority="low"),
        ]
        stats = calculate_productivity_stats(tasks, NOW, profile)
        assert stats.priority_completion["urgent"] == {"total": 2, "completed": 1}
        assert stats.priority_completion["low"] == {"total": 1, "completed": 0}

    def test_type_distribution(self, task_factory, profile):
        tasks = [
            task_factory(type="idea", completed=True),
            task_factory(type="idea", completed=True),
            task_factory(type="question"),
        ]
        stats = calculate_productivity_stats(tasks, NOW, profile)
        assert stats.type_distribution == {"task": 0, "question": 0, "idea": 2, "link": 0}

    def test_weekly_trend_buckets_by_creation_week(self, task_factory, profile):
        tasks = [
            task_factory(energy="deep", size="M", completed=True, created_at=NOW),
            task_factory(completed=True, created_at=NOW - timedelta(weeks=1)),
            task_factory(completed=True, created_at=NOW - timedelta(weeks=3)),
            task_factory(completed=True, created_at=NOW - timedelta(weeks=5)),
            task_factory(created_at=NOW),
        ]
        trend = calculate_productivity_stats(tasks, NOW, profile).weekly_trend

        assert [w.completed for w in trend] == [1, 0, 1, 1]
        assert [w.deep_work_hours for w in trend] == [0, 0, 0, 2]
        assert trend[-1].week_start == datetime(2025, 3, 10)
        assert trend[0].week_start == datetime(2025, 2, 17)


class TestRealityCheck:
    def test_light_load_passes(self, task_factory):
        tasks = [task_factory(energy="deep", size="S"), task_factory(energy="deep", size="M")]
        assert reality_check(tasks) is None

    def test_heavy_load_warns(self, task_factory):
        tasks = [
            task_factory("A", energy="deep", size="L"),
            task_factory("B", energy="deep", size="M"),
            task_factory("C", energy="deep"),
            task_factory("D", energy="deep", size="S"),
            task_factory("E", energy="admin", size="L"),
        ]
        check = reality_check(tasks)

        assert check is not None
        assert check.total_effort == 3 + 2 + 2 + 1
        assert check.task_titles == ["A", "B", "C"]
        assert check.remaining == 1
        assert "8h" in check.message

    def test_inactive_tasks_do_not_count(self, task_factory):
        tasks = [
            task_factory(energy="deep", size="L", completed=True),
            task_factory(energy="deep", size="L", archived=True),
            task_factory(energy="deep", size="M"),
        ]
        assert reality_check(tasks) is None
