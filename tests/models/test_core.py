"""Tests for the task and note models."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from tempo_cli.models import DailyNote, Subtask, Task, TaskCreate, TaskFilters, TaskUpdate
from tempo_cli.models.core import normalize_tags

NOW = datetime(2025, 3, 10, 10, 0)


def _task(**fields) -> Task:
    fields.setdefault("id", "t1")
    fields.setdefault("title", "Task")
    fields.setdefault("created_at", NOW)
    return Task(**fields)


class TestNormalizeTags:
    def test_lowercases_and_dedupes(self):
        assert normalize_tags(["Work", "work", " Home ", ""]) == ["work", "home"]

    def test_task_tags_are_normalized(self):
        assert _task(tags=["ProjetX", "projetx"]).tags == ["projetx"]

    def test_update_leaves_none_alone(self):
        assert TaskUpdate().tags is None


class TestTask:
    def test_defaults(self):
        task = _task()
        assert task.type == "task"
        assert task.priority == "medium"
        assert task.is_active
        assert task.priority_level == 2

    def test_archived_requires_timestamp(self):
        with pytest.raises(ValidationError):
            _task(archived=True)

    def test_archived_at_requires_archived(self):
        with pytest.raises(ValidationError):
            _task(archived_at=NOW)

    def test_completed_task_is_not_active(self):
        assert not _task(completed=True).is_active

    def test_archived_task_is_not_active(self):
        assert not _task(archived=True, archived_at=NOW).is_active

    def test_invalid_energy_rejected(self):
        with pytest.raises(ValidationError):
            _task(energy="sleepy")

    def test_all_subtasks_completed(self):
        done = Subtask(id="s1", text="a", completed=True)
        open_ = Subtask(id="s2", text="b")
        assert _task(subtasks=[done]).all_subtasks_completed
        assert not _task(subtasks=[done, open_]).all_subtasks_completed

    def test_no_subtasks_is_not_all_completed(self):
        assert not _task().all_subtasks_completed

    def test_json_round_trip_keeps_datetimes(self):
        task = _task(due_date=datetime(2025, 3, 11, 23, 59, 59), tags=["a"])
        restored = Task.model_validate(task.model_dump(mode="json"))
        assert restored == task


class TestTaskCreate:
    def test_subtasks_are_labels(self):
        data = TaskCreate(title="x", subtasks=["a", "b"])
        assert data.subtasks == ["a", "b"]

    def test_title_required(self):
        with pytest.raises(ValidationError):
            TaskCreate()


class TestTaskUpdate:
    def test_only_set_fields_are_dumped(self):
        update = TaskUpdate(completed=False, completed_at=None)
        assert update.model_dump(exclude_unset=True) == {
            "completed": False,
            "completed_at": None,
        }


class TestTaskFilters:
    def test_defaults_hide_archived_only(self):
        filters = TaskFilters()
        assert filters.matches(_task(completed=True))
        assert not filters.matches(_task(archived=True, archived_at=NOW))

    def test_tag_filter_is_case_insensitive(self):
        assert TaskFilters(tag="Work").matches(_task(tags=["work"]))
        assert not TaskFilters(tag="home").matches(_task(tags=["work"]))

    def test_energy_filter(self):
        assert TaskFilters(energy="deep").matches(_task(energy="deep"))
        assert not TaskFilters(energy="deep").matches(_task(energy="light"))


class TestDailyNote:
    def test_date_format_enforced(self):
        with pytest.raises(ValidationError):
            DailyNote(date="10/03/2025")

    def test_empty_note(self):
        note = DailyNote(date="2025-03-10")
        assert note.intention is None
        assert note.energy_checks == []
