"""Tests for the lunr-backed task and note search indexes."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from tempo_cli.models import DailyNote, Subtask
from tempo_cli.services.search_service import (
    NoteSearchIndex,
    TaskSearchIndex,
    expand_query,
)


@pytest.fixture()
def tasks(task_factory):
    return [
        task_factory("Réunion équipe", tags=["work"]),
        task_factory("Écrire le rapport client", description="version finale"),
        task_factory(
            "Préparer la démo",
            subtasks=[Subtask(id="s1", text="slides"), Subtask(id="s2", text="script")],
        ),
        task_factory("Courses", description="budget de la semaine"),
        task_factory("Budget 2025", tags=["finance"]),
    ]


@pytest.fixture()
def index(tasks):
    index = TaskSearchIndex()
    index.build_index(tasks)
    return index


def _titles(results) -> list[str]:
    return [r.item.title for r in results]


def test_expand_query():
    assert expand_query("foo  bar") == "foo* foo~1 bar* bar~1"


class TestTaskSearch:
    def test_accent_insensitive_through_fuzzy_match(self, index):
        assert "Réunion équipe" in _titles(index.search("reunion"))

    def test_prefix_match(self, index):
        assert _titles(index.search("rapp")) == ["Écrire le rapport client"]

    def test_single_typo(self, index):
        assert _titles(index.search("rapprt")) == ["Écrire le rapport client"]

    def test_subtasks_are_searchable(self, index):
        results = index.search("slides")
        assert _titles(results) == ["Préparer la démo"]
        assert results[0].fields == ["searchContent"]

    def test_tags_are_searchable(self, index):
        assert _titles(index.search("finance")) == ["Budget 2025"]

    def test_title_outranks_description(self, index):
        titles = _titles(index.search("budget"))
        assert titles == ["Budget 2025", "Courses"]

    def test_results_sorted_by_score(self, index):
        scores = [r.score for r in index.search("budget")]
        assert scores == sorted(scores, reverse=True)

    def test_match_metadata(self, index):
        result = index.search("finance")[0]
        assert "finance" in result.matches
        assert result.fields == ["tags"]

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query(self, index, query):
        assert index.search(query) == []

    def test_malformed_query_returns_nothing(self, index):
        assert index.search("nosuchfield:budget") == []

    def test_no_match(self, index):
        assert index.search("zzzzzzzz") == []

    def test_quick_search_limit(self, index):
        items = index.quick_search("budget", limit=1)
        assert [item.title for item in items] == ["Budget 2025"]

    def test_rebuild_replaces_content(self, index, task_factory):
        index.build_index([task_factory("Nouvelle tâche")])
        assert len(index) == 1
        assert index.search("budget") == []
        assert _titles(index.search("nouvelle")) == ["Nouvelle tâche"]


class TestEmptyAndDegraded:
    def test_empty_collection(self):
        index = TaskSearchIndex()
        index.build_index([])
        assert index.available
        assert len(index) == 0
        assert index.search("anything") == []

    def test_build_failure_disables_search(self, tasks):
        index = TaskSearchIndex()
        with patch(
            "tempo_cli.services.search_service.lunr", side_effect=RuntimeError("broken")
        ):
            index.build_index(tasks)

        assert not index.available
        assert index.degraded_reason == "broken"
        assert index.search("budget") == []

    def test_recovers_after_successful_rebuild(self, tasks):
        index = TaskSearchIndex()
        with patch(
            "tempo_cli.services.search_service.lunr", side_effect=RuntimeError("broken")
        ):
            index.build_index(tasks)
        index.build_index(tasks)

        assert index.available
        assert index.degraded_reason is None
        assert index.search("budget")


class TestNoteSearch:
    @pytest.fixture()
    def notes(self):
        return [
            DailyNote(date="2025-03-10", intention="Journée calme", notebook="lecture"),
            DailyNote(date="2025-03-11", intention="Sprint", notebook="journée chargée, calme le soir"),
        ]

    def test_intention_outranks_notebook(self, notes):
        index = NoteSearchIndex()
        index.build_index(notes)
        results = index.search("calme")
        assert [r.item.date for r in results] == ["2025-03-10", "2025-03-11"]

    def test_notebook_only(self, notes):
        index = NoteSearchIndex()
        index.build_index(notes)
        results = index.search("lecture")
        assert [r.item.date for r in results] == ["2025-03-10"]
        assert results[0].fields == ["notebook"]
