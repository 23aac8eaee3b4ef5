"""Full-text search over tasks and daily notes.

Both indexes are built with ``lunr`` (the Python port of lunr.js) with the
stemmer taken out of the indexing and search pipelines: entries are mostly
French, and an English stemmer mangles them. Query terms are expanded to
``term* term~1`` so partial words and single typos still match.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from lunr import get_default_builder, lunr
from lunr.stemmer import stemmer

from tempo_cli.models import DailyNote, Task
from tempo_cli.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

TASK_FIELDS = (
    {"field_name": "title", "boost": 10},
    {"field_name": "description", "boost": 5},
    {"field_name": "tags", "boost": 7},
    {"field_name": "searchContent", "boost": 3},
)

NOTE_FIELDS = (
    {"field_name": "intention", "boost": 10},
    {"field_name": "notebook", "boost": 8},
)


@dataclass
class SearchResult(Generic[T]):
    """A ranked hit.

    Attributes:
        item: The matching task or note
        score: Relevance score, higher is better
        matches: Index terms that matched
        fields: Fields those terms were found in
    """

    item: T
    score: float
    matches: list[str] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)


def expand_query(query: str) -> str:
    """Turn ``"foo bar"`` into ``"foo* foo~1 bar* bar~1"``."""
    return " ".join(f"{term}* {term}~1" for term in query.split())


class _LunrIndex(Generic[T]):
    """Shared build/search logic; subclasses say what to index."""

    ref_field = "id"
    fields: tuple[dict[str, Any], ...] = ()

    def __init__(self):
        self._index = None
        self._items: dict[str, T] = {}
        self.available = True
        self.degraded_reason: str | None = None

    def _ref(self, item: T) -> str:
        raise NotImplementedError

    def _document(self, item: T) -> dict[str, str]:
        raise NotImplementedError

    def build_index(self, items: Iterable[T]) -> None:
        """Replace the index with one built from ``items``.

        The new index only becomes visible once it is complete. If building
        fails the index is left empty and search is reported as disabled.
        """
        items = list(items)
        by_ref = {self._ref(item): item for item in items}
        if not items:
            self._index, self._items = None, {}
            self.available, self.degraded_reason = True, None
            return

        builder = get_default_builder()
        builder.pipeline.remove(stemmer)
        builder.search_pipeline.remove(stemmer)
        try:
            index = lunr(
                ref=self.ref_field,
                fields=self.fields,
                documents=[self._document(item) for item in items],
                builder=builder,
            )
        except Exception as e:
            logger.error("Search index build failed over %d items: %s", len(items), e)
            self._index, self._items = None, {}
            self.available, self.degraded_reason = False, str(e)
            return

        self._index, self._items = index, by_ref
        self.available, self.degraded_reason = True, None
        logger.debug("Search index built over %d items", len(items))

    def search(self, query: str) -> list[SearchResult[T]]:
        """Ranked results for ``query``; empty for blank or malformed queries."""
        if self._index is None or not query or not query.strip():
            return []

        try:
            hits = self._index.search(expand_query(query))
        except Exception as e:
            logger.debug("Search query %r failed: %s", query, e)
            return []

        results = []
        for hit in hits:
            item = self._items.get(hit["ref"])
            if item is None:
                continue
            metadata = hit["match_data"].metadata
            found_in = {name for term_fields in metadata.values() for name in term_fields}
            results.append(
                SearchResult(
                    item=item,
                    score=hit["score"],
                    matches=list(metadata),
                    fields=sorted(found_in),
                )
            )
        results.sort(key=lambda r: r.score, reverse=True)
        return results

    def quick_search(self, query: str, limit: int = 10) -> list[T]:
        """Only the top ``limit`` items, without scores."""
        return [result.item for result in self.search(query)[:limit]]

    def __len__(self) -> int:
        return len(self._items)


class TaskSearchIndex(_LunrIndex[Task]):
    """Search over tasks: title, description, tags and content/subtasks."""

    ref_field = "id"
    fields = TASK_FIELDS

    def _ref(self, item: Task) -> str:
        return item.id

    def _document(self, item: Task) -> dict[str, str]:
        search_content = " ".join(
            [item.content or "", " ".join(st.text for st in item.subtasks)]
        )
        return {
            "id": item.id,
            "title": item.title,
            "description": item.description or "",
            "tags": " ".join(item.tags),
            "searchContent": search_content,
        }


class NoteSearchIndex(_LunrIndex[DailyNote]):
    """Search over daily notes: intention and notebook."""

    ref_field = "date"
    fields = NOTE_FIELDS

    def _ref(self, item: DailyNote) -> str:
        return item.date

    def _document(self, item: DailyNote) -> dict[str, str]:
        return {
            "date": item.date,
            "intention": item.intention or "",
            "notebook": item.notebook or "",
        }
