"""Local natural language parsing for task entries.

Turns a raw line such as ``"Réunion Jean demain #ProjetX !! @S 🧠"`` into a
structured partial task: type, priority, energy, size, tags, due date and
subtasks, plus a confidence value telling the caller whether the silent
defaults are trustworthy or the user should be asked.

Keyword vocabularies are static ordered tables. Categories are checked in
table order and the first hit wins, so reordering a table changes results.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import NamedTuple, Protocol

import dateparser

from tempo_cli.models import TaskCreate
from tempo_cli.utils.logger import get_logger

CONFIDENCE_BASE = 0.5
CONFIDENCE_THRESHOLD = 0.8

TYPE_PREFIXES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("task", ("tâche", "tache", "task", "todo", "à faire", "note", "mémo", "rappel")),
    ("idea", ("idée", "idee", "idea", "suggestion")),
    ("question", ("question",)),
    ("link", ("lien", "link", "url")),
)

# "low" comes first: its phrases are negations of the urgent/high words.
PRIORITY_PATTERNS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "low",
        (
            "peu important",
            "peu importante",
            "pas urgent",
            "pas urgente",
            "basse priorité",
            "bas",
            "basse",
            "quand possible",
            "low priority",
        ),
    ),
    (
        "urgent",
        (
            "très important",
            "urgent",
            "urgente",
            "asap",
            "critique",
            "immédiat",
            "immédiate",
            "tout de suite",
        ),
    ),
    (
        "high",
        (
            "important",
            "importante",
            "prioritaire",
            "essentiel",
            "essentielle",
            "rapidement",
            "high priority",
        ),
    ),
    ("medium", ("priorité moyenne", "priorité normale", "normal", "normale")),
)

ENERGY_PATTERNS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "deep",
        (
            "🧠",
            "deepwork",
            "deep work",
            "concentration",
            "focus",
            "complexe",
            "réfléchir",
            "réflexion",
            "analyse",
            "analyser",
        ),
    ),
    (
        "creative",
        ("✨", "créatif", "créative", "creative", "création", "design", "brainstorm", "imaginer"),
    ),
    (
        "learning",
        (
            "📚",
            "apprentissage",
            "learning",
            "apprendre",
            "étude",
            "étudier",
            "formation",
            "cours",
            "lire",
        ),
    ),
    (
        "admin",
        (
            "💬",
            "admin",
            "administratif",
            "email",
            "emails",
            "réunion",
            "meeting",
            "appel",
            "organiser",
        ),
    ),
    ("light", ("🔧", "léger", "légère", "light", "facile", "rapide", "simple", "vite")),
)

SIZE_PATTERNS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("S", ("petit", "petite", "quick", "5 min", "10 min", "court", "courte", "rapide")),
    ("M", ("moyen", "moyenne", "medium", "30 min", "1h", "1 heure")),
    (
        "L",
        ("grand", "grande", "gros", "grosse", "long", "longue", "large", "plusieurs heures", "2h", "3h"),
    ),
)

# (regex, day offset); a None offset means "read it from group 1".
DATE_PATTERNS: tuple[tuple[str, int | None], ...] = (
    (r"apr[èe]s[- ]?demain", 2),
    (r"day after tomorrow", 2),
    (r"aujourd['’]?hui", 0),
    (r"today", 0),
    (r"demain", 1),
    (r"tomorrow", 1),
    (r"dans (\d+) jours?", None),
    (r"in (\d+) days?", None),
    (r"cette semaine", 3),
    (r"this week", 3),
    (r"semaine prochaine", 7),
    (r"next week", 7),
)

_MONTHS = (
    r"(?:janv(?:ier)?|jan(?:uary)?|f[ée]vr(?:ier)?|feb(?:ruary)?|mars|mar(?:ch)?"
    r"|avr(?:il)?|apr(?:il)?|mai|may|juin|june?|juil(?:let)?|july?|ao[uû]t|aug(?:ust)?"
    r"|sept(?:embre|ember)?|sep|oct(?:obre|ober)?|nov(?:embre|ember)?"
    r"|d[ée]c(?:embre)?|dec(?:ember)?)\.?"
)
_WEEKDAYS_EN = r"(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)"
_WEEKDAYS_FR = r"(?:lundi|mardi|mercredi|jeudi|vendredi|samedi|dimanche)"
_ORDINAL = r"(?:er|st|nd|rd|th)?"

# Date-shaped fragments handed to dateparser. Bare names, single numbers
# and times of day are never dates on their own.
DATE_FRAGMENTS = re.compile(
    r"(?<![#\w])(?:"
    rf"next (?:{_WEEKDAYS_EN}|month)"
    rf"|{_WEEKDAYS_FR} prochain"
    r"|mois prochain"
    r"|in \d+ (?:weeks?|months?)"
    r"|dans \d+ (?:semaines?|mois)"
    rf"|(?:le )?\d{{1,2}}{_ORDINAL} {_MONTHS}(?: \d{{4}})?"
    rf"|{_MONTHS} \d{{1,2}}{_ORDINAL}(?:,? \d{{4}})?"
    r"|\d{1,2}/\d{1,2}(?:/\d{2,4})?"
    r")(?!\w)",
    re.IGNORECASE,
)

LEADING_ARTICLE = re.compile(r"^le ", re.IGNORECASE)

PRIORITY_SHORTHAND = re.compile(r"!+")
SIZE_SHORTHAND = re.compile(r"(?<!\w)@([SML])(?!\w)", re.IGNORECASE)
TAG_PATTERN = re.compile(r"#(\w+)")
BULLET_LINE = re.compile(r"^\s*[-*•]\s*(?:\[[ xX]\]\s*)?(.+?)\s*$")
NUMBERED_LINE = re.compile(r"^\s*\d+[.)]\s*(.+?)\s*$")


def _keyword_regex(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![#\w]){re.escape(keyword)}(?!\w)", re.IGNORECASE)


def _end_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=23, minute=59, second=59, microsecond=999000)


class DateMatch(NamedTuple):
    """A date phrase found in text and the moment it resolves to."""

    text: str
    value: datetime


class DateResolver(Protocol):
    """Natural-language date extraction capability."""

    def resolve_dates(self, text: str, reference: datetime) -> list[DateMatch]:
        """Return the date phrases in ``text``, resolved against ``reference``."""
        ...


PeopleExtractor = Callable[[str], list[str]]


class DateparserResolver:
    """DateResolver backed by the ``dateparser`` library.

    Only date-shaped fragments of the entry are passed to dateparser, so
    ordinary words such as "Sam" or "mars" in a title are left alone.
    """

    def __init__(self, languages: list[str] | None = None):
        self.languages = languages or ["fr", "en"]

    def resolve_dates(self, text: str, reference: datetime) -> list[DateMatch]:
        matches = []
        for fragment in DATE_FRAGMENTS.finditer(text):
            phrase = fragment.group(0)
            value = dateparser.parse(
                LEADING_ARTICLE.sub("", phrase),
                languages=self.languages,
                settings={
                    "PREFER_DATES_FROM": "future",
                    "RELATIVE_BASE": reference,
                    "DATE_ORDER": "DMY",
                },
            )
            if value is not None:
                matches.append(DateMatch(phrase, value))
        return matches


@dataclass
class ParsedSubtask:
    """A checklist line found in the input; always starts unchecked."""

    text: str


@dataclass
class ParseResult:
    """Structured output of TaskParser.parse."""

    clean_text: str
    type: str = "task"
    priority: str | None = None
    size: str | None = None
    energy: str | None = None
    tags: list[str] = field(default_factory=list)
    due_date: datetime | None = None
    confidence: float = CONFIDENCE_BASE
    subtasks: list[ParsedSubtask] = field(default_factory=list)
    people: list[str] = field(default_factory=list)

    @property
    def needs_review(self) -> bool:
        """Low confidence: offer quick pickers instead of auto-accepting."""
        return self.confidence < CONFIDENCE_THRESHOLD

    def to_task_create(self) -> TaskCreate:
        return TaskCreate(
            title=self.clean_text,
            type=self.type,
            priority=self.priority or "medium",
            size=self.size,
            energy=self.energy,
            tags=self.tags,
            due_date=self.due_date,
            subtasks=[st.text for st in self.subtasks],
        )


class TaskParser:
    """Parse natural language task entries locally.

    Args:
        date_resolver: Optional natural-language date capability, consulted
            only when no built-in date phrase matches.
        people_extractor: Optional callable returning person names.
    """

    def __init__(
        self,
        date_resolver: DateResolver | None = None,
        people_extractor: PeopleExtractor | None = None,
    ):
        self.date_resolver = date_resolver
        self.people_extractor = people_extractor

    def parse(self, text: str, now: datetime) -> ParseResult:
        """Parse ``text`` relative to ``now``.

        Each step removes what it matched from the working text before the
        next step runs; whatever is left becomes the clean title.
        """
        text = text or ""
        result = ParseResult(clean_text="")
        confidence = CONFIDENCE_BASE
        working = text

        working, task_type = self._extract_type(working)
        if task_type is not None:
            result.type = task_type
            confidence += 0.1

        match = PRIORITY_SHORTHAND.search(working)
        if match:
            marks = len(match.group(0))
            result.priority = "low" if marks == 1 else "high" if marks == 2 else "urgent"
            working = PRIORITY_SHORTHAND.sub(" ", working)
            confidence += 0.2
        else:
            working, result.priority = self._match_vocabulary(working, PRIORITY_PATTERNS)
            if result.priority:
                confidence += 0.15

        working, result.energy = self._match_vocabulary(working, ENERGY_PATTERNS)
        if result.energy:
            confidence += 0.15

        match = SIZE_SHORTHAND.search(working)
        if match:
            result.size = match.group(1).upper()
            working = SIZE_SHORTHAND.sub(" ", working)
            confidence += 0.15
        else:
            working, result.size = self._match_vocabulary(working, SIZE_PATTERNS)
            if result.size:
                confidence += 0.1

        tags = TAG_PATTERN.findall(working)
        if tags:
            result.tags = list(dict.fromkeys(tags))
            working = TAG_PATTERN.sub(" ", working)
            confidence += 0.1

        working, result.due_date = self._extract_due_date(working, now)
        if result.due_date is not None:
            confidence += 0.1

        working, result.subtasks = self._extract_subtasks(working)

        if self.people_extractor is not None:
            result.people = list(self.people_extractor(text))

        result.clean_text = " ".join(working.split())
        result.confidence = round(min(confidence, 1.0), 2)
        return result

    def _extract_type(self, text: str) -> tuple[str, str | None]:
        for task_type, prefixes in TYPE_PREFIXES:
            for prefix in prefixes:
                pattern = re.compile(
                    rf"^\s*{re.escape(prefix)}(?!\w)\s*:?\s*", re.IGNORECASE
                )
                match = pattern.match(text)
                if match:
                    return text[match.end():], task_type
        return text, None

    def _match_vocabulary(
        self, text: str, table: tuple[tuple[str, tuple[str, ...]], ...]
    ) -> tuple[str, str | None]:
        for category, keywords in table:
            for keyword in keywords:
                pattern = _keyword_regex(keyword)
                if pattern.search(text):
                    return pattern.sub(" ", text), category
        return text, None

    def _extract_due_date(self, text: str, now: datetime) -> tuple[str, datetime | None]:
        for regex, offset in DATE_PATTERNS:
            pattern = re.compile(rf"(?<![#\w]){regex}(?!\w)", re.IGNORECASE)
            match = pattern.search(text)
            if match:
                try:
                    days = offset if offset is not None else int(match.group(1))
                    due = _end_of_day(now + timedelta(days=days))
                except (OverflowError, ValueError):
                    continue
                return pattern.sub(" ", text), due

        if self.date_resolver is not None:
            try:
                matches = self.date_resolver.resolve_dates(text, now)
            except Exception as e:
                get_logger(__name__).warning("date resolver failed on %r: %s", text, e)
                matches = []
            if matches:
                phrase, value = matches[0]
                return text.replace(phrase, " "), _end_of_day(value)

        return text, None

    def _extract_subtasks(self, text: str) -> tuple[str, list[ParsedSubtask]]:
        lines = text.splitlines()
        head_index = next((i for i, line in enumerate(lines) if line.strip()), None)
        if head_index is None:
            return text, []

        kept = lines[: head_index + 1]
        rest = lines[head_index + 1 :]

        subtasks: list[ParsedSubtask] = []
        remaining: list[str] = []
        for line in rest:
            match = BULLET_LINE.match(line)
            if match:
                subtasks.append(ParsedSubtask(text=match.group(1)))
            else:
                remaining.append(line)

        if not subtasks:
            remaining = []
            for line in rest:
                match = NUMBERED_LINE.match(line)
                if match:
                    subtasks.append(ParsedSubtask(text=match.group(1)))
                else:
                    remaining.append(line)

        return "\n".join(kept + remaining), subtasks


def parse_natural_language(
    text: str,
    now: datetime,
    date_resolver: DateResolver | None = None,
    people_extractor: PeopleExtractor | None = None,
) -> ParseResult:
    """Convenience function to parse a task entry.

    Example:
        >>> result = parse_natural_language("Réunion Jean demain #ProjetX !! @S 🧠", now)
        >>> result.clean_text, result.priority, result.size, result.energy
        ('Réunion Jean', 'high', 'S', 'deep')
    """
    parser = TaskParser(date_resolver=date_resolver, people_extractor=people_extractor)
    return parser.parse(text, now)
