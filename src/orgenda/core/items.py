"""Agenda item collection - pure, operates on already-read text."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable

from .headings import is_actionable_heading
from .keywords import get_actionable_keywords
from .timestamps import extract_timestamps


class Role(Enum):
    """Which timestamp of an item a view entry represents."""

    PLAIN = "PLAIN"
    SCHEDULED = "SCHEDULED"
    DEADLINE = "DEADLINE"


@dataclass(frozen=True)
class AgendaItem:
    """An actionable heading found in an outline file."""

    source_id: str
    line_number: int
    text: str
    plain_date: date | None = None
    scheduled_date: date | None = None
    deadline_date: date | None = None

    @property
    def is_undated(self) -> bool:
        return not self.dates

    @property
    def dates(self) -> list[tuple[Role, date]]:
        """Set dates in PLAIN, SCHEDULED, DEADLINE order."""
        candidates = [
            (Role.PLAIN, self.plain_date),
            (Role.SCHEDULED, self.scheduled_date),
            (Role.DEADLINE, self.deadline_date),
        ]
        return [(role, d) for role, d in candidates if d is not None]

    @property
    def location_label(self) -> str:
        return f"{self.source_id}:{self.line_number}"


def split_lines(raw_text: str) -> list[str]:
    """Split on newlines, tolerating CRLF line endings."""
    return [line[:-1] if line.endswith("\r") else line for line in raw_text.split("\n")]


def collect(
    source_id: str,
    raw_text: str,
    keywords: list[str] | None = None,
) -> list[AgendaItem]:
    """
    Collect actionable headings from one file's text, in line order.

    Pure function - no I/O.
    """
    if not raw_text:
        return []

    keywords = keywords if keywords is not None else get_actionable_keywords()
    lines = split_lines(raw_text)

    items = []
    for index, line in enumerate(lines):
        if not is_actionable_heading(line, keywords):
            continue
        stamps = extract_timestamps(lines, index)
        items.append(
            AgendaItem(
                source_id=source_id,
                line_number=index + 1,
                text=line,
                plain_date=stamps.plain,
                scheduled_date=stamps.scheduled,
                deadline_date=stamps.deadline,
            )
        )
    return items


def collect_all(
    sources: Iterable[tuple[str, str]],
    keywords: list[str] | None = None,
) -> list[AgendaItem]:
    """Collect items across (source_id, text) pairs, keeping enumeration order."""
    items = []
    for source_id, raw_text in sources:
        items.extend(collect(source_id, raw_text, keywords))
    return items
