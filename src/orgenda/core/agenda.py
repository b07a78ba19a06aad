"""Pure agenda rendering logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date

from .headings import strip_heading_prefix
from .items import AgendaItem, Role
from .keywords import get_actionable_keywords

AGENDA_HEADER = "Agenda:\n"
UNSCHEDULED_HEADER = "\n=== Unscheduled ===\n"

LOCATION_WIDTH = 40
ROLE_WIDTH = 10


@dataclass(frozen=True)
class _ViewEntry:
    """One rendered line of the dated section."""

    location_label: str
    display_text: str
    when: date
    role: Role


def partition_items(items: list[AgendaItem]) -> tuple[list[AgendaItem], list[AgendaItem]]:
    """
    Split items into dated and unscheduled, keeping input order.

    Returns: (dated, unscheduled)
    """
    dated = [item for item in items if not item.is_undated]
    unscheduled = [item for item in items if item.is_undated]
    return dated, unscheduled


def expand_entries(items: list[AgendaItem], keywords: list[str]) -> list[_ViewEntry]:
    """One entry per set date on each item; undated items contribute nothing."""
    entries = []
    for item in items:
        display_text = strip_heading_prefix(item.text, keywords)
        for role, when in item.dates:
            entries.append(
                _ViewEntry(
                    location_label=item.location_label,
                    display_text=display_text,
                    when=when,
                    role=role,
                )
            )
    return entries


def sort_entries(entries: list[_ViewEntry]) -> list[_ViewEntry]:
    """Stable sort by date; entries on the same day keep collection order."""
    return sorted(entries, key=lambda e: e.when)


def format_location(label: str) -> str:
    """Left-justify a location label with dot filler."""
    return f"{label} ".ljust(LOCATION_WIDTH, ".")


def format_week_header(when: date) -> str:
    year, week, _ = when.isocalendar()
    return f"\n--- Week {week:02d}, {year} ---\n"


def format_day_header(when: date) -> str:
    return f"  {when:%A}, {when.day} {when:%B} {when.year}\n"


def render(items: list[AgendaItem], keywords: list[str] | None = None) -> str:
    """
    Render the composite agenda document.

    Dated entries are sorted chronologically and grouped under ISO week and
    day headers; undated items follow under the unscheduled separator in
    collection order.
    Pure function - no I/O.
    """
    keywords = keywords if keywords is not None else get_actionable_keywords()
    dated, unscheduled = partition_items(items)

    parts = [AGENDA_HEADER]

    last_week = None
    last_date = None
    for entry in sort_entries(expand_entries(dated, keywords)):
        year, week, _ = entry.when.isocalendar()
        if (year, week) != last_week:
            parts.append(format_week_header(entry.when))
            last_week = (year, week)
        if entry.when != last_date:
            parts.append(format_day_header(entry.when))
            last_date = entry.when

        location = format_location(entry.location_label)
        parts.append(f"{location} {entry.role.value:<{ROLE_WIDTH}}{entry.display_text}\n")

    parts.append(UNSCHEDULED_HEADER)
    for item in unscheduled:
        location = format_location(item.location_label)
        parts.append(f"{location} {strip_heading_prefix(item.text, keywords)}\n")

    return "".join(parts)
