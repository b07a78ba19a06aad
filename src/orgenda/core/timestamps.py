"""Timestamp extraction from a heading's body - no I/O dependencies.

Recognised forms (org mode active timestamps):

    <2024-03-10>
    <2024-03-10 Sun>
    <2024-03-10 Sun 14:30>

optionally prefixed by SCHEDULED: or DEADLINE:. Only the calendar date is
kept; weekday and time of day are matched but discarded.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta

from .headings import is_heading_line

logger = logging.getLogger(__name__)

_TIMESTAMP = r"<(\d{4})-(\d{1,2})-(\d{1,2})(?:\s+([^\s\d>]+))?(?:\s+(\d{1,2}:\d{1,2}))?>"

_TIMESTAMP_PATTERN = re.compile(_TIMESTAMP)
_SCHEDULED_PATTERN = re.compile(rf"SCHEDULED:\s*{_TIMESTAMP}", re.IGNORECASE)
_DEADLINE_PATTERN = re.compile(rf"DEADLINE:\s*{_TIMESTAMP}", re.IGNORECASE)
_MARKER_PATTERN = re.compile(r"(?:SCHEDULED|DEADLINE):", re.IGNORECASE)

# How far back a SCHEDULED:/DEADLINE: marker claims a timestamp
_MARKER_WINDOW = 50


@dataclass(frozen=True)
class Timestamps:
    """Dates found in a heading's body."""

    plain: date | None = None
    scheduled: date | None = None
    deadline: date | None = None

    @property
    def is_empty(self) -> bool:
        return self.plain is None and self.scheduled is None and self.deadline is None


def make_date(year: int, month: int, day: int) -> date | None:
    """
    Build a date without validating month or day.

    Out-of-range values roll over into neighbouring months, so 2024-02-30
    becomes 2024-03-01 and month 13 becomes January of the next year.
    Returns None only when the result falls outside the supported year range.
    """
    y, m = divmod(year * 12 + (month - 1), 12)
    try:
        return date(y, m + 1, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        logger.debug(f"Ignoring unrepresentable timestamp {year:04d}-{month:02d}-{day:02d}")
        return None


def _date_from_match(match: re.Match) -> date | None:
    year, month, day = (int(g) for g in match.group(1, 2, 3))
    return make_date(year, month, day)


def find_plain_timestamp(line: str) -> date | None:
    """
    First bracketed timestamp on the line not claimed by a marker.

    A timestamp is claimed when SCHEDULED: or DEADLINE: appears within the
    preceding _MARKER_WINDOW characters.
    """
    for match in _TIMESTAMP_PATTERN.finditer(line):
        window = line[max(0, match.start() - _MARKER_WINDOW) : match.start()]
        if _MARKER_PATTERN.search(window):
            continue
        return _date_from_match(match)
    return None


def heading_body(lines: list[str], index: int) -> list[str]:
    """The heading line plus every following line up to the next heading."""
    body = [lines[index]]
    for line in lines[index + 1 :]:
        if is_heading_line(line):
            break
        body.append(line)
    return body


def extract_timestamps(lines: list[str], index: int) -> Timestamps:
    """
    Extract plain, scheduled and deadline dates for the heading at index.

    Each line of the body is tested against all three patterns
    independently; a later match overwrites an earlier one.
    Pure function - never raises for malformed dates.
    """
    plain = scheduled = deadline = None

    for line in heading_body(lines, index):
        match = _SCHEDULED_PATTERN.search(line)
        if match:
            scheduled = _date_from_match(match) or scheduled

        match = _DEADLINE_PATTERN.search(line)
        if match:
            deadline = _date_from_match(match) or deadline

        found = find_plain_timestamp(line)
        if found:
            plain = found

    return Timestamps(plain=plain, scheduled=scheduled, deadline=deadline)
