"""Heading classification for outline lines."""

import re
from functools import lru_cache

_HEADING_PATTERN = re.compile(r"^\*+\s")
_STARS_PATTERN = re.compile(r"^\*+\s+")


@lru_cache(maxsize=32)
def _actionable_pattern(keywords: tuple[str, ...]) -> re.Pattern | None:
    if not keywords:
        return None
    alternatives = "|".join(re.escape(kw) for kw in keywords)
    return re.compile(rf"^\*+\s+({alternatives})\s+")


def is_heading_line(line: str) -> bool:
    """True if the line starts with one or more '*' followed by whitespace."""
    return _HEADING_PATTERN.match(line) is not None


def is_actionable_heading(line: str, keywords: list[str]) -> bool:
    """
    True if the first word after the heading stars is a registered keyword.

    The keyword must be followed by whitespace, so "* TODOING" does not
    qualify for "TODO". An empty keyword list matches nothing.
    """
    pattern = _actionable_pattern(tuple(keywords))
    if pattern is None:
        return False
    return pattern.match(line) is not None


def strip_heading_prefix(line: str, keywords: list[str]) -> str:
    """Remove the leading stars and keyword from a heading for display."""
    pattern = _actionable_pattern(tuple(keywords))
    if pattern is not None:
        match = pattern.match(line)
        if match:
            return line[match.end() :]
    return _STARS_PATTERN.sub("", line, count=1)
