"""Functional core - pure agenda logic with no I/O."""

from .keywords import DEFAULT_KEYWORDS, get_actionable_keywords
from .headings import is_heading_line, is_actionable_heading, strip_heading_prefix
from .timestamps import Timestamps, extract_timestamps, heading_body
from .items import AgendaItem, Role, collect, collect_all
from .agenda import render, partition_items

__all__ = [
    # Keywords
    "DEFAULT_KEYWORDS",
    "get_actionable_keywords",
    # Headings
    "is_heading_line",
    "is_actionable_heading",
    "strip_heading_prefix",
    # Timestamps
    "Timestamps",
    "extract_timestamps",
    "heading_body",
    # Items
    "AgendaItem",
    "Role",
    "collect",
    "collect_all",
    # Rendering
    "render",
    "partition_items",
]
