"""Tests for keyword registry and heading classification."""

import pytest

from orgenda.core.keywords import DEFAULT_KEYWORDS, get_actionable_keywords
from orgenda.core.headings import (
    is_heading_line,
    is_actionable_heading,
    strip_heading_prefix,
)


@pytest.fixture
def keywords():
    return ["TODO", "DONE"]


class TestGetActionableKeywords:
    def test_defaults_when_unconfigured(self):
        assert get_actionable_keywords() == ["TODO", "DONE"]
        assert get_actionable_keywords() == list(DEFAULT_KEYWORDS)

    def test_empty_list_falls_back_to_defaults(self):
        assert get_actionable_keywords([]) == ["TODO", "DONE"]
        assert get_actionable_keywords(["", "  "]) == ["TODO", "DONE"]

    def test_keeps_order_strips_and_dedupes(self):
        assert get_actionable_keywords(["WAIT", " TODO ", "WAIT", ""]) == ["WAIT", "TODO"]

    def test_returns_new_list(self):
        result = get_actionable_keywords()
        result.append("X")
        assert get_actionable_keywords() == ["TODO", "DONE"]


class TestIsHeadingLine:
    def test_single_star(self):
        assert is_heading_line("* Heading") is True

    def test_nested_stars(self):
        assert is_heading_line("*** Deep heading") is True

    def test_bold_markup_is_not_heading(self):
        assert is_heading_line("*bold* text") is False

    def test_indented_star_is_not_heading(self):
        assert is_heading_line("  * item") is False

    def test_empty_line(self):
        assert is_heading_line("") is False


class TestIsActionableHeading:
    def test_todo_heading(self, keywords):
        assert is_actionable_heading("* TODO Buy milk", keywords) is True

    def test_done_nested_heading(self, keywords):
        assert is_actionable_heading("** DONE Call mom", keywords) is True

    def test_keyword_glued_to_text(self, keywords):
        assert is_actionable_heading("* TODOING Buy milk", keywords) is False

    def test_keyword_without_trailing_whitespace(self, keywords):
        assert is_actionable_heading("* TODO", keywords) is False

    def test_keyword_later_in_line(self, keywords):
        assert is_actionable_heading("* Buy TODO milk", keywords) is False

    def test_case_sensitive(self, keywords):
        assert is_actionable_heading("* todo Buy milk", keywords) is False

    def test_not_a_heading(self, keywords):
        assert is_actionable_heading("TODO Buy milk", keywords) is False
        assert is_actionable_heading("*TODO Buy milk", keywords) is False

    def test_custom_keywords(self):
        assert is_actionable_heading("* WAITING on review", ["WAITING"]) is True
        assert is_actionable_heading("* TODO on review", ["WAITING"]) is False

    def test_empty_keywords_match_nothing(self):
        assert is_actionable_heading("* TODO Buy milk", []) is False

    def test_keyword_with_regex_metacharacters(self):
        assert is_actionable_heading("* NEXT? maybe", ["NEXT?"]) is True
        assert is_actionable_heading("* NEX maybe", ["NEXT?"]) is False


class TestStripHeadingPrefix:
    def test_strips_stars_and_keyword(self, keywords):
        assert strip_heading_prefix("** TODO Buy milk", keywords) == "Buy milk"

    def test_keeps_inline_timestamp(self, keywords):
        line = "* DONE Call mom <2024-03-11 Mon>"
        assert strip_heading_prefix(line, keywords) == "Call mom <2024-03-11 Mon>"

    def test_plain_heading_strips_stars_only(self, keywords):
        assert strip_heading_prefix("* Notes", keywords) == "Notes"

    def test_non_heading_unchanged(self, keywords):
        assert strip_heading_prefix("just text", keywords) == "just text"
