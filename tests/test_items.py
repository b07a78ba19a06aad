"""Tests for agenda item collection."""

from datetime import date

import pytest

from orgenda.core.items import AgendaItem, Role, collect, collect_all, split_lines

SAMPLE = """#+TITLE: Errands
* TODO Buy milk
  SCHEDULED: <2024-03-10 Sun>
* DONE Call mom <2024-03-11 Mon>
* Notes
  Nothing actionable <2024-03-12>
* TODO Fix bike
** TODO Order parts
   DEADLINE: <2024-03-20 Wed> <2024-03-18 Mon>
   Pickup on <2024-03-19 Tue>
"""


@pytest.fixture
def items():
    return collect("errands.org", SAMPLE)


class TestAgendaItem:
    def test_undated(self):
        item = AgendaItem(source_id="a.org", line_number=1, text="* TODO x")
        assert item.is_undated is True
        assert item.dates == []

    def test_dates_in_role_order(self):
        item = AgendaItem(
            source_id="a.org",
            line_number=3,
            text="* TODO x",
            plain_date=date(2024, 3, 3),
            scheduled_date=date(2024, 3, 1),
            deadline_date=date(2024, 3, 2),
        )
        assert item.is_undated is False
        assert item.dates == [
            (Role.PLAIN, date(2024, 3, 3)),
            (Role.SCHEDULED, date(2024, 3, 1)),
            (Role.DEADLINE, date(2024, 3, 2)),
        ]

    def test_location_label(self):
        item = AgendaItem(source_id="sub/a.org", line_number=12, text="* TODO x")
        assert item.location_label == "sub/a.org:12"


class TestCollect:
    def test_only_actionable_headings(self, items):
        assert [i.text for i in items] == [
            "* TODO Buy milk",
            "* DONE Call mom <2024-03-11 Mon>",
            "* TODO Fix bike",
            "** TODO Order parts",
        ]

    def test_line_numbers_are_one_based(self, items):
        assert [i.line_number for i in items] == [2, 4, 7, 8]

    def test_source_id_carried(self, items):
        assert all(i.source_id == "errands.org" for i in items)

    def test_dates_extracted(self, items):
        milk, mom, bike, parts = items
        assert milk.scheduled_date == date(2024, 3, 10)
        assert milk.plain_date is None
        assert mom.plain_date == date(2024, 3, 11)
        assert bike.is_undated
        assert parts.deadline_date == date(2024, 3, 20)
        assert parts.plain_date == date(2024, 3, 19)

    def test_empty_text(self):
        assert collect("empty.org", "") == []

    def test_no_actionable_headings(self):
        assert collect("notes.org", "* Heading\ntext\n") == []

    def test_crlf_line_endings(self):
        items = collect("win.org", "* TODO Buy milk\r\nSCHEDULED: <2024-03-10 Sun>\r\n")
        assert items[0].text == "* TODO Buy milk"
        assert items[0].scheduled_date == date(2024, 3, 10)

    def test_custom_keywords(self):
        text = "* WAITING Review\n* TODO Ignored"
        items = collect("a.org", text, ["WAITING"])
        assert [i.text for i in items] == ["* WAITING Review"]


class TestCollectAll:
    def test_keeps_source_then_line_order(self):
        items = collect_all([
            ("b.org", "* TODO b1\n* TODO b2"),
            ("a.org", "* TODO a1"),
        ])
        assert [i.location_label for i in items] == ["b.org:1", "b.org:2", "a.org:1"]

    def test_no_deduplication(self):
        items = collect_all([("a.org", "* TODO x"), ("a.org", "* TODO x")])
        assert len(items) == 2


def test_split_lines_keeps_trailing_empty_line():
    assert split_lines("a\r\nb\n") == ["a", "b", ""]
