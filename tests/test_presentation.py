"""Tests for labels, highlight segments and checklist lines."""

from datetime import date, datetime, timedelta

import pytest

from task_dates import DateExtractor, ExtractorConfig
from task_dates.presentation import (
    format_date, format_task, highlight_segments, relative_label, task_line,
)
from task_dates.types import DateMatch
from fakes import fixed_engine, word_engine

NOW = datetime(2026, 1, 14, 9, 30)
TODAY = NOW.date()
EXTRACTOR = DateExtractor(ExtractorConfig(engine=word_engine))


# ── Relative labels ──────────────────────────────────────────────────

@pytest.mark.parametrize("days, label", [
    (0, "Today"),
    (1, "Tomorrow"),
    (-1, "Yesterday"),
    (2, "In 2 days"),
    (3, "In 3 days"),
    (7, "In 7 days"),
    (-2, "2 days ago"),
    (-7, "7 days ago"),
])
def test_relative_label(days, label):
    assert relative_label(TODAY + timedelta(days=days), today=TODAY) == label


def test_relative_label_falls_back_to_date():
    assert relative_label(date(2026, 1, 22), today=TODAY) == "2026-01-22"
    assert relative_label(date(2026, 1, 6), today=TODAY) == "2026-01-06"


def test_relative_label_ignores_time_of_day():
    late = datetime(2026, 1, 15, 23, 59)
    assert relative_label(late, today=datetime(2026, 1, 14, 0, 1)) == "Tomorrow"


def test_relative_label_defaults_to_today():
    assert relative_label(date.today()) == "Today"


def test_format_date():
    assert format_date(date(2024, 1, 7)) == "2024-01-07"
    assert format_date(datetime(2024, 12, 31, 18, 0)) == "2024-12-31"


# ── Highlight segments ───────────────────────────────────────────────

def test_segments_without_dates():
    segments = highlight_segments("buy milk", extractor=EXTRACTOR, now=NOW)
    assert len(segments) == 1
    assert segments[0].text == "buy milk"
    assert not segments[0].is_date
    assert segments[0].date_info is None


def test_segments_alternate():
    segments = highlight_segments("meeting mon and tue", extractor=EXTRACTOR, now=NOW)
    assert [(s.text, s.is_date) for s in segments] == [
        ("meeting ", False),
        ("mon", True),
        (" and ", False),
        ("tue", True),
    ]
    assert segments[1].date_info.date_string == "2026-01-19"


@pytest.mark.parametrize("text", [
    "",
    "tom",
    "call mom tom",
    "Fri: review, then sat and sun off",
    "no dates at all",
])
def test_segments_cover_text_exactly(text):
    segments = highlight_segments(text, extractor=EXTRACTOR, now=NOW)
    assert "".join(s.text for s in segments) == text


def test_segments_sorted_by_position_not_engine_order():
    day = datetime(2026, 1, 20)
    extractor = DateExtractor(ExtractorConfig(engine=fixed_engine(
        DateMatch(text="tuesday", start=19, end=26, date=day),
        DateMatch(text="monday", start=8, end=14, date=day),
    )))
    segments = highlight_segments("meeting mon and tue", extractor=extractor, now=NOW)
    assert [s.text for s in segments if s.is_date] == ["mon", "tue"]


def test_segments_skip_overlaps():
    day = datetime(2026, 1, 16)
    extractor = DateExtractor(ExtractorConfig(engine=fixed_engine(
        DateMatch(text="due friday", start=0, end=10, date=day),
        DateMatch(text="friday noon", start=4, end=15, date=day),
    )))
    text = "due fri noon ok"
    segments = highlight_segments(text, extractor=extractor, now=NOW)
    assert "".join(s.text for s in segments) == text
    assert [s.text for s in segments if s.is_date] == ["due fri"]


# ── Checklist lines ──────────────────────────────────────────────────

def test_format_task_with_date():
    assert format_task("Buy groceries", "2024-01-17") == "- [ ] Buy groceries ⏳ 2024-01-17"
    assert format_task(" Buy groceries ", date(2024, 1, 17)) == "- [ ] Buy groceries ⏳ 2024-01-17"


def test_format_task_without_date():
    assert format_task("Buy groceries") == "- [ ] Buy groceries"


def test_task_line():
    assert task_line("pay rent fri", extractor=EXTRACTOR, now=NOW) == "- [ ] pay rent ⏳ 2026-01-16"
    assert task_line("pay rent", extractor=EXTRACTOR, now=NOW) == "- [ ] pay rent"
