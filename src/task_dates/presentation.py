"""Labels, highlight segments, and checklist lines built from a ParseResult."""

from __future__ import annotations
from datetime import date, datetime
from typing import TYPE_CHECKING

from .extractor import parse_natural_date
from .types import HighlightSegment, ParseResult

if TYPE_CHECKING:
    from .config import Extractor

_TASK_DUE = "⏳"  # hourglass, the Tasks plugin's due-date marker


def format_date(d: date) -> str:
    return d.strftime("%Y-%m-%d")


def relative_label(d: date, *, today: date | None = None) -> str:
    """Describe a date relative to today by calendar day.

    "Today", "Tomorrow", "Yesterday", "In N days" / "N days ago" within a
    week, otherwise the date as YYYY-MM-DD.
    """
    target = d.date() if isinstance(d, datetime) else d
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()

    days = (target - today).days
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days == -1:
        return "Yesterday"
    if 1 < days <= 7:
        return f"In {days} days"
    if -7 <= days < -1:
        return f"{-days} days ago"
    return format_date(target)


def _parse(text: str, extractor: Extractor | None, now: datetime | None) -> ParseResult:
    if extractor is None:
        return parse_natural_date(text, now=now)
    return extractor.extract(text, now=now)


def highlight_segments(
    text: str,
    *,
    extractor: Extractor | None = None,
    now: datetime | None = None,
) -> list[HighlightSegment]:
    """Split text into alternating date / non-date runs.

    Joining the segment texts reproduces the input exactly.
    """
    result = _parse(text, extractor, now)
    if not result.parsed_dates:
        return [HighlightSegment(text=text, is_date=False)]

    segments: list[HighlightSegment] = []
    last_end = 0
    for parsed in sorted(result.parsed_dates, key=lambda p: p.start):
        if parsed.start < last_end:
            # overlaps the previous date, already covered
            continue
        if parsed.start > last_end:
            segments.append(HighlightSegment(text=text[last_end:parsed.start], is_date=False))
        segments.append(HighlightSegment(text=parsed.text, is_date=True, date_info=parsed))
        last_end = parsed.end

    if last_end < len(text):
        segments.append(HighlightSegment(text=text[last_end:], is_date=False))
    return segments


def format_task(content: str, due_date: date | str | None = None) -> str:
    """Render a Markdown checklist line, with a due date if given."""
    task = content.strip()
    if due_date is None:
        return f"- [ ] {task}"
    if isinstance(due_date, date):
        due_date = format_date(due_date)
    return f"- [ ] {task} {_TASK_DUE} {due_date}"


def task_line(
    text: str,
    *,
    extractor: Extractor | None = None,
    now: datetime | None = None,
) -> str:
    """Turn free text like "pay rent fri" into a checklist line.

    The dates are stripped from the task and the primary one becomes
    its due date.
    """
    result = _parse(text, extractor, now)
    primary = result.primary_date
    return format_task(result.cleaned_text, primary.date_string if primary else None)
