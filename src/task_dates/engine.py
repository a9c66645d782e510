"""Date engine — dateparser's search, reporting offsets.

Any callable ``(text, now) -> list[DateMatch]`` can stand in for the
default engine, e.g. a fake in tests or a different NLP library.
"""

from __future__ import annotations
import re
from datetime import datetime
from typing import Callable, Sequence

from .log import get_logger
from .types import DateMatch

logger = get_logger(__name__)

DateEngine = Callable[[str, datetime], list[DateMatch]]

PREFER_DATES_FROM = ("future", "past", "current_period")

# search_dates gives up on "monday and tuesday", so lists are searched piecewise
_CONJUNCTION = re.compile(r"\s*(?:\b(?:and|or)\b|&)\s*", re.IGNORECASE)


def _chunks(text: str) -> list[tuple[int, str]]:
    """Split text around conjunctions into ``(offset, chunk)`` pairs."""
    chunks: list[tuple[int, str]] = []
    last = 0
    for m in _CONJUNCTION.finditer(text):
        if m.start() > last:
            chunks.append((last, text[last:m.start()]))
        last = m.end()
    if last < len(text):
        chunks.append((last, text[last:]))
    return chunks


def _locate(text: str, substring: str, cursor: int) -> int:
    """Offset of ``substring`` as whole words, from cursor first, else -1."""
    pattern = re.compile(rf"(?<!\w){re.escape(substring)}(?!\w)")
    m = pattern.search(text, cursor) or pattern.search(text)
    return m.start() if m else -1


def scan_dateparser(
    text: str,
    *,
    now: datetime,
    languages: Sequence[str] = ("en",),
    prefer_dates_from: str = "future",
) -> list[DateMatch]:
    """Run dateparser's search over text.

    Args:
        text: Input text to scan.
        now: Reference instant for relative phrases ("tomorrow").
        languages: ISO language codes passed to dateparser.
        prefer_dates_from: How to resolve ambiguous dates; "future"
            makes a bare "friday" mean the next one.

    Text containing "and", "or" or "&" is searched chunk by chunk.
    Returns matches in the order dateparser reports them.
    """
    # Lazy import — dateparser loads its language data on first use
    from dateparser.search import search_dates

    settings = {
        "PREFER_DATES_FROM": prefer_dates_from,
        "RELATIVE_BASE": now,
        "RETURN_AS_TIMEZONE_AWARE": False,
    }
    chunks = _chunks(text) if _CONJUNCTION.search(text) else [(0, text)]

    matches: list[DateMatch] = []
    for base, chunk in chunks:
        found = search_dates(chunk, languages=list(languages), settings=settings)
        cursor = 0
        for substring, dt in found or ():
            if dt is None:
                continue
            start = _locate(chunk, substring, cursor)
            if start == -1:
                logger.debug("engine_match_not_located", substring=substring)
                continue
            end = start + len(substring)
            matches.append(DateMatch(text=substring, start=base + start, end=base + end, date=dt))
            cursor = max(cursor, end)
    return matches
