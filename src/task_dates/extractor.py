"""DateExtractor — the main API.  Expand shorthands, search, map back.

Usage:
    from task_dates import DateExtractor

    extractor = DateExtractor()      # reusable, holds no per-call state

    result = extractor.extract("call mom tom")
    print(result.cleaned_text)            # "call mom"
    print(result.primary_date.text)       # "tom"
    print(result.primary_date.date_string)  # tomorrow, as YYYY-MM-DD
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from datetime import datetime

from .engine import PREFER_DATES_FROM, DateEngine, scan_dateparser
from .log import get_logger
from .remap import remap
from .shorthands import build_table, expand
from .types import DateMatch, ParsedDate, ParseResult

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")


@dataclass
class ExtractorConfig:
    """Configuration for the DateExtractor."""
    languages: list[str] = field(default_factory=lambda: ["en"])
    prefer_dates_from: str = "future"
    expand_shorthands: bool = True
    # Extra tokens merged over the built-in table, e.g. {"thurs": "thursday"}
    shorthands: dict[str, str] = field(default_factory=dict)
    # None = dateparser
    engine: DateEngine | None = None


class DateExtractor:
    """Finds dates in free text and reports them in original offsets."""

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()
        if self.config.prefer_dates_from not in PREFER_DATES_FROM:
            raise ValueError(
                f"prefer_dates_from must be one of {PREFER_DATES_FROM}, "
                f"got {self.config.prefer_dates_from!r}"
            )
        self._table = build_table(self.config.shorthands) if self.config.expand_shorthands else {}

    def extract(self, text: str, *, now: datetime | None = None) -> ParseResult:
        """Extract dates from text.

        Engine errors are not caught.  Dates come back in engine order;
        ``cleaned_text`` is the text with every date removed.
        """
        now = now or datetime.now()
        rewritten, records = expand(text, self._table)

        parsed: list[ParsedDate] = []
        for match in self._search(rewritten, now):
            if not 0 <= match.start <= match.end <= len(rewritten):
                logger.debug(
                    "engine_match_out_of_range",
                    start=match.start, end=match.end, length=len(rewritten),
                )
                continue
            start, end = remap(match.start, match.end, records)
            parsed.append(ParsedDate(
                text=text[start:end],
                start=start,
                end=end,
                date=match.date,
                date_string=match.date.strftime("%Y-%m-%d"),
            ))

        logger.debug("dates_extracted", shorthands=len(records), dates=len(parsed))
        return ParseResult(cleaned_text=_strip_spans(text, parsed), parsed_dates=tuple(parsed))

    def _search(self, text: str, now: datetime) -> list[DateMatch]:
        if self.config.engine is not None:
            return self.config.engine(text, now)
        return scan_dateparser(
            text,
            now=now,
            languages=self.config.languages,
            prefer_dates_from=self.config.prefer_dates_from,
        )


def _strip_spans(text: str, dates: list[ParsedDate]) -> str:
    """Remove date spans (right-to-left to preserve offsets), tidy whitespace."""
    result = text
    limit = len(text)
    for d in sorted(dates, key=lambda d: d.start, reverse=True):
        # Clip overlaps against the span already removed to the right
        end = min(d.end, limit)
        if d.start < end:
            result = result[:d.start] + result[end:]
        limit = min(limit, d.start)
    return _WHITESPACE.sub(" ", result).strip()


_default: DateExtractor | None = None


def parse_natural_date(text: str, *, now: datetime | None = None) -> ParseResult:
    """Extract dates with the default configuration."""
    global _default
    if _default is None:
        _default = DateExtractor()
    return _default.extract(text, now=now)
