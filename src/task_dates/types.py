"""Core types."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class RewriteRecord:
    """One shorthand expansion, in both coordinate spaces."""
    original_start: int
    original_end: int
    original_text: str     # e.g. "tom"
    rewritten_start: int
    rewritten_end: int
    rewritten_text: str    # e.g. "tomorrow"

    @property
    def growth(self) -> int:
        """How many characters the rewrite added (negative if it shrank)."""
        return len(self.rewritten_text) - len(self.original_text)


@dataclass(frozen=True, slots=True)
class DateMatch:
    """A date found by the engine, in rewritten-text coordinates."""
    text: str
    start: int
    end: int
    date: datetime


@dataclass(frozen=True, slots=True)
class ParsedDate:
    """A date found in the original text."""
    text: str              # original slice, shorthand wording preserved
    start: int
    end: int
    date: datetime
    date_string: str       # YYYY-MM-DD


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Result of extracting dates from a piece of text."""
    cleaned_text: str
    parsed_dates: tuple[ParsedDate, ...] = ()   # engine order

    @property
    def primary_date(self) -> ParsedDate | None:
        return self.parsed_dates[0] if self.parsed_dates else None


@dataclass(frozen=True, slots=True)
class HighlightSegment:
    """A run of the original text, either a date or not."""
    text: str
    is_date: bool
    date_info: ParsedDate | None = None
