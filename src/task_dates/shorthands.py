"""Shorthand expansion — rewrite "tom", "fri", ... before date parsing.

The date engine only understands full words, so informal shorthands are
expanded first.  Every expansion is recorded so engine offsets can be
mapped back onto the original text (see ``remap``).
"""

from __future__ import annotations
import re
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from .types import RewriteRecord

SHORTHANDS: Mapping[str, str] = MappingProxyType({
    "tod": "today",
    "tom": "tomorrow",
    "yes": "yesterday",
    "mon": "monday",
    "tue": "tuesday",
    "wed": "wednesday",
    "thu": "thursday",
    "fri": "friday",
    "sat": "saturday",
    "sun": "sunday",
})

_WORD = re.compile(r"\w+")


def build_table(extra: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Return a read-only table with ``extra`` tokens merged over the defaults."""
    if not extra:
        return SHORTHANDS
    table = dict(SHORTHANDS)
    for token, expansion in extra.items():
        key = token.strip().lower()
        if not _WORD.fullmatch(key):
            raise ValueError(f"shorthand token must be a single word: {token!r}")
        if not expansion or not expansion.strip():
            raise ValueError(f"empty expansion for shorthand {token!r}")
        table[key] = expansion.strip()
    return MappingProxyType(table)


@lru_cache(maxsize=32)
def _compile(tokens: tuple[str, ...]) -> re.Pattern:
    # Longest first so "thur" wins over "thu" in custom tables
    alternation = "|".join(re.escape(t) for t in sorted(tokens, key=len, reverse=True))
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def expand(
    text: str,
    table: Mapping[str, str] = SHORTHANDS,
) -> tuple[str, list[RewriteRecord]]:
    """Expand whole-word shorthands in ``text``.

    Returns the rewritten text and one RewriteRecord per expansion, in
    left-to-right order.  Text without shorthands comes back unchanged
    with an empty record list.
    """
    if not table:
        return text, []

    pattern = _compile(tuple(table))
    records: list[RewriteRecord] = []
    parts: list[str] = []
    last = 0
    growth = 0

    for m in pattern.finditer(text):
        token = m.group()
        expansion = table[token.lower()]
        parts.append(text[last:m.start()])
        parts.append(expansion)

        rewritten_start = m.start() + growth
        records.append(RewriteRecord(
            original_start=m.start(),
            original_end=m.end(),
            original_text=token,
            rewritten_start=rewritten_start,
            rewritten_end=rewritten_start + len(expansion),
            rewritten_text=expansion,
        ))
        growth += len(expansion) - len(token)
        last = m.end()

    if not records:
        return text, records

    parts.append(text[last:])
    return "".join(parts), records
