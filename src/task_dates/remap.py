"""Map offsets in rewritten text back onto the original text.

Positions outside every rewrite are shifted by the growth of all
rewrites to their left.  A position that falls inside a rewrite snaps to
that rewrite's original boundary: part of "tomorrow" has no meaning in
text that only ever said "tom".

Starts and ends are resolved differently at rewrite edges.  A start is
inside a rewrite when ``rewritten_start <= pos < rewritten_end``, an end
when ``rewritten_start < pos <= rewritten_end``, so a range touching a
rewrite from either side never swallows it.
"""

from __future__ import annotations
from typing import Sequence

from .types import RewriteRecord


def remap_position(pos: int, records: Sequence[RewriteRecord], *, is_end: bool) -> int:
    """Map one rewritten-text position to the original text."""
    shift = 0
    for r in records:
        if is_end:
            inside = r.rewritten_start < pos <= r.rewritten_end
        else:
            inside = r.rewritten_start <= pos < r.rewritten_end
        if inside:
            return r.original_end if is_end else r.original_start
        if pos < r.rewritten_end:
            # records are ordered, nothing further right can apply
            break
        shift += r.growth
    return pos - shift


def remap(
    start: int,
    end: int,
    records: Sequence[RewriteRecord],
) -> tuple[int, int]:
    """Map a half-open ``[start, end)`` range to original-text offsets."""
    if not records:
        return start, end
    return (
        remap_position(start, records, is_end=False),
        remap_position(end, records, is_end=True),
    )
