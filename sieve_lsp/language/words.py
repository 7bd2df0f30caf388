"""Word resolution at a cursor offset."""

from __future__ import annotations

import string
from typing import Optional, Tuple

# Tag names carry their leading colon, so ``:`` belongs to the word class.
WORD_CHARACTERS = frozenset(string.ascii_letters + string.digits + "_:")


def word_span(text: str, offset: int) -> Optional[Tuple[int, int]]:
    """Return ``(start, end)`` of the word touching *offset*, or ``None``.

    The cursor may sit anywhere inside the word or on either edge of it.
    Offsets outside the text are clamped.
    """

    offset = min(max(offset, 0), len(text))
    start = offset
    while start > 0 and text[start - 1] in WORD_CHARACTERS:
        start -= 1
    end = offset
    while end < len(text) and text[end] in WORD_CHARACTERS:
        end += 1
    if start == end:
        return None
    return start, end


def resolve_word(text: str, offset: int) -> Optional[str]:
    span = word_span(text, offset)
    if span is None:
        return None
    start, end = span
    return text[start:end]


__all__ = ["WORD_CHARACTERS", "resolve_word", "word_span"]
