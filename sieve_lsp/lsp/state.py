"""Document snapshots tracked by the Sieve language server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from lsprotocol.types import Position


def utf16_length(text: str) -> int:
    """Number of UTF-16 code units needed to encode *text*."""
    return len(text) + sum(1 for char in text if ord(char) > 0xFFFF)


def code_point_column(line: str, utf16_column: int) -> int:
    """Convert a UTF-16 column on *line* into a Python string index.

    A column that falls between the two halves of a surrogate pair moves
    past the whole character.  Columns beyond the line end clamp to it.
    """
    units = 0
    for index, char in enumerate(line):
        if units >= utf16_column:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
    return len(line)


@dataclass
class DocumentState:
    """Text of an open document plus client position conversion.

    Client positions count UTF-16 code units, the protocol default.  Line
    breaks are ``\\n``, ``\\r\\n`` or a lone ``\\r``.
    """

    uri: str
    text: str
    version: int = 0
    _line_offsets: List[int] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self._set_text(self.text)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def update(self, text: str, version: int) -> None:
        self._set_text(text)
        self.version = version

    def offset_at(self, position: Position) -> int:
        line_index = min(max(position.line, 0), len(self._line_offsets) - 1)
        start_offset = self._line_offsets[line_index]
        line = self.text[start_offset:self._line_end(line_index)]
        return start_offset + code_point_column(line, max(position.character, 0))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _set_text(self, text: str) -> None:
        self.text = text
        self._recompute_line_offsets()

    def _line_end(self, line_index: int) -> int:
        if line_index + 1 >= len(self._line_offsets):
            return len(self.text)
        end = self._line_offsets[line_index + 1]
        if end > 0 and self.text[end - 1] == "\n":
            end -= 1
        if end > self._line_offsets[line_index] and self.text[end - 1] == "\r":
            end -= 1
        return end

    def _recompute_line_offsets(self) -> None:
        offsets: List[int] = [0]
        text = self.text
        idx = 0
        length = len(text)
        while idx < length:
            char = text[idx]
            if char == "\r":
                next_idx = idx + 1
                if next_idx < length and text[next_idx] == "\n":
                    offsets.append(next_idx + 1)
                    idx = next_idx + 1
                else:
                    offsets.append(idx + 1)
                    idx += 1
            elif char == "\n":
                offsets.append(idx + 1)
                idx += 1
            else:
                idx += 1
        self._line_offsets = offsets


__all__ = ["DocumentState", "code_point_column", "utf16_length"]
