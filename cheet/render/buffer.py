"""Append-only line buffer with highlight spans.

Spans reference 1-based line numbers and 0-based column offsets into the
line text. ``END_OF_LINE`` as the end column covers the rest of the line.
"""

from __future__ import annotations

from typing import NamedTuple

END_OF_LINE = -1


class Highlight(NamedTuple):
    line: int
    tag: str
    col_start: int
    col_end: int


class LineBuffer:
    def __init__(self) -> None:
        self._lines: list[str] = []
        self._highlights: list[Highlight] = []

    def __len__(self) -> int:
        return len(self._lines)

    def append(self, text: str, tag: str | None = None) -> "LineBuffer":
        """Add a line, optionally tagging the whole of it."""
        self._lines.append(text)
        if tag is not None:
            self._highlights.append(Highlight(len(self._lines), tag, 0, END_OF_LINE))
        return self

    def tag_range(self, tag: str, col_start: int, col_end: int) -> "LineBuffer":
        """Tag a column range on the last appended line.

        Ranges are not checked against the line length; presenters clip.
        """
        if not self._lines:
            raise IndexError("tag_range() called before any line was appended")
        self._highlights.append(Highlight(len(self._lines), tag, col_start, col_end))
        return self

    def last_line_length(self) -> int:
        if not self._lines:
            return 0
        return len(self._lines[-1])

    def to_output(self) -> tuple[tuple[str, ...], tuple[Highlight, ...]]:
        return tuple(self._lines), tuple(self._highlights)


__all__ = ["END_OF_LINE", "Highlight", "LineBuffer"]
