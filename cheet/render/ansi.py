"""Terminal presenter: applies highlight spans to page lines as ANSI styles.

Spans are clipped to the bounds of the line they target. Where spans overlap,
the one registered later styles the shared columns.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..ui_theme import UITheme
from .buffer import END_OF_LINE, Highlight


def clip_span(line: str, col_start: int, col_end: int) -> tuple[int, int]:
    """Clamp a span to ``[0, len(line)]``; ``END_OF_LINE`` means the line end."""
    length = len(line)
    end = length if col_end == END_OF_LINE else col_end
    start = max(0, min(col_start, length))
    end = max(start, min(end, length))
    return start, end


def paint_line(line: str, spans: Sequence[Highlight], theme: UITheme) -> str:
    styles: list[str] = [""] * len(line)
    for span in spans:
        start, end = clip_span(line, span.col_start, span.col_end)
        style = theme.style_for(span.tag)
        for col in range(start, end):
            styles[col] = style

    out: list[str] = []
    current = ""
    for ch, style in zip(line, styles):
        if style != current:
            if current:
                out.append(theme.reset)
            if style:
                out.append(style)
            current = style
        out.append(ch)
    if current:
        out.append(theme.reset)
    return "".join(out)


def paint_lines(lines: Sequence[str], highlights: Sequence[Highlight], theme: UITheme) -> list[str]:
    """Return ``lines`` with every highlight rendered as ANSI escapes.

    Highlights referencing lines outside ``lines`` are ignored.
    """
    by_line: dict[int, list[Highlight]] = {}
    for span in highlights:
        if 1 <= span.line <= len(lines):
            by_line.setdefault(span.line, []).append(span)
    return [paint_line(line, by_line.get(index, ()), theme) for index, line in enumerate(lines, start=1)]


__all__ = ["clip_span", "paint_line", "paint_lines"]
