"""Full cheatsheet page composition.

Builds a banner, one divider plus layout per section, and a centered footer
hint. Pure: returns lines and highlight spans without touching any display.
"""

from __future__ import annotations

from ..model import Record
from . import tags
from .buffer import Highlight, LineBuffer
from .sections import layout_section

PAGE_WIDTH = 81
FOOTER_HINT = "Press / to search, <Esc> or q to close"


def title_line(title: str, width: int = PAGE_WIDTH) -> str:
    """Center ``title`` between borders; an odd remainder goes to the right."""
    free = width - 2 - len(title)
    left = free // 2
    right = -(-free // 2)
    return "|" + " " * left + title + " " * right + "|"


def divider_line(name: str, width: int = PAGE_WIDTH) -> str:
    head = f"--- {name} "
    return head + "-" * (width - len(head))


def footer_line(hint: str = FOOTER_HINT, width: int = PAGE_WIDTH) -> str:
    return " " * ((width - len(hint)) // 2) + hint


def build_header(buf: LineBuffer, record: Record, width: int = PAGE_WIDTH) -> None:
    border = "+" + "=" * (width - 2) + "+"
    buf.append(border, tags.HEADER)
    buf.append(title_line(record.title, width), tags.HEADER)
    buf.append(border, tags.HEADER)
    buf.append("")


def build_page(record: Record, width: int = PAGE_WIDTH) -> tuple[tuple[str, ...], tuple[Highlight, ...]]:
    """Render ``record`` into display lines and highlight spans."""
    buf = LineBuffer()
    build_header(buf, record, width)

    for section in record.sections:
        buf.append(divider_line(section.name, width), tags.SECTION)
        layout_section(buf, section)
        buf.append("")

    buf.append(footer_line(FOOTER_HINT, width), tags.DIM)
    return buf.to_output()


__all__ = [
    "FOOTER_HINT",
    "PAGE_WIDTH",
    "build_header",
    "build_page",
    "divider_line",
    "footer_line",
    "title_line",
]
