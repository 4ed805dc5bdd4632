"""Per-section-type layouts.

Each layout appends formatted rows to a ``LineBuffer`` and tags the columns
where keys, values, and notes land in the row text.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..model import ARROW_PREFIX, Entry, Section, SectionType
from . import tags
from .buffer import LineBuffer

PLUGIN_COLUMN_WIDTH = 40
PLUGIN_KEY_WIDTH = 14
PLUGINS_PER_ROW = 2

SETTINGS_PER_ROW = 3
SETTINGS_INDENT = 2
SETTINGS_SEPARATOR = "    "

KEYBINDING_KEY_WIDTH = 18
KEYBINDING_GAP = "    "

SectionLayout = Callable[[LineBuffer, Sequence[Entry]], None]


def _chunks(entries: Sequence[Entry], size: int) -> list[Sequence[Entry]]:
    return [entries[i : i + size] for i in range(0, len(entries), size)]


def _plugin_cell(entry: Entry) -> str:
    return f"{entry.key:<{PLUGIN_KEY_WIDTH}} {entry.desc}"


def layout_plugins(buf: LineBuffer, entries: Sequence[Entry]) -> None:
    """Two-column grid; odd counts leave the last right cell empty."""
    for row in _chunks(entries, PLUGINS_PER_ROW):
        left_entry = row[0]
        right_entry = row[1] if len(row) > 1 else None

        left = "  " + _plugin_cell(left_entry)
        right = _plugin_cell(right_entry) if right_entry is not None else ""
        buf.append(left + " " * (PLUGIN_COLUMN_WIDTH - len(left)) + right)

        buf.tag_range(tags.PLUGIN, 2, 2 + len(left_entry.key))
        if right_entry is not None:
            buf.tag_range(tags.PLUGIN, PLUGIN_COLUMN_WIDTH, PLUGIN_COLUMN_WIDTH + len(right_entry.key))


def settings_row(entries: Sequence[Entry]) -> tuple[str, list[tuple[int, int]]]:
    """Return one settings row and the ``(start, end)`` column of each value.

    The column is folded through the row: each ``key: desc`` part starts where
    the previous part plus the separator ended.
    """
    parts: list[str] = []
    spans: list[tuple[int, int]] = []
    col = SETTINGS_INDENT
    for entry in entries:
        part = f"{entry.key}: {entry.desc}"
        value_start = col + len(entry.key) + 2
        spans.append((value_start, value_start + len(entry.desc)))
        parts.append(part)
        col += len(part) + len(SETTINGS_SEPARATOR)
    return " " * SETTINGS_INDENT + SETTINGS_SEPARATOR.join(parts), spans


def layout_settings(buf: LineBuffer, entries: Sequence[Entry]) -> None:
    """Up to three ``key: value`` items per row with values highlighted."""
    for row in _chunks(entries, SETTINGS_PER_ROW):
        text, spans = settings_row(row)
        buf.append(text)
        for start, end in spans:
            buf.tag_range(tags.VALUE, start, end)


def keybinding_line(entry: Entry) -> str:
    prefix = ARROW_PREFIX if entry.arrow else ""
    note = f" {entry.note}" if entry.note is not None else ""
    return f"  {entry.key:<{KEYBINDING_KEY_WIDTH}}{KEYBINDING_GAP}{prefix}{entry.desc}{note}"


def layout_keybindings(buf: LineBuffer, entries: Sequence[Entry]) -> None:
    """One entry per row; the trailing note is tagged from the row end."""
    for entry in entries:
        buf.append(keybinding_line(entry))
        buf.tag_range(tags.KEY, 2, 2 + len(entry.key))
        if entry.note is not None:
            end = buf.last_line_length()
            buf.tag_range(tags.DIM, end - len(entry.note), end)


SECTION_LAYOUTS: dict[SectionType, SectionLayout] = {
    SectionType.PLUGINS: layout_plugins,
    SectionType.SETTINGS: layout_settings,
    SectionType.KEYBINDING: layout_keybindings,
}


def layout_section(buf: LineBuffer, section: Section) -> None:
    layout = SECTION_LAYOUTS.get(section.type, layout_keybindings)
    layout(buf, section.entries)


__all__ = [
    "PLUGIN_COLUMN_WIDTH",
    "SECTION_LAYOUTS",
    "SectionLayout",
    "keybinding_line",
    "layout_keybindings",
    "layout_plugins",
    "layout_section",
    "layout_settings",
    "settings_row",
]
