"""Cheatsheet record model and raw-data normalization.

Records are immutable once built. Optional fields are defaulted here, once,
so layout and flattening code never re-check raw YAML shapes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

DEFAULT_TITLE = "CHEATSHEET"
ARROW_PREFIX = "-> "


class SectionType(str, Enum):
    PLUGINS = "plugins"
    SETTINGS = "settings"
    KEYBINDING = "keybinding"

    @classmethod
    def normalize(cls, value: object) -> "SectionType":
        """Return the matching type, falling back to ``KEYBINDING``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            candidate = value.strip().lower()
            for member in cls:
                if member.value == candidate:
                    return member
        return cls.KEYBINDING


class DisplayMode(str, Enum):
    FLOAT = "float"
    TELESCOPE = "telescope"

    @classmethod
    def normalize(cls, value: object) -> "DisplayMode":
        if isinstance(value, str) and value.strip().lower() == cls.FLOAT.value:
            return cls.FLOAT
        return cls.TELESCOPE


@dataclass(frozen=True)
class Entry:
    key: str = ""
    desc: str = ""
    note: str | None = None
    arrow: bool = False


@dataclass(frozen=True)
class Section:
    name: str
    type: SectionType = SectionType.KEYBINDING
    entries: tuple[Entry, ...] = ()


@dataclass(frozen=True)
class Record:
    id: str
    title: str = DEFAULT_TITLE
    display: DisplayMode = DisplayMode.TELESCOPE
    sections: tuple[Section, ...] = field(default_factory=tuple)


def _text(value: object, default: str = "") -> str:
    """Coerce a YAML scalar to text; ``None`` becomes ``default``."""
    if value is None:
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _items(value: object, what: str) -> list[object]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a list")
    return value


def entry_from_mapping(data: object) -> Entry:
    if not isinstance(data, Mapping):
        raise ValueError("entry must be a mapping")
    note = data.get("note")
    return Entry(
        key=_text(data.get("key")),
        desc=_text(data.get("desc")),
        note=None if note is None else _text(note),
        arrow=bool(data.get("arrow", False)),
    )


def section_from_mapping(data: object) -> Section:
    if not isinstance(data, Mapping):
        raise ValueError("section must be a mapping")
    return Section(
        name=_text(data.get("name")),
        type=SectionType.normalize(data.get("type")),
        entries=tuple(entry_from_mapping(item) for item in _items(data.get("entries"), "section entries")),
    )


def record_from_mapping(data: object) -> Record:
    """Build a ``Record`` from one decoded ``cheatsheets`` item.

    Raises ``ValueError`` when the item is not a mapping, has no ``id``, or
    contains sections/entries of the wrong shape.
    """
    if not isinstance(data, Mapping):
        raise ValueError("cheatsheet must be a mapping")
    record_id = data.get("id")
    if record_id is None or isinstance(record_id, (Mapping, list)):
        raise ValueError("cheatsheet is missing an id")
    return Record(
        id=_text(record_id),
        title=_text(data.get("title"), DEFAULT_TITLE),
        display=DisplayMode.normalize(data.get("display")),
        sections=tuple(section_from_mapping(item) for item in _items(data.get("sections"), "sections")),
    )


__all__ = [
    "ARROW_PREFIX",
    "DEFAULT_TITLE",
    "DisplayMode",
    "Entry",
    "Record",
    "Section",
    "SectionType",
    "entry_from_mapping",
    "record_from_mapping",
    "section_from_mapping",
]
