"""Flat, search-oriented projection of a record's entries."""

from __future__ import annotations

from dataclasses import dataclass

from .model import ARROW_PREFIX, Record, SectionType


@dataclass(frozen=True)
class FlatEntry:
    section: str
    key: str
    desc: str
    note: str | None = None
    arrow: bool = False
    type: str = SectionType.KEYBINDING.value

    @property
    def ordinal(self) -> str:
        """Text the picker matches queries against."""
        return f"{self.key} {self.section} {self.desc}"

    @property
    def display_desc(self) -> str:
        desc = self.desc
        if self.arrow:
            desc = ARROW_PREFIX + desc
        if self.note is not None:
            desc = f"{desc} {self.note}"
        return desc


def flatten_entries(record: Record) -> tuple[FlatEntry, ...]:
    """One ``FlatEntry`` per entry, in section order then entry order."""
    return tuple(
        FlatEntry(
            section=section.name,
            key=entry.key,
            desc=entry.desc,
            note=entry.note,
            arrow=entry.arrow,
            type=section.type.value,
        )
        for section in record.sections
        for entry in section.entries
    )


__all__ = ["FlatEntry", "flatten_entries"]
