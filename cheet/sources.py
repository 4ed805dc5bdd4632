"""YAML cheatsheet source loader.

Each source file holds a top-level ``cheatsheets`` list. Failures are raised
as ``SourceError`` subclasses so the store can skip one file without
aborting aggregation of the rest.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml

from .model import Record, record_from_mapping


class SourceError(ValueError):
    """Raised when a cheatsheet source cannot contribute records."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class SourceUnreadable(SourceError):
    """The source file is missing, unreadable, or not valid UTF-8."""


class SourceMalformed(SourceError):
    """The source parsed but does not have the cheatsheet shape."""


def read_source_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceUnreadable(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnreadable(path, f"could not read file ({exc})") from exc


def parse_source(path: Path | str) -> list[Record]:
    """Parse one YAML source into records, in file order.

    A document without a ``cheatsheets`` key contributes no records.
    """
    source_path = Path(path)
    text = read_source_text(source_path)
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SourceMalformed(source_path, f"failed to parse YAML ({exc})") from exc

    if data is None:
        return []
    if not isinstance(data, Mapping):
        raise SourceMalformed(source_path, "top level must be a mapping")

    raw_sheets = data.get("cheatsheets")
    if raw_sheets is None:
        return []
    if not isinstance(raw_sheets, list):
        raise SourceMalformed(source_path, "cheatsheets must be a list")

    records: list[Record] = []
    for index, raw in enumerate(raw_sheets):
        try:
            records.append(record_from_mapping(raw))
        except ValueError as exc:
            raise SourceMalformed(source_path, f"cheatsheet #{index + 1}: {exc}") from exc
    return records


__all__ = [
    "SourceError",
    "SourceMalformed",
    "SourceUnreadable",
    "parse_source",
    "read_source_text",
]
