"""Record aggregation across configured sources and id resolution.

The pool is rebuilt on every call so edits to source files are picked up
without a cache. Per-source failures are logged and skipped; only resolution
failures reach the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from .model import Record
from .sources import SourceError, parse_source

logger = logging.getLogger(__name__)

SourceParser = Callable[[Path], Sequence[Record]]


class ResolutionError(LookupError):
    """Base for user-facing record resolution failures."""

    message = "cheatsheet resolution failed"

    def __str__(self) -> str:
        return self.message


class RecordNotFound(ResolutionError):
    def __init__(self, record_id: str) -> None:
        super().__init__(record_id)
        self.record_id = record_id
        self.message = f'No cheatsheet found with id "{record_id}"'


class PoolEmpty(ResolutionError):
    message = "No cheatsheets found in configured paths"


def load_all(paths: Iterable[Path | str], parse: SourceParser = parse_source) -> list[Record]:
    """Concatenate records from every source that parses, in path order."""
    pool: list[Record] = []
    for raw_path in paths:
        path = Path(raw_path)
        try:
            records = parse(path)
        except SourceError as exc:
            logger.warning("Skipping cheatsheet source %s", exc)
            continue
        logger.debug("Loaded %d cheatsheet(s) from %s", len(records), path)
        pool.extend(records)
    return pool


def list_ids(pool: Sequence[Record]) -> list[str]:
    return [record.id for record in pool]


def complete_ids(pool: Sequence[Record], prefix: str) -> list[str]:
    """Return ids starting with ``prefix`` (duplicates preserved)."""
    return [record_id for record_id in list_ids(pool) if record_id.startswith(prefix)]


def find_by_id(pool: Sequence[Record], record_id: str) -> Record:
    """Return the first record with ``record_id``; earlier sources shadow later ones."""
    for record in pool:
        if record.id == record_id:
            return record
    raise RecordNotFound(record_id)


def first(pool: Sequence[Record]) -> Record:
    if not pool:
        raise PoolEmpty()
    return pool[0]


def resolve(pool: Sequence[Record], record_id: str | None = None) -> Record:
    """Pick the record to show.

    An explicit non-empty id must match; it never falls back to the first
    record. Without an id the first record in pool order is used.
    """
    if record_id:
        return find_by_id(pool, record_id)
    return first(pool)


__all__ = [
    "PoolEmpty",
    "RecordNotFound",
    "ResolutionError",
    "SourceParser",
    "complete_ids",
    "find_by_id",
    "first",
    "list_ids",
    "load_all",
    "resolve",
]
