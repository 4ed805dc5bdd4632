"""Entry matching and row formatting for the search picker.

Key-column hits rank ahead of other substring hits, which rank ahead of
fuzzy subsequence hits. Selecting an entry copies its key to the clipboard.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pyperclip

from .flatten import FlatEntry

logger = logging.getLogger(__name__)

KEY_COLUMN_WIDTH = 20
SECTION_COLUMN_WIDTH = 15

KEY_MATCH_BONUS = 50
WORD_BOUNDARY_CHARS = "/_- .:<>"


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score ``query`` as an in-order subsequence of ``candidate``.

    Consecutive runs and hits at word boundaries score higher; gaps and long
    candidates score lower. ``None`` when some query character is missing.
    """
    if not query:
        return 0
    needles = query.casefold()
    haystack = candidate.casefold()

    score = 0
    last = -1
    streak = 0
    for needle in needles:
        found = haystack.find(needle, last + 1)
        if found < 0:
            return None
        if found == last + 1:
            streak += 1
            score += 20 + min(16, streak * 4)
        else:
            streak = 0
            score -= min(40, (found - last - 1) * 2)
        if found == 0 or haystack[found - 1] in WORD_BOUNDARY_CHARS:
            score += 35
        last = found

    return score - len(haystack) // 5


def _rank(query: str, entry: FlatEntry) -> tuple[int, int, int] | None:
    """Sort key for one entry, lower is better; ``None`` when it does not match.

    Substring hits inside the key column rank first, then substring hits
    anywhere in the ordinal, then fuzzy hits, where a fuzzy match that fits
    inside the key alone gets ``KEY_MATCH_BONUS``.
    """
    folded = query.casefold()
    in_key = entry.key.casefold().find(folded)
    if in_key >= 0:
        return (0, in_key, len(entry.key))
    in_ordinal = entry.ordinal.casefold().find(folded)
    if in_ordinal >= 0:
        return (1, in_ordinal, len(entry.ordinal))

    score = fuzzy_score(query, entry.ordinal)
    if score is None:
        return None
    if fuzzy_score(query, entry.key) is not None:
        score += KEY_MATCH_BONUS
    return (2, -score, len(entry.ordinal))


def match_entries(query: str, entries: Sequence[FlatEntry], limit: int | None = None) -> list[FlatEntry]:
    """Return entries matching ``query`` best first.

    An empty query keeps every entry in its original order. ``limit`` caps
    only query results.
    """
    if not query.strip():
        return list(entries)

    ranked: list[tuple[tuple[int, int, int], int]] = []
    for position, entry in enumerate(entries):
        rank = _rank(query, entry)
        if rank is not None:
            ranked.append((rank, position))
    ranked.sort()
    if limit is not None:
        ranked = ranked[: max(1, limit)]
    return [entries[position] for _, position in ranked]


def _column(text: str, width: int) -> str:
    if len(text) > width:
        return text[: width - 1] + "…"
    return f"{text:<{width}}"


def format_entry_row(entry: FlatEntry) -> str:
    """Key, section, and description columns separated by one space."""
    return " ".join(
        (
            _column(entry.key, KEY_COLUMN_WIDTH),
            _column(entry.section, SECTION_COLUMN_WIDTH),
            entry.display_desc,
        )
    )


def copy_key(entry: FlatEntry) -> bool:
    """Copy ``entry.key`` to the clipboard; ``False`` if no clipboard works."""
    try:
        pyperclip.copy(entry.key)
    except pyperclip.PyperclipException as exc:
        logger.warning("Clipboard unavailable: %s", exc)
        return False
    return True


__all__ = [
    "KEY_COLUMN_WIDTH",
    "KEY_MATCH_BONUS",
    "SECTION_COLUMN_WIDTH",
    "copy_key",
    "format_entry_row",
    "fuzzy_score",
    "match_entries",
]
