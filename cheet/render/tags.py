"""Highlight tag names emitted by the page builder.

Presenters map these names to concrete styles; see ``cheet.ui_theme``.
"""

from __future__ import annotations

HEADER = "header"
SECTION = "section"
KEY = "key"
PLUGIN = "plugin"
VALUE = "value"
DIM = "dim"

ALL_TAGS: tuple[str, ...] = (HEADER, SECTION, KEY, PLUGIN, VALUE, DIM)
