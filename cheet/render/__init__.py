"""Cheatsheet page rendering.

``build_page`` turns a record into lines plus highlight spans;
``cheet.render.ansi.paint_lines`` turns those into ANSI text for a terminal.
"""

from __future__ import annotations

from .buffer import END_OF_LINE, Highlight, LineBuffer
from .page import FOOTER_HINT, PAGE_WIDTH, build_page
from .sections import layout_keybindings, layout_plugins, layout_section, layout_settings


__all__ = [
    "END_OF_LINE",
    "FOOTER_HINT",
    "Highlight",
    "LineBuffer",
    "PAGE_WIDTH",
    "build_page",
    "layout_keybindings",
    "layout_plugins",
    "layout_section",
    "layout_settings",
]
