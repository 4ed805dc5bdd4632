"""UI theme definitions and selection helpers.

Themes map the page builder's highlight tags to ANSI SGR prefixes. The page
builder only emits tag names; colors are chosen here.
"""

from __future__ import annotations

from dataclasses import dataclass

from .render import tags


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the terminal presenter."""

    name: str
    reset: str
    header: str
    section: str
    key: str
    plugin: str
    value: str
    dim: str

    def style_for(self, tag: str) -> str:
        """Return the SGR prefix for ``tag``; unknown tags are unstyled."""
        if tag not in tags.ALL_TAGS:
            return ""
        return getattr(self, tag)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;38;2;95;175;175m",
    section="\033[1;38;2;215;175;95m",
    key="\033[1;38;2;95;175;95m",
    plugin="\033[38;2;175;135;215m",
    value="\033[38;2;95;175;175m",
    dim="\033[38;2;128;128;128m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    section="\033[1;38;5;39m",
    key="\033[1;38;5;153m",
    plugin="\033[38;5;117m",
    value="\033[38;5;73m",
    dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    section="",
    key="",
    plugin="",
    value="",
    dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
