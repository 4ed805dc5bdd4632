"""Theme selection tests."""

from __future__ import annotations

import unittest

from cheet.render import tags
from cheet.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class ThemeTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_unknown_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name(" OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("plain"), "default")
        self.assertIs(resolve_theme("neon"), DEFAULT_THEME)

    def test_no_color_wins(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)

    def test_every_tag_has_a_style(self) -> None:
        for tag in tags.ALL_TAGS:
            self.assertTrue(DEFAULT_THEME.style_for(tag))
            self.assertEqual(PLAIN_THEME.style_for(tag), "")
        self.assertEqual(DEFAULT_THEME.style_for("reset"), "")


if __name__ == "__main__":
    unittest.main()
