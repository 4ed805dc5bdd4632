"""Full page composition tests: banner, dividers, footer, span bounds."""

from __future__ import annotations

import unittest

from cheet.model import Entry, Record, Section, SectionType
from cheet.render import tags
from cheet.render.buffer import END_OF_LINE
from cheet.render.page import FOOTER_HINT, PAGE_WIDTH, build_page, divider_line, title_line


def _sample_record() -> Record:
    return Record(
        id="git",
        title="GIT",
        sections=(
            Section(
                name="Plugins",
                type=SectionType.PLUGINS,
                entries=(Entry(key="fugitive", desc="git wrapper"), Entry(key="gitsigns", desc="signs")),
            ),
            Section(
                name="Options",
                type=SectionType.SETTINGS,
                entries=(Entry(key="diff", desc="vertical"),),
            ),
            Section(
                name="Keys",
                entries=(
                    Entry(key="<leader>gs", desc="status", note="(fugitive)"),
                    Entry(key="]c", desc="next hunk", arrow=True),
                ),
            ),
            Section(name="Empty", type=SectionType.SETTINGS),
        ),
    )


class BuildPageTests(unittest.TestCase):
    def test_header_centers_title_between_borders(self) -> None:
        lines, highlights = build_page(_sample_record())

        border = "+" + "=" * (PAGE_WIDTH - 2) + "+"
        self.assertEqual(lines[0], border)
        self.assertEqual(lines[1], "|" + " " * 38 + "GIT" + " " * 38 + "|")
        self.assertEqual(lines[2], border)
        self.assertEqual(lines[3], "")
        self.assertEqual(
            [span for span in highlights if span.line <= 4],
            [(line, tags.HEADER, 0, END_OF_LINE) for line in (1, 2, 3)],
        )

    def test_odd_remainder_goes_to_the_right(self) -> None:
        line = title_line("AB")
        self.assertEqual(len(line), PAGE_WIDTH)
        self.assertEqual(line, "|" + " " * 38 + "AB" + " " * 39 + "|")

    def test_default_title_is_used(self) -> None:
        lines, _ = build_page(Record(id="x"))
        self.assertIn("CHEATSHEET", lines[1])

    def test_sections_get_dividers_and_trailing_blank_lines(self) -> None:
        lines, highlights = build_page(_sample_record())

        section_lines = [span.line for span in highlights if span.tag == tags.SECTION]
        self.assertEqual([lines[n - 1] for n in section_lines][0], divider_line("Plugins"))
        self.assertEqual(len(divider_line("Plugins")), PAGE_WIDTH)
        self.assertTrue(divider_line("Keys").startswith("--- Keys ---"))
        # header(4) + plugins(1+1+1) + settings(1+1+1) + keys(1+2+1) + empty(1+0+1) + footer(1)
        self.assertEqual(len(lines), 4 + 3 + 3 + 4 + 2 + 1)
        self.assertEqual(section_lines, [5, 8, 11, 15])
        self.assertEqual(lines[15], "")

    def test_footer_is_centered_and_dimmed(self) -> None:
        lines, highlights = build_page(_sample_record())

        self.assertEqual(lines[-1], " " * ((PAGE_WIDTH - len(FOOTER_HINT)) // 2) + FOOTER_HINT)
        self.assertEqual(highlights[-1], (len(lines), tags.DIM, 0, END_OF_LINE))

    def test_every_span_lies_within_its_line(self) -> None:
        lines, highlights = build_page(_sample_record())

        for span in highlights:
            self.assertGreaterEqual(span.line, 1)
            self.assertLessEqual(span.line, len(lines))
            if span.col_end != END_OF_LINE:
                self.assertLessEqual(0, span.col_start)
                self.assertLessEqual(span.col_start, span.col_end)
                self.assertLessEqual(span.col_end, len(lines[span.line - 1]))

    def test_custom_width(self) -> None:
        lines, _ = build_page(_sample_record(), width=60)
        self.assertEqual(len(lines[0]), 60)
        self.assertEqual(len(lines[1]), 60)
        self.assertEqual(len(lines[4]), 60)


if __name__ == "__main__":
    unittest.main()
