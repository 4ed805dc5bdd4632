"""YAML source loader tests."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from cheet.model import DisplayMode, SectionType
from cheet.sources import SourceMalformed, SourceUnreadable, parse_source

SAMPLE_YAML = """\
cheatsheets:
  - id: vim
    title: VIM
    display: float
    sections:
      - name: Plugins
        type: plugins
        entries:
          - key: telescope
            desc: fuzzy finder
      - name: Motions
        entries:
          - key: gd
            desc: go to def
            note: (lsp)
          - key: "<C-o>"
            desc: jump back
            arrow: true
  - id: tmux
    sections: []
"""


class ParseSourceTests(unittest.TestCase):
    def _write(self, root: Path, name: str, text: str) -> Path:
        path = root / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_parses_records_in_file_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(Path(tmp), "sheets.yaml", SAMPLE_YAML)

            records = parse_source(path)

        self.assertEqual([record.id for record in records], ["vim", "tmux"])
        vim, tmux = records
        self.assertEqual(vim.title, "VIM")
        self.assertIs(vim.display, DisplayMode.FLOAT)
        self.assertEqual([section.type for section in vim.sections], [SectionType.PLUGINS, SectionType.KEYBINDING])
        motions = vim.sections[1]
        self.assertEqual(motions.entries[0].note, "(lsp)")
        self.assertTrue(motions.entries[1].arrow)
        self.assertEqual(tmux.title, "CHEATSHEET")
        self.assertIs(tmux.display, DisplayMode.TELESCOPE)

    def test_missing_file_is_unreadable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SourceUnreadable) as ctx:
                parse_source(Path(tmp) / "missing.yaml")
        self.assertIn("missing.yaml", str(ctx.exception))

    def test_yaml_syntax_error_is_malformed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(Path(tmp), "bad.yaml", "cheatsheets: [unclosed\n")
            with self.assertRaises(SourceMalformed):
                parse_source(path)

    def test_wrong_shapes_are_malformed(self) -> None:
        bad_documents = (
            "- just\n- a list\n",
            "cheatsheets: nope\n",
            "cheatsheets:\n  - title: no id\n",
            "cheatsheets:\n  - id: x\n    sections: oops\n",
        )
        with tempfile.TemporaryDirectory() as tmp:
            for index, text in enumerate(bad_documents):
                path = self._write(Path(tmp), f"bad{index}.yaml", text)
                with self.assertRaises(SourceMalformed, msg=text):
                    parse_source(path)

    def test_documents_without_cheatsheets_contribute_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            empty = self._write(Path(tmp), "empty.yaml", "")
            other = self._write(Path(tmp), "other.yaml", "settings: {}\n")
            self.assertEqual(parse_source(empty), [])
            self.assertEqual(parse_source(other), [])


if __name__ == "__main__":
    unittest.main()
