"""Command-line front door for cheet.

Parses CLI options, loads the cheatsheet pool from the configured sources,
and resolves one record. The record is then printed either as a full page or
as a searchable entry list, depending on its display mode.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import config
from .flatten import FlatEntry, flatten_entries
from .model import DisplayMode, Record
from .picker import copy_key, format_entry_row, match_entries
from .render import build_page
from .render.ansi import paint_lines
from .store import ResolutionError, complete_ids, list_ids, load_all, resolve
from .ui_theme import available_theme_names, resolve_theme


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cheet",
        description="Show YAML cheatsheets as a highlighted page or a searchable entry list.",
    )
    parser.add_argument("id", nargs="?", default="", help="Cheatsheet id. Defaults to the first one found.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--float", dest="mode", action="store_const", const=DisplayMode.FLOAT, help="Print the full page.")
    mode.add_argument(
        "--search", dest="mode", action="store_const", const=DisplayMode.TELESCOPE, help="Print the entry list."
    )
    parser.add_argument("--query", default="", help="Filter the entry list (implies --search).")
    parser.add_argument("--copy", action="store_true", help="Copy the key of the best matching entry.")
    parser.add_argument("--list", action="store_true", help="Print available cheatsheet ids and exit.")
    parser.add_argument("--complete", metavar="PREFIX", default=None, help="Print ids starting with PREFIX and exit.")
    parser.add_argument(
        "--source",
        action="append",
        default=None,
        metavar="PATH",
        help="Cheatsheet YAML file (repeatable). Overrides configured paths.",
    )
    parser.add_argument("--save-sources", action="store_true", help="Persist the given --source paths to the config file.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log source loading details.")
    return parser


def render_page(record: Record, theme_name: str | None, no_color: bool) -> str:
    lines, highlights = build_page(record)
    theme = resolve_theme(theme_name, no_color=no_color)
    return "\n".join(paint_lines(lines, highlights, theme)) + "\n"


def render_entry_list(record: Record, query: str) -> tuple[str, list[FlatEntry]]:
    matches = match_entries(query, flatten_entries(record))
    rows = [record.title] + [format_entry_row(entry) for entry in matches]
    return "\n".join(rows) + "\n", matches


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and print the requested cheatsheet view.

    Resolution failures exit with a user-facing message instead of a
    traceback.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.mode is DisplayMode.FLOAT and (args.query or args.copy):
        parser.error("--query and --copy work on the entry list and cannot be combined with --float")
    if args.save_sources and not args.source:
        parser.error("--save-sources requires at least one --source")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.source:
        source_paths: Sequence[str] = tuple(args.source)
        if args.save_sources:
            config.save_source_paths(source_paths)
    else:
        source_paths = config.load_source_paths()

    if args.theme:
        config.save_theme_name(args.theme)
    theme_name = args.theme or config.load_theme_name()
    no_color = args.no_color or not sys.stdout.isatty()

    pool = load_all(config.expand_source_paths(source_paths))

    if args.list:
        for record_id in list_ids(pool):
            print(record_id)
        return
    if args.complete is not None:
        for record_id in complete_ids(pool, args.complete):
            print(record_id)
        return

    try:
        record = resolve(pool, args.id)
    except ResolutionError as exc:
        raise SystemExit(exc.message) from None

    mode = args.mode
    if mode is None:
        mode = DisplayMode.TELESCOPE if (args.query or args.copy) else record.display

    if mode is DisplayMode.FLOAT:
        sys.stdout.write(render_page(record, theme_name, no_color))
        return

    text, matches = render_entry_list(record, args.query)
    sys.stdout.write(text)
    if args.copy:
        if not matches:
            raise SystemExit(f'No entry matches "{args.query}"')
        if copy_key(matches[0]):
            print(f"Copied: {matches[0].key}")
