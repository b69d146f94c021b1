"""Command line interface for inspecting an index file."""

from __future__ import annotations

import argparse
import logging
import sys

from docindex.config import DOCINDEX_DEFAULT_LANGUAGE, DOCINDEX_LOG_LEVEL
from docindex.exceptions import DocIndexError
from docindex.loader import load_index
from docindex.output_formatter import render_toc, render_tree, summarize
from docindex.schemas import DocIndex, Section
from docindex.traversal import breadcrumbs, lookup

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docindex",
        description="Validate and inspect a documentation index.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Check that an index file is well formed")
    validate.add_argument("index", help="Path to index.json")

    views = (
        ("tree", "Print the titles as an indented tree"),
        ("toc", "Print a Markdown table of contents"),
    )
    for name, help_text in views:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("index", help="Path to index.json")
        sub.add_argument("--lang", default=DOCINDEX_DEFAULT_LANGUAGE, help="Language code")

    find = subparsers.add_parser("lookup", help="Resolve a path inside the index")
    find.add_argument("index", help="Path to index.json")
    find.add_argument("path", help="Slash-joined path, as printed by walk")
    find.add_argument("--lang", default=DOCINDEX_DEFAULT_LANGUAGE, help="Language code")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else DOCINDEX_LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        index = load_index(args.index)
    except OSError as exc:
        print(f"error: cannot read {args.index}: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except DocIndexError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        if args.command == "validate":
            print(summarize(index))
        elif args.command == "tree":
            print(render_tree(index, args.lang))
        elif args.command == "toc":
            print(render_toc(index, args.lang))
        else:
            return _print_lookup(index, args.lang, args.path)
    except DocIndexError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


def _print_lookup(index: DocIndex, language: str, path: str) -> int:
    node = lookup(index, language, path)
    if node is None:
        logger.info("No entry at %r for language %s", path, language)
        print(f"not found: {path}", file=sys.stderr)
        return EXIT_NOT_FOUND
    kind = "section" if isinstance(node, Section) else "document"
    print(f"{kind}: {node.title}")
    print(" > ".join(breadcrumbs(index, language, path) or []))
    if isinstance(node, Section):
        for key, child in node.contents.items():
            print(f"  {key}: {child.title}")
    return EXIT_OK
