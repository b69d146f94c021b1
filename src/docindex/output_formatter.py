"""Format a parsed index into summary, tree, and table-of-contents text."""

from __future__ import annotations

import re
from collections.abc import Mapping
from urllib.parse import quote

from docindex.schemas import DocIndex, Leaf, Node, Section
from docindex.traversal import count_nodes, iter_leaves

_MARKDOWN_LINK_TEXT = re.compile(r"([\\\[\]])")


def summarize(index: DocIndex) -> str:
    """Create a short human-readable summary of the index."""
    summary_lines = []
    if index.category:
        summary_lines.append(f"Category: {index.category}")
    summary_lines.append(f"Languages: {', '.join(index.languages)}")
    for code in index.languages:
        section = index.sections[code]
        entries = count_nodes(index, code)
        documents = sum(1 for _ in iter_leaves(index, code))
        label = f" ({section.title})" if section.title else ""
        summary_lines.append(f"{code}{label}: {entries} entries, {documents} documents")
    return "\n".join(summary_lines)


def render_toc(index: DocIndex, language: str, *, link_leaves: bool = True) -> str:
    """Render a Markdown nested list in reading order.

    With ``link_leaves`` each document is linked to its own key, which by
    convention is the relative path of its content file. Link targets are
    percent-encoded and brackets in link text are escaped.
    """
    return _render_toc(index.section(language).contents, link_leaves=link_leaves)


def render_tree(index: DocIndex, language: str) -> str:
    """Render titles as an indented tree, four spaces per level."""
    return _create_tree(index.section(language).contents)


def markdown_link(title: str, target: str) -> str:
    text = _MARKDOWN_LINK_TEXT.sub(r"\\\1", title)
    return f"[{text}]({quote(target, safe='/')})"


def _render_toc(contents: Mapping[str, Node], *, link_leaves: bool, indent: int = 0) -> str:
    lines: list[str] = []
    for key, node in contents.items():
        prefix = "  " * indent + "- "
        if isinstance(node, Leaf) and link_leaves:
            lines.append(prefix + markdown_link(node.title, key))
        else:
            lines.append(prefix + node.title)
        if isinstance(node, Section) and node.contents:
            lines.append(_render_toc(node.contents, link_leaves=link_leaves, indent=indent + 1))
    return "\n".join(lines)


def _create_tree(contents: Mapping[str, Node], indent: int = 0) -> str:
    lines: list[str] = []
    for node in contents.values():
        lines.append(" " * (indent * 4) + node.title)
        if isinstance(node, Section) and node.contents:
            lines.append(_create_tree(node.contents, indent + 1))
    return "\n".join(lines)
