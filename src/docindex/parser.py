"""Build a ``DocIndex`` from its declarative source shape."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from docindex.config import DOCINDEX_MAX_DEPTH
from docindex.exceptions import MalformedIndexError
from docindex.schemas import DocIndex, LanguageSection, Leaf, Node, Section

logger = logging.getLogger(__name__)

_RESERVED_KEYS = frozenset({"languages", "category"})
_NODE_KEYS = frozenset({"title", "contents"})
_SECTION_KEYS = frozenset({"title", "description", "contents"})


def parse(raw: Any, *, max_depth: int = DOCINDEX_MAX_DEPTH) -> DocIndex:
    """Validate ``raw`` and build an immutable ``DocIndex``.

    ``raw`` is the decoded ``index.json`` document: a mapping with a
    ``languages`` list, an optional ``category`` and one section per declared
    language. Any ``contents`` may also be given as a sequence of
    ``(key, node)`` pairs, in which case duplicate keys are rejected.

    Args:
        raw: The decoded source document.
        max_depth: Deepest allowed nesting of ``contents``.

    Returns:
        The parsed index.

    Raises:
        MalformedIndexError: If any part of ``raw`` does not have the
            documented shape. Nothing is salvaged from a broken source.
    """
    if not isinstance(raw, Mapping):
        raise MalformedIndexError(f"index must be a mapping, got {type(raw).__name__}")

    languages = _parse_languages(raw.get("languages"))

    category = raw.get("category")
    if category is not None and not isinstance(category, str):
        raise MalformedIndexError("must be a string", location="category")

    sections: dict[str, LanguageSection] = {}
    for code in languages:
        if code not in raw:
            raise MalformedIndexError(f"language {code!r} is declared but has no section")
        sections[code] = _parse_language_section(raw[code], code, max_depth=max_depth)

    for key in raw:
        if key not in _RESERVED_KEYS and key not in sections:
            logger.warning("Ignoring top-level key %r: not a declared language", key)

    try:
        index = DocIndex(languages=tuple(languages), category=category, sections=sections)
    except ValidationError as exc:
        raise MalformedIndexError(str(exc)) from exc

    logger.debug("Parsed index with languages %s", ", ".join(languages))
    return index


def _parse_languages(value: Any) -> list[str]:
    if value is None:
        raise MalformedIndexError("is required", location="languages")
    if not isinstance(value, list):
        raise MalformedIndexError("must be a list of language codes", location="languages")
    if not value:
        raise MalformedIndexError("must not be empty", location="languages")

    seen: set[str] = set()
    for position, code in enumerate(value):
        location = f"languages[{position}]"
        if not isinstance(code, str) or not code:
            raise MalformedIndexError("language code must be a non-empty string", location=location)
        if code in _RESERVED_KEYS:
            raise MalformedIndexError(f"{code!r} is a reserved key", location=location)
        if code in seen:
            raise MalformedIndexError(f"duplicate language code {code!r}", location=location)
        seen.add(code)
    return list(value)


def _parse_language_section(raw: Any, code: str, *, max_depth: int) -> LanguageSection:
    if not isinstance(raw, Mapping):
        raise MalformedIndexError("language section must be a mapping", location=code)

    unknown = sorted(str(key) for key in raw if key not in _SECTION_KEYS)
    if unknown:
        raise MalformedIndexError(f"unexpected keys: {', '.join(unknown)}", location=code)

    for field_name in ("title", "description"):
        if not isinstance(raw.get(field_name, ""), str):
            raise MalformedIndexError("must be a string", location=f"{code}.{field_name}")

    contents: dict[str, Node] = {}
    if "contents" in raw:
        contents = _parse_contents(
            raw["contents"],
            location=f"{code}.contents",
            prefix="",
            depth=1,
            max_depth=max_depth,
            seen_paths=set(),
        )

    try:
        return LanguageSection(
            title=raw.get("title", ""),
            description=raw.get("description", ""),
            contents=contents,
        )
    except ValidationError as exc:
        raise MalformedIndexError(str(exc), location=code) from exc


def _parse_contents(
    value: Any,
    *,
    location: str,
    prefix: str,
    depth: int,
    max_depth: int,
    seen_paths: set[str],
) -> dict[str, Node]:
    if depth > max_depth:
        raise MalformedIndexError(f"nesting deeper than {max_depth} levels", location=location)

    contents: dict[str, Node] = {}
    for key, raw_node in _iter_entries(value, location):
        node_location = f"{location}[{key!r}]"
        if not isinstance(key, str) or not key:
            raise MalformedIndexError("key must be a non-empty string", location=node_location)
        if key in contents:
            raise MalformedIndexError(f"duplicate key {key!r}", location=location)

        path = f"{prefix}/{key}" if prefix else key
        if path in seen_paths:
            raise MalformedIndexError(f"path {path!r} is used by more than one node", location=node_location)
        seen_paths.add(path)

        contents[key] = _parse_node(
            raw_node,
            location=node_location,
            path=path,
            depth=depth,
            max_depth=max_depth,
            seen_paths=seen_paths,
        )
    return contents


def _iter_entries(value: Any, location: str) -> list[tuple[Any, Any]]:
    """Return ``(key, node)`` pairs from a mapping or a sequence of pairs."""
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, (list, tuple)):
        entries: list[tuple[Any, Any]] = []
        for position, pair in enumerate(value):
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise MalformedIndexError(
                    "entry must be a (key, node) pair",
                    location=f"{location}[{position}]",
                )
            entries.append((pair[0], pair[1]))
        return entries
    raise MalformedIndexError(f"contents must be a mapping, got {type(value).__name__}", location=location)


def _parse_node(
    raw: Any,
    *,
    location: str,
    path: str,
    depth: int,
    max_depth: int,
    seen_paths: set[str],
) -> Node:
    if not isinstance(raw, Mapping):
        raise MalformedIndexError(f"node must be a mapping, got {type(raw).__name__}", location=location)

    unknown = sorted(str(key) for key in raw if key not in _NODE_KEYS)
    if unknown:
        raise MalformedIndexError(f"unexpected keys: {', '.join(unknown)}", location=location)

    title = raw.get("title")
    if not isinstance(title, str):
        raise MalformedIndexError("title must be a string", location=f"{location}.title")

    if "contents" not in raw:
        return Leaf(title=title)

    children = _parse_contents(
        raw["contents"],
        location=f"{location}.contents",
        prefix=path,
        depth=depth + 1,
        max_depth=max_depth,
        seen_paths=seen_paths,
    )
    return Section(title=title, contents=children)
