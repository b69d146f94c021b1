"""Serialize a ``DocIndex`` back to its declarative source shape."""

from __future__ import annotations

import json
from typing import Any

from docindex.schemas import DocIndex


def dump(index: DocIndex) -> dict[str, Any]:
    """Return the index as plain data, in the order ``parse`` reads it.

    Leaves become ``{"title": ...}`` and sections
    ``{"title": ..., "contents": {...}}``. Language sections always carry
    ``title``, ``description`` and ``contents``.
    """
    raw: dict[str, Any] = {"languages": list(index.languages)}
    if index.category is not None:
        raw["category"] = index.category
    for code in index.languages:
        raw[code] = index.sections[code].model_dump()
    return raw


def dumps(index: DocIndex, *, indent: int | None = 2) -> str:
    """Return the index as JSON text."""
    return json.dumps(dump(index), indent=indent, ensure_ascii=False)
