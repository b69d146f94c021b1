"""Load an index from JSON text or a local file."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from docindex.config import DOCINDEX_ENCODING
from docindex.exceptions import MalformedIndexError
from docindex.parser import parse
from docindex.schemas import DocIndex

logger = logging.getLogger(__name__)


def loads_index(text: str | bytes) -> DocIndex:
    """Decode JSON text and parse it.

    JSON objects that repeat a key are rejected instead of silently keeping
    the last value.

    Raises:
        MalformedIndexError: If the text is not valid JSON, cannot be
            decoded, is nested too deeply for the decoder, repeats a key, or
            does not describe a valid index.
    """
    try:
        raw = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as exc:
        raise MalformedIndexError(f"invalid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedIndexError(f"cannot decode index text: {exc}") from exc
    except RecursionError:
        raise MalformedIndexError("nesting too deep to decode") from None
    return parse(raw)


def load_index(path: str | Path, encoding: str = DOCINDEX_ENCODING) -> DocIndex:
    """Read and parse an index file.

    Args:
        path: Path to the ``index.json`` file.
        encoding: Text encoding of the file.

    Returns:
        The parsed index.

    Raises:
        OSError: If the file cannot be read.
        MalformedIndexError: If the content cannot be decoded with
            ``encoding`` or is not a valid index.
    """
    path = Path(path)
    logger.debug("Loading index from %s", path)
    return loads_index(_decode(path, path.read_bytes(), encoding))


async def load_index_async(path: str | Path, encoding: str = DOCINDEX_ENCODING) -> DocIndex:
    """Read and parse an index file without blocking the event loop."""
    path = Path(path)
    logger.debug("Loading index from %s", path)
    data = await read_bytes_async(path)
    return loads_index(_decode(path, data, encoding))


async def read_bytes_async(path: Path) -> bytes:
    """Read a file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.

    Returns:
        The raw file contents.
    """
    return await asyncio.to_thread(path.read_bytes)


def _decode(path: Path, data: bytes, encoding: str) -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise MalformedIndexError(f"not valid {encoding}: {exc}", location=str(path)) from exc


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise MalformedIndexError(f"duplicate JSON object key {key!r}")
        result[key] = value
    return result
