"""Fetch a published index over HTTP."""

from __future__ import annotations

import logging

import httpx

from docindex.config import DOCINDEX_ENCODING, DOCINDEX_FETCH_MAX_BYTES
from docindex.exceptions import MalformedIndexError
from docindex.http_utils import build_client, get_with_retries
from docindex.loader import loads_index
from docindex.schemas import DocIndex

logger = logging.getLogger(__name__)

# Static hosts often serve raw JSON as text/plain or as a generic binary.
_TEXT_CONTENT_TYPES = frozenset({"text/plain", "application/octet-stream"})


async def fetch_index(url: str, *, client: httpx.AsyncClient | None = None) -> DocIndex:
    """Download and parse an ``index.json``.

    Args:
        url: Location of the index document.
        client: Optional shared httpx.AsyncClient.

    Returns:
        The parsed index.

    Raises:
        IndexNotFoundError: If the server answers 404.
        FetchError: If the download fails after retries.
        MalformedIndexError: If the response is not a JSON document within
            the size limit, or does not describe a valid index.
    """
    if client is None:
        async with build_client() as new_client:
            response = await get_with_retries(new_client, url)
    else:
        response = await get_with_retries(client, url)
    return index_from_response(response)


def index_from_response(response: httpx.Response) -> DocIndex:
    """Check the response headers and body, then parse the body as an index."""
    url = str(response.request.url)
    content_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type and not (content_type.endswith("json") or content_type in _TEXT_CONTENT_TYPES):
        raise MalformedIndexError(f"expected a JSON document, got {content_type}", location=url)

    body = response.content
    if len(body) > DOCINDEX_FETCH_MAX_BYTES:
        raise MalformedIndexError(
            f"document is {len(body)} bytes, limit is {DOCINDEX_FETCH_MAX_BYTES}",
            location=url,
        )

    encoding = response.charset_encoding or DOCINDEX_ENCODING
    try:
        text = body.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise MalformedIndexError(f"cannot decode body as {encoding}: {exc}", location=url) from exc

    logger.debug("Fetched %d bytes from %s", len(body), url)
    return loads_index(text)
