"""HTTP client construction and retrying GETs for remote indexes."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from docindex.config import (
    DOCINDEX_FETCH_BACKOFF_S,
    DOCINDEX_FETCH_MAX_RETRIES,
    DOCINDEX_FETCH_TIMEOUT_S,
    DOCINDEX_USER_AGENT,
)
from docindex.exceptions import FetchError, IndexNotFoundError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def build_client(**kwargs) -> httpx.AsyncClient:
    """Create an AsyncClient with the configured timeout and User-Agent."""
    kwargs.setdefault("timeout", httpx.Timeout(DOCINDEX_FETCH_TIMEOUT_S))
    kwargs.setdefault("headers", {"User-Agent": DOCINDEX_USER_AGENT, "Accept": "application/json"})
    kwargs.setdefault("follow_redirects", True)
    kwargs.setdefault("max_redirects", _MAX_REDIRECTS)
    return httpx.AsyncClient(**kwargs)


def backoff_delay(attempt: int) -> float:
    """Seconds to wait before retry number ``attempt`` (1-based)."""
    return DOCINDEX_FETCH_BACKOFF_S * (2 ** (attempt - 1))


async def get_with_retries(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """GET ``url``, retrying connection failures and transient statuses.

    Args:
        client: Client used for every attempt.
        url: Location of the index document.

    Returns:
        The first successful response.

    Raises:
        IndexNotFoundError: On 404; not retried.
        FetchError: On any other error status, or once retries are exhausted.
    """
    attempts = DOCINDEX_FETCH_MAX_RETRIES + 1
    last_failure = "no attempt made"

    for attempt in range(attempts):
        if attempt:
            delay = backoff_delay(attempt)
            logger.debug("Retrying %s in %.2fs after %s", url, delay, last_failure)
            await asyncio.sleep(delay)

        try:
            response = await client.get(url)
        except httpx.RequestError as exc:
            last_failure = f"{type(exc).__name__}: {exc}"
            continue

        if response.status_code == 404:
            raise IndexNotFoundError(f"No index published at {url}")
        if response.status_code in RETRY_STATUS_CODES:
            last_failure = f"HTTP {response.status_code}"
            continue
        if response.is_error:
            raise FetchError(f"HTTP {response.status_code} from {url}")
        return response

    raise FetchError(f"Failed to fetch {url} after {attempts} attempts: {last_failure}")
