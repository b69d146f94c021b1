"""Tests for HTTP utilities module."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from docindex.exceptions import FetchError, IndexNotFoundError
from docindex.http_utils import RETRY_STATUS_CODES, backoff_delay, build_client, get_with_retries

URL = "https://docs.example.com/index.json"


def _scripted_client(*outcomes: int | Exception) -> tuple[httpx.AsyncClient, list[httpx.Request]]:
    """Client whose transport answers each request with the next outcome."""
    remaining = list(outcomes)
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        outcome = remaining.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return httpx.Response(outcome, json={"languages": ["en"], "en": {}})

    return httpx.AsyncClient(transport=httpx.MockTransport(handler)), seen


@pytest.fixture
def no_sleep() -> Iterator[AsyncMock]:
    with patch("docindex.http_utils.asyncio.sleep", new=AsyncMock()) as mock_sleep:
        yield mock_sleep


class TestRetryStatusCodes:
    """Tests for RETRY_STATUS_CODES constant."""

    def test_contains_expected_codes(self) -> None:
        assert RETRY_STATUS_CODES == frozenset({429, 500, 502, 503, 504})


class TestBackoffDelay:
    """Tests for backoff_delay."""

    def test_doubles_per_attempt(self) -> None:
        with patch("docindex.http_utils.DOCINDEX_FETCH_BACKOFF_S", 0.5):
            assert [backoff_delay(n) for n in (1, 2, 3)] == [0.5, 1.0, 2.0]


class TestBuildClient:
    """Tests for build_client."""

    @pytest.mark.asyncio
    async def test_sends_user_agent_and_accept(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="{}")

        async with build_client(transport=httpx.MockTransport(handler)) as client:
            await client.get(URL)

        assert seen[0].headers["Accept"] == "application/json"
        assert seen[0].headers["User-Agent"].startswith("docindex")


class TestGetWithRetries:
    """Tests for get_with_retries."""

    @pytest.mark.asyncio
    async def test_returns_response(self, no_sleep: AsyncMock) -> None:
        client, seen = _scripted_client(200)

        async with client:
            response = await get_with_retries(client, URL)

        assert response.json()["languages"] == ["en"]
        assert len(seen) == 1
        no_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_404_is_not_retried(self, no_sleep: AsyncMock) -> None:
        client, seen = _scripted_client(404, 200)

        async with client:
            with pytest.raises(IndexNotFoundError, match="No index published"):
                await get_with_retries(client, URL)

        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_other_error_status_fails_immediately(self, no_sleep: AsyncMock) -> None:
        client, seen = _scripted_client(403, 200)

        async with client:
            with pytest.raises(FetchError, match="HTTP 403"):
                await get_with_retries(client, URL)

        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_retries_transient_status(self, no_sleep: AsyncMock) -> None:
        client, seen = _scripted_client(503, 429, 200)

        async with client:
            response = await get_with_retries(client, URL)

        assert response.status_code == 200
        assert len(seen) == 3
        assert no_sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_retries_connection_errors(self, no_sleep: AsyncMock) -> None:
        client, _ = _scripted_client(httpx.ConnectError("refused"), 200)

        async with client:
            response = await get_with_retries(client, URL)

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_gives_up_after_retries(self, no_sleep: AsyncMock) -> None:
        client, seen = _scripted_client(*[500] * 10)

        with patch("docindex.http_utils.DOCINDEX_FETCH_MAX_RETRIES", 2):
            async with client:
                with pytest.raises(FetchError, match="after 3 attempts: HTTP 500"):
                    await get_with_retries(client, URL)

        assert len(seen) == 3
