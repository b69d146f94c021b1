"""Tests for fetching an index over HTTP."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from docindex.exceptions import IndexNotFoundError, MalformedIndexError
from docindex.fetch import fetch_index, index_from_response

URL = "https://docs.example.com/index.json"
BODY = '{"languages": ["en"], "en": {"contents": {"a.wiki": {"title": "Café"}}}}'


def _client(response: httpx.Response) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(lambda request: response))


def _response(content: bytes, content_type: str | None = "application/json") -> httpx.Response:
    headers = {"content-type": content_type} if content_type else {}
    return httpx.Response(200, content=content, headers=headers, request=httpx.Request("GET", URL))


class TestFetchIndex:
    """Tests for fetch_index."""

    @pytest.mark.asyncio
    async def test_parses_fetched_document(self) -> None:
        response = httpx.Response(200, text=BODY, headers={"content-type": "application/json"})

        async with _client(response) as client:
            index = await fetch_index(URL, client=client)

        assert index.section("en").contents["a.wiki"].title == "Café"

    @pytest.mark.asyncio
    async def test_opens_own_client_when_none_given(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text=BODY))

        with patch("docindex.fetch.build_client", return_value=httpx.AsyncClient(transport=transport)):
            index = await fetch_index(URL)

        assert index.languages == ("en",)

    @pytest.mark.asyncio
    async def test_propagates_not_found(self) -> None:
        async with _client(httpx.Response(404)) as client:
            with pytest.raises(IndexNotFoundError):
                await fetch_index(URL, client=client)

    @pytest.mark.asyncio
    async def test_rejects_malformed_document(self) -> None:
        async with _client(httpx.Response(200, text='{"languages": []}')) as client:
            with pytest.raises(MalformedIndexError, match="must not be empty"):
                await fetch_index(URL, client=client)


class TestIndexFromResponse:
    """Tests for index_from_response."""

    @pytest.mark.parametrize(
        "content_type",
        [
            "application/json",
            "application/json; charset=utf-8",
            "application/vnd.docs+json",
            "text/plain",
            "application/octet-stream",
            None,
        ],
    )
    def test_accepts_json_like_content_types(self, content_type: str | None) -> None:
        index = index_from_response(_response(BODY.encode("utf-8"), content_type))

        assert index.section("en").contents["a.wiki"].title == "Café"

    def test_rejects_html(self) -> None:
        with pytest.raises(MalformedIndexError, match="expected a JSON document, got text/html") as exc_info:
            index_from_response(_response(b"<html></html>", "text/html; charset=utf-8"))

        assert exc_info.value.location == URL

    def test_rejects_oversize_body(self) -> None:
        with patch("docindex.fetch.DOCINDEX_FETCH_MAX_BYTES", 10):
            with pytest.raises(MalformedIndexError, match="limit is 10"):
                index_from_response(_response(BODY.encode("utf-8")))

    def test_uses_declared_charset(self) -> None:
        response = _response(BODY.encode("latin-1"), "application/json; charset=latin-1")

        assert index_from_response(response).section("en").contents["a.wiki"].title == "Café"

    def test_rejects_undecodable_body(self) -> None:
        with pytest.raises(MalformedIndexError, match="cannot decode body as utf-8"):
            index_from_response(_response(b'{"languages": ["\xff"]}'))

    def test_rejects_unknown_charset(self) -> None:
        with pytest.raises(MalformedIndexError, match="cannot decode body"):
            index_from_response(_response(BODY.encode("utf-8"), "application/json; charset=no-such-codec"))
