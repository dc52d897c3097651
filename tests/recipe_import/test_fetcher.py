"""Tests for the default page fetcher."""

import asyncio
from types import SimpleNamespace

import httpx
import pytest

from recipe_draft.recipe_import import fetcher
from recipe_draft.recipe_import.fetcher import FetchError, browser_headers, fetch_page


def _fetch(url: str, handler):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_page(url, client=client)

    return asyncio.run(run())


class TestFetchPage:
    """Tests for fetch_page against a mock transport."""

    def test_returns_status_and_body(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>ok</html>")

        page = _fetch("https://example.com/recipe", handler)

        assert page.status_code == 200
        assert page.body == b"<html>ok</html>"
        assert page.url == "https://example.com/recipe"

    def test_non_success_status_is_returned(self):
        def handler(request):
            return httpx.Response(404, content=b"not found")

        page = _fetch("https://example.com/missing", handler)
        assert page.status_code == 404

    def test_sends_browser_headers(self):
        seen = {}

        def handler(request):
            seen.update(request.headers)
            return httpx.Response(200, content=b"")

        _fetch("https://example.com/recipe", handler)

        assert seen["user-agent"] == browser_headers()["User-Agent"]
        assert seen["accept-language"] == browser_headers()["Accept-Language"]
        assert "text/html" in seen["accept"]

    def test_timeout_raises_fetch_error(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(FetchError, match="timed out"):
            _fetch("https://example.com/slow", handler)

    def test_transport_error_raises_fetch_error(self):
        def handler(request):
            raise httpx.ConnectError("no route", request=request)

        with pytest.raises(FetchError):
            _fetch("https://example.com/down", handler)

    def test_oversized_body_rejected(self, monkeypatch):
        monkeypatch.setattr(
            fetcher,
            "settings",
            SimpleNamespace(
                user_agent="test-agent",
                accept_language="en",
                request_timeout=1.0,
                max_page_bytes=10,
            ),
        )

        def handler(request):
            return httpx.Response(200, content=b"x" * 11)

        with pytest.raises(FetchError, match="too large"):
            _fetch("https://example.com/huge", handler)
