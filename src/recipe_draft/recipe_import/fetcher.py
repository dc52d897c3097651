"""
Page fetching.

The default fetch collaborator for the import pipeline. Anything with the
same signature (an async callable taking a URL and returning a RawPage)
can be injected instead.
"""

import logging

import httpx

from recipe_draft.config import settings
from recipe_draft.models import RawPage

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The page could not be retrieved at all."""


def browser_headers() -> dict[str, str]:
    """Browser-like headers; many recipe sites reject bare clients."""
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": settings.accept_language,
    }


async def fetch_page(url: str, client: httpx.AsyncClient | None = None) -> RawPage:
    """
    Fetch a URL and return its status and body.

    Non-2xx statuses are returned, not raised; judging them is the
    caller's job. Transport problems (DNS, TLS, timeouts) and oversized
    bodies raise FetchError.
    """
    try:
        if client is None:
            async with httpx.AsyncClient(
                follow_redirects=True,
                timeout=settings.request_timeout,
            ) as owned:
                response = await owned.get(url, headers=browser_headers())
        else:
            response = await client.get(url, headers=browser_headers())
    except httpx.TimeoutException as e:
        raise FetchError(f"Request timed out: {url}") from e
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    body = response.content
    if len(body) > settings.max_page_bytes:
        raise FetchError(f"Page too large ({len(body)} bytes): {url}")

    logger.debug(f"Fetched {url}: HTTP {response.status_code}, {len(body)} bytes")
    return RawPage(url=str(response.url), status_code=response.status_code, body=body)
