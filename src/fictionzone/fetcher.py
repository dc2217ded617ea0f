"""HTTP fetch collaborator.

All network I/O goes through a single Fetcher instance owned by the
PluginContext. The Fetcher receives an httpx.AsyncClient via constructor
injection; whoever builds the context owns the client lifecycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog

from fictionzone.errors import FetchError

if TYPE_CHECKING:
    from fictionzone.config import SiteSettings

log = structlog.get_logger()


def build_http_client(settings: SiteSettings) -> httpx.AsyncClient:
    """Create the shared httpx client. Called once per context."""
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers={"User-Agent": settings.user_agent},
        limits=httpx.Limits(
            max_connections=10,
            max_keepalive_connections=5,
        ),
    )


class Fetcher:
    """Thin wrapper over httpx that normalises transport errors."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, url: str) -> str:
        """GET a page and return its body text.

        The body is returned whatever the status code: an error page simply
        fails the structural checks of whichever extractor reads it.
        """
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(f"Network error fetching {url}: {exc}") from exc

        if not response.is_success:
            log.warning("fetch_non_success", url=url, status_code=response.status_code)

        log.info(
            "fetch_complete",
            url=url,
            status_code=response.status_code,
            content_length=len(response.text),
        )
        return response.text

    async def post_json(self, url: str, payload: dict[str, Any]) -> httpx.Response:
        """POST a JSON body. Status handling is left to the caller."""
        try:
            response = await self._client.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise FetchError(f"Network error posting to {url}: {exc}") from exc

        log.info("post_complete", url=url, status_code=response.status_code)
        return response
