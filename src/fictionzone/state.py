"""Runtime context.

PluginContext is created once per host session (inside the FastMCP lifespan
context manager, or by a test fixture) and passed explicitly to every
extraction operation. It owns both caches, so independent contexts never
share cached identifiers or pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from fictionzone.cache import NovelIdCache, RequestCache
from fictionzone.fetcher import Fetcher
from fictionzone.urls import build_url

if TYPE_CHECKING:
    import httpx

    from fictionzone.config import Settings
    from fictionzone.protocols import FetcherProtocol


@dataclass
class PluginContext:
    """Holds all shared runtime state. Passed to every extractor."""

    settings: Settings
    fetcher: FetcherProtocol
    requests: RequestCache
    novel_ids: NovelIdCache
    http_client: httpx.AsyncClient | None = None

    def url(self, path: str, params: dict[str, str | int] | None = None) -> str:
        return build_url(self.settings.site.origin, path, params)


def build_context(settings: Settings, http_client: httpx.AsyncClient) -> PluginContext:
    """Wire a Fetcher and fresh caches around an existing httpx client."""
    fetcher = Fetcher(http_client)
    return PluginContext(
        settings=settings,
        fetcher=fetcher,
        requests=RequestCache(fetcher),
        novel_ids=NovelIdCache(ttl=timedelta(seconds=settings.cache.novel_id_ttl_seconds)),
        http_client=http_client,
    )
