"""In-process caches owned by a PluginContext.

Two caches, both plain dicts with no locking. Everything runs on one event
loop and no method awaits between reading and writing its dict, so each
operation is atomic with respect to other tasks.

- ``NovelIdCache``: novel path -> identifier mined from hydration data,
  valid for a fixed TTL, expired entries ignored on read.
- ``RequestCache``: URL -> fetch task, shared by every caller of that URL
  for the lifetime of the cache.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import structlog

from fictionzone.models.cache import NovelIdCacheEntry

if TYPE_CHECKING:
    from fictionzone.protocols import TextFetcherProtocol

log = structlog.get_logger()

DEFAULT_NOVEL_ID_TTL = timedelta(hours=1)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class NovelIdCache:
    """Maps novel paths to their internal identifiers."""

    def __init__(
        self,
        ttl: timedelta = DEFAULT_NOVEL_ID_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, NovelIdCacheEntry] = {}

    def get(self, novel_path: str) -> str | None:
        """Return the identifier if one was cached less than ``ttl`` ago."""
        entry = self._entries.get(novel_path)
        if entry is None:
            return None
        if self._clock() - entry.cached_at >= self._ttl:
            log.debug("novel_id_expired", novel_path=novel_path)
            return None
        return entry.novel_id

    def set(self, novel_path: str, novel_id: str) -> None:
        self._entries[novel_path] = NovelIdCacheEntry(novel_id=novel_id, cached_at=self._clock())


class RequestCache:
    """Memoizes page fetches by exact URL.

    The first caller for a URL starts the fetch as a task and stores it before
    awaiting; later callers await the same task, whether it is still running
    or long finished. Entries are never refreshed, so at most one request is
    made per URL. A failed fetch stays cached and re-raises for every caller.
    """

    def __init__(self, fetcher: TextFetcherProtocol) -> None:
        self._fetcher = fetcher
        self._tasks: dict[str, asyncio.Task[str]] = {}

    async def fetch(self, url: str) -> str:
        task = self._tasks.get(url)
        if task is None:
            task = asyncio.ensure_future(self._fetcher.fetch(url))
            self._tasks[url] = task
        else:
            log.debug("request_cache_hit", url=url, pending=not task.done())
        # Shielded so that one cancelled caller does not cancel the shared fetch.
        return await asyncio.shield(task)

    def clear(self) -> None:
        """Forget every memoized URL. In-flight tasks keep running for their awaiters."""
        self._tasks.clear()

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, url: object) -> bool:
        return url in self._tasks
