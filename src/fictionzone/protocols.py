"""Protocol interfaces for swappable components.

Extractors and PluginContext reference these protocols, not the concrete
implementations. This allows:
- Tests to use lightweight in-memory fetchers and fixture documents
- The HTML backend to be swapped without touching extraction logic
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import httpx


class FetcherProtocol(Protocol):
    """Interface for the HTTP fetch collaborator."""

    async def fetch(self, url: str) -> str: ...

    async def post_json(self, url: str, payload: dict[str, Any]) -> httpx.Response: ...


class TextFetcherProtocol(Protocol):
    """Anything that turns a URL into page text (the fetcher or the memoizer)."""

    async def fetch(self, url: str) -> str: ...


class DocumentQuery(Protocol):
    """Selector-based read access to a parsed HTML document or element."""

    def select(self, selector: str) -> list[DocumentQuery]: ...

    def text(self, selector: str | None = None) -> str: ...

    def texts(self, selector: str) -> list[str]: ...

    def attr(self, name: str, selector: str | None = None) -> str | None: ...

    def inner_html(self, selector: str) -> str | None: ...
