"""Absolute URL construction against the configured site origin."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlencode, urljoin


def build_url(origin: str, path: str, params: Mapping[str, str | int] | None = None) -> str:
    """Resolve ``path`` against ``origin`` and append ``params`` in order.

    ``build_url("https://fictionzone.net", "/library", {"page": 2})``
    → ``"https://fictionzone.net/library?page=2"``. Parameters are appended to
    any query string already present on ``path``.
    """
    url = urljoin(origin if origin.endswith("/") else f"{origin}/", path)
    if not params:
        return url
    query = urlencode([(key, str(value)) for key, value in params.items()])
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def normalise_path(href: str) -> str:
    """Strip a single leading and a single trailing slash from ``href``."""
    if href.startswith("/"):
        href = href[1:]
    if href.endswith("/"):
        href = href[:-1]
    return href
