"""Library listing and search extraction.

Popular and search listings share one page layout; only the URL differs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from fictionzone import markup
from fictionzone.document import load_document
from fictionzone.models.catalog import NovelItem
from fictionzone.urls import normalise_path

if TYPE_CHECKING:
    from fictionzone.protocols import DocumentQuery
    from fictionzone.state import PluginContext

log = structlog.get_logger()

LIBRARY_PATH = "/library"
SEARCH_SORT = "views-all"


def extract_novel_items(document: DocumentQuery) -> list[NovelItem]:
    """Extract every novel card from a listing page. Cards without a link are skipped."""
    items: list[NovelItem] = []
    for card in document.select(markup.LIST_CARD):
        href = card.attr("href", markup.LIST_LINK)
        if not href:
            continue
        items.append(
            NovelItem(
                path=normalise_path(href),
                name=card.text(markup.LIST_TITLE).strip(),
                cover=card.attr("src", markup.LIST_COVER),
            )
        )
    return items


async def list_page(url: str, ctx: PluginContext) -> list[NovelItem]:
    bound = log.bind(component="list_page", url=url)
    try:
        body = await ctx.requests.fetch(url)
        items = extract_novel_items(load_document(body))
    except Exception:
        bound.error("list_page_failed", exc_info=True)
        raise
    bound.info("list_page_complete", item_count=len(items))
    return items


async def popular_novels(page: int, ctx: PluginContext) -> list[NovelItem]:
    return await list_page(ctx.url(LIBRARY_PATH, {"page": page}), ctx)


async def search_novels(term: str, page: int, ctx: PluginContext) -> list[NovelItem]:
    return await list_page(
        ctx.url(LIBRARY_PATH, {"query": term, "page": page, "sort": SEARCH_SORT}),
        ctx,
    )
