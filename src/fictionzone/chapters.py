"""Paginated chapter lists from the JSON chapter API.

The API is keyed by the novel's internal identifier rather than its path.
The identifier comes from the NovelIdCache; on a miss the detail page is
parsed once to repopulate it before giving up.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from fictionzone.dates import parse_timestamp
from fictionzone.detail import parse_novel
from fictionzone.errors import IdentifierResolutionError, UpstreamApiError
from fictionzone.models.api import ChapterListRequest, ChapterListResponse
from fictionzone.models.catalog import ChapterItem, SourcePage

if TYPE_CHECKING:
    from fictionzone.state import PluginContext

log = structlog.get_logger()


async def resolve_novel_id(novel_path: str, ctx: PluginContext) -> str:
    novel_id = ctx.novel_ids.get(novel_path)
    if novel_id is None:
        log.info("novel_id_cache_miss", component="parse_page", novel_path=novel_path)
        await parse_novel(novel_path, ctx)
        novel_id = ctx.novel_ids.get(novel_path)
    if novel_id is None:
        raise IdentifierResolutionError(novel_path)
    return novel_id


def to_source_page(data: ChapterListResponse, novel_path: str) -> SourcePage:
    return SourcePage(
        chapters=[
            ChapterItem(
                name=record.title,
                release_time=parse_timestamp(record.created_at),
                path=f"{novel_path}/{record.slug}",
            )
            for record in data.chapters
        ]
    )


async def parse_page(novel_path: str, page: int, ctx: PluginContext) -> SourcePage:
    bound = log.bind(component="parse_page", novel_path=novel_path, page=page)
    try:
        novel_id = await resolve_novel_id(novel_path, ctx)

        request = ChapterListRequest(path=f"/chapter/all/{novel_id}", query={"page": page})
        response = await ctx.fetcher.post_json(
            ctx.url(ctx.settings.site.api_path),
            request.model_dump(),
        )
        if not response.is_success:
            raise UpstreamApiError(response.status_code)

        result = to_source_page(ChapterListResponse.model_validate(response.json()), novel_path)
    except Exception:
        bound.error("parse_page_failed", exc_info=True)
        raise

    bound.info("parse_page_complete", novel_id=novel_id, chapter_count=len(result.chapters))
    return result
