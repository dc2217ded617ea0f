from __future__ import annotations

from fictionzone.models.api import (
    ChapterListRequest,
    ChapterListResponse,
    ChapterRecord,
    HydrationRoute,
)
from fictionzone.models.cache import NovelIdCacheEntry
from fictionzone.models.catalog import (
    ChapterItem,
    NovelItem,
    NovelStatus,
    SourceNovel,
    SourcePage,
)
from fictionzone.models.tools import (
    ChapterPageInput,
    NovelPathInput,
    PageInput,
    SearchInput,
)

__all__ = [
    # catalog
    "NovelItem",
    "NovelStatus",
    "ChapterItem",
    "SourceNovel",
    "SourcePage",
    # api
    "ChapterRecord",
    "ChapterListRequest",
    "ChapterListResponse",
    "HydrationRoute",
    # cache
    "NovelIdCacheEntry",
    # tools
    "PageInput",
    "SearchInput",
    "NovelPathInput",
    "ChapterPageInput",
]
