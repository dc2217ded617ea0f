"""Novel detail page extraction.

Besides the novel's metadata and first page of chapters, the detail page is
the only place the novel's internal identifier can be found. Every
successful parse that discovers one refreshes the context's NovelIdCache.

Only the title is required; every other field falls back to an empty value
when its element is missing.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

from fictionzone import markup
from fictionzone.dates import parse_ago
from fictionzone.document import load_document
from fictionzone.errors import StructuralParseError
from fictionzone.hydration import extract_novel_id
from fictionzone.models.catalog import ChapterItem, NovelStatus, SourceNovel
from fictionzone.urls import normalise_path

if TYPE_CHECKING:
    from datetime import datetime

    from fictionzone.protocols import DocumentQuery
    from fictionzone.state import PluginContext

log = structlog.get_logger()

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def classify_status(label: str) -> NovelStatus:
    """Exactly "Ongoing" is ongoing; anything else, even unknown labels, is completed."""
    return NovelStatus.ONGOING if label.strip() == markup.ONGOING_LABEL else NovelStatus.COMPLETED


def parse_total_pages(label: str) -> int:
    """Leading integer of the last pager item; 1 when absent or not positive."""
    match = _LEADING_INT_RE.match(label)
    if match is None:
        return 1
    value = int(match.group(1))
    return value if value >= 1 else 1


def extract_chapters(document: DocumentQuery, now: datetime | None = None) -> list[ChapterItem]:
    chapters: list[ChapterItem] = []
    for anchor in document.select(markup.CHAPTER_LINKS):
        href = anchor.attr("href")
        if not href:
            continue
        chapters.append(
            ChapterItem(
                name=anchor.text(markup.CHAPTER_TITLE),
                release_time=parse_ago(anchor.text(markup.CHAPTER_DATE), now=now),
                path=normalise_path(href),
            )
        )
    return chapters


def extract_novel(
    document: DocumentQuery,
    novel_path: str,
    now: datetime | None = None,
) -> tuple[SourceNovel, str | None]:
    """Parse a detail page into a SourceNovel and the discovered identifier.

    Raises ``StructuralParseError`` when the title or the hydration payload
    is missing.
    """
    name = document.text(markup.NOVEL_TITLE).strip()
    if not name:
        raise StructuralParseError("Novel title not found")

    payload = document.inner_html(markup.HYDRATION_PAYLOAD)
    if not payload:
        raise StructuralParseError("Nuxt data not found")
    novel_id = extract_novel_id(payload)

    genres = [*document.texts(markup.NOVEL_GENRES), *document.texts(markup.NOVEL_TAGS)]

    novel = SourceNovel(
        path=novel_path,
        name=name,
        author=document.text(markup.NOVEL_AUTHOR).strip(),
        cover=document.attr("src", markup.NOVEL_COVER),
        genres=",".join(genres),
        summary=document.text(markup.NOVEL_SUMMARY),
        status=classify_status(document.text(markup.NOVEL_STATUS)),
        chapters=extract_chapters(document, now=now),
        total_pages=parse_total_pages(document.text(markup.LAST_PAGE)),
    )
    return novel, novel_id


async def parse_novel(novel_path: str, ctx: PluginContext) -> SourceNovel:
    bound = log.bind(component="parse_novel", novel_path=novel_path)
    try:
        body = await ctx.requests.fetch(ctx.url(novel_path))
        novel, novel_id = extract_novel(load_document(body), novel_path)
    except Exception:
        bound.error("parse_novel_failed", exc_info=True)
        raise

    if novel_id:
        ctx.novel_ids.set(novel_path, novel_id)
    else:
        bound.warning("novel_id_not_found")

    bound.info(
        "parse_novel_complete",
        novel_id=novel_id,
        chapter_count=len(novel.chapters),
        total_pages=novel.total_pages,
    )
    return novel
