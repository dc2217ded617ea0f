"""Chapter body extraction."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from fictionzone import markup
from fictionzone.document import load_document
from fictionzone.sanitizer import sanitize_content

if TYPE_CHECKING:
    from fictionzone.state import PluginContext

log = structlog.get_logger()


async def parse_chapter(chapter_path: str, ctx: PluginContext) -> str:
    """Return the sanitized inner HTML of the chapter body, or ``""`` if there is none."""
    bound = log.bind(component="parse_chapter", chapter_path=chapter_path)
    try:
        body = await ctx.requests.fetch(ctx.url(chapter_path))
        content = load_document(body).inner_html(markup.CHAPTER_CONTENT)
    except Exception:
        bound.error("parse_chapter_failed", exc_info=True)
        raise

    if content is None:
        bound.warning("chapter_content_missing")
    return sanitize_content(content or "")
