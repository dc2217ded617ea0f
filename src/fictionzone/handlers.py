"""Tool handlers.

Each handler validates its arguments, delegates to an extractor with the
PluginContext, and returns a JSON-ready dict. No MCP or FastMCP imports;
server.py handles the MCP wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from fictionzone.catalog import popular_novels, search_novels
from fictionzone.chapters import parse_page
from fictionzone.content import parse_chapter
from fictionzone.detail import parse_novel
from fictionzone.errors import InvalidInputError
from fictionzone.models.tools import ChapterPageInput, NovelPathInput, PageInput, SearchInput

if TYPE_CHECKING:
    from fictionzone.state import PluginContext

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate(model: type[ModelT], suggestion: str, **values: Any) -> ModelT:
    try:
        return model(**values)
    except ValidationError as exc:
        raise InvalidInputError(message=str(exc), suggestion=suggestion) from exc


async def handle_popular_novels(page: int, ctx: PluginContext) -> dict:
    structlog.get_logger().bind(tool="popular_novels", page=page).info("handler_called")
    validated = _validate(PageInput, "Provide a page number >= 1.", page=page)
    items = await popular_novels(validated.page, ctx)
    return {"novels": [item.model_dump(mode="json") for item in items]}


async def handle_search_novels(query: str, page: int, ctx: PluginContext) -> dict:
    structlog.get_logger().bind(tool="search_novels", query=query, page=page).info(
        "handler_called"
    )
    validated = _validate(
        SearchInput,
        "Provide a non-empty search term (max 500 chars) and a page number >= 1.",
        query=query,
        page=page,
    )
    items = await search_novels(validated.query, validated.page, ctx)
    return {"novels": [item.model_dump(mode="json") for item in items]}


async def handle_parse_novel(path: str, ctx: PluginContext) -> dict:
    structlog.get_logger().bind(tool="parse_novel", path=path).info("handler_called")
    validated = _validate(
        NovelPathInput, "Provide a site-relative novel path such as 'novel/my-novel'.", path=path
    )
    novel = await parse_novel(validated.path, ctx)
    return novel.model_dump(mode="json")


async def handle_parse_page(path: str, page: int, ctx: PluginContext) -> dict:
    structlog.get_logger().bind(tool="parse_page", path=path, page=page).info("handler_called")
    validated = _validate(
        ChapterPageInput,
        "Provide a site-relative novel path and a page number >= 1.",
        path=path,
        page=page,
    )
    result = await parse_page(validated.path, validated.page, ctx)
    return result.model_dump(mode="json")


async def handle_parse_chapter(path: str, ctx: PluginContext) -> dict:
    structlog.get_logger().bind(tool="parse_chapter", path=path).info("handler_called")
    validated = _validate(
        NovelPathInput, "Provide a site-relative chapter path.", path=path
    )
    content = await parse_chapter(validated.path, ctx)
    return {"path": validated.path, "content": content}
