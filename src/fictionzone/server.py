"""MCP server entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Create the PluginContext via the FastMCP lifespan context manager
- Register tools
- Serve over stdio
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from mcp.server.fastmcp import Context, FastMCP
from mcp.types import CallToolResult, TextContent

import fictionzone.handlers as h
from fictionzone import __version__
from fictionzone.config import Settings
from fictionzone.errors import FictionZoneError
from fictionzone.fetcher import build_http_client
from fictionzone.state import PluginContext, build_context

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Logs go to stderr; stdout is reserved for the MCP JSON-RPC stream
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncGenerator[PluginContext, None]:
    """Create and tear down the context for the server's lifetime."""
    settings = Settings()
    _setup_logging(settings)

    log.info("server_starting", version=__version__, origin=settings.site.origin)

    http_client = build_http_client(settings.site)
    ctx = build_context(settings, http_client)

    log.info("server_started", version=__version__)

    try:
        yield ctx
    finally:
        await http_client.aclose()
        log.info("server_stopping", memoized_requests=len(ctx.requests))


# ---------------------------------------------------------------------------
# FastMCP instance and tool registration
# ---------------------------------------------------------------------------

mcp = FastMCP("fictionzone", lifespan=lifespan)
# FastMCP doesn't expose a version kwarg, so set it on the underlying Server
# so the MCP initialize handshake reports our version, not the SDK's.
mcp._mcp_server.version = __version__  # pyright: ignore[reportPrivateUsage]


def _serialise_tool_error(error: FictionZoneError) -> CallToolResult:
    """Convert a FictionZoneError to the MCP tool error result envelope."""
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(error.to_dict()))],
        isError=True,
    )


async def _run_tool(tool: str, call: Awaitable[dict]) -> object:
    try:
        return await call
    except FictionZoneError as exc:
        log.warning(
            "tool_error",
            tool=tool,
            code=exc.code,
            message=exc.message,
            recoverable=exc.recoverable,
        )
        return _serialise_tool_error(exc)
    except Exception:
        log.error("tool_unexpected_error", tool=tool, exc_info=True)
        raise


def _context(ctx: Context) -> PluginContext:
    return ctx.request_context.lifespan_context


@mcp.tool()
async def popular_novels(ctx: Context, page: int = 1) -> object:
    """List novels from the library page, most popular first."""
    return await _run_tool("popular_novels", h.handle_popular_novels(page, _context(ctx)))


@mcp.tool()
async def search_novels(query: str, ctx: Context, page: int = 1) -> object:
    """Search the library by title, sorted by total views."""
    return await _run_tool("search_novels", h.handle_search_novels(query, page, _context(ctx)))


@mcp.tool()
async def parse_novel(path: str, ctx: Context) -> object:
    """Fetch a novel's metadata and its first page of chapters.

    The result's total_pages tells how many chapter pages parse_page can serve.
    """
    return await _run_tool("parse_novel", h.handle_parse_novel(path, _context(ctx)))


@mcp.tool()
async def parse_page(path: str, ctx: Context, page: int = 1) -> object:
    """Fetch one page of a novel's chapter list from the chapter API."""
    return await _run_tool("parse_page", h.handle_parse_page(path, page, _context(ctx)))


@mcp.tool()
async def parse_chapter(path: str, ctx: Context) -> object:
    """Fetch the sanitized HTML body of a chapter."""
    return await _run_tool("parse_chapter", h.handle_parse_chapter(path, _context(ctx)))


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
