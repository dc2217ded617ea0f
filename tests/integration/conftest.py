"""Integration test fixtures.

Provides a fully wired PluginContext around a real httpx client. Tests mock
the site with respx; shared HTML fixtures come from tests/conftest.py.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import httpx
import pytest

from fictionzone.config import Settings
from fictionzone.state import build_context

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

    from fictionzone.state import PluginContext


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Baseline env dict for subprocess-based MCP integration tests.

    Points the origin at an unroutable local port so no test can reach the
    real site, and runs from an empty directory so no local fictionzone.yaml
    is picked up.
    """
    env = os.environ.copy()
    env["FICTIONZONE__SITE__ORIGIN"] = "http://127.0.0.1:1"
    env["FICTIONZONE__SITE__TIMEOUT_SECONDS"] = "2"
    env["FICTIONZONE__LOGGING__LEVEL"] = "WARNING"
    env["HOME"] = str(tmp_path)
    return env


@pytest.fixture()
async def plugin_context() -> AsyncGenerator[PluginContext, None]:
    """Fresh context: empty caches, default settings."""
    async with httpx.AsyncClient() as client:
        yield build_context(Settings(), client)
