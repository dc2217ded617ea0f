"""Shared test fixtures for the fictionzone test suite."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

ORIGIN = "https://fictionzone.net"
NOVEL_PATH = "novel/the-ashen-crown"


def fixture_text(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


class FakeClock:
    """Callable clock for NovelIdCache; advanced manually by tests."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> None:
        self.now += timedelta(**delta)


@pytest.fixture()
def reference_time() -> datetime:
    return datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


@pytest.fixture()
def clock(reference_time: datetime) -> FakeClock:
    return FakeClock(reference_time)


@pytest.fixture()
def detail_html() -> str:
    return fixture_text("novel_detail.html")


@pytest.fixture()
def minimal_html() -> str:
    return fixture_text("novel_minimal.html")


@pytest.fixture()
def not_found_html() -> str:
    return fixture_text("not_found.html")


@pytest.fixture()
def library_html() -> str:
    return fixture_text("library.html")


@pytest.fixture()
def chapter_html() -> str:
    return fixture_text("chapter.html")
