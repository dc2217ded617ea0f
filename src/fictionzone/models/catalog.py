from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class NovelStatus(StrEnum):
    ONGOING = "Ongoing"
    COMPLETED = "Completed"


class NovelItem(BaseModel):
    """Single card from a library listing or search page."""

    path: str
    name: str
    cover: str | None = None


class ChapterItem(BaseModel):
    name: str
    release_time: str | None = None  # ISO-8601 UTC, "Z" suffix
    path: str  # Relative, no leading or trailing slash


class SourceNovel(BaseModel):
    """Full metadata for one novel plus the first page of its chapters."""

    path: str
    name: str = Field(min_length=1)
    author: str = ""
    cover: str | None = None
    genres: str = ""  # Genres then tags, comma-joined
    summary: str = ""
    status: NovelStatus = NovelStatus.COMPLETED
    chapters: list[ChapterItem] = []
    total_pages: int = Field(default=1, ge=1)


class SourcePage(BaseModel):
    """One page of chapters served by the chapter API."""

    chapters: list[ChapterItem] = []
