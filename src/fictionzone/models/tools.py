"""Input models for the MCP tool handlers."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class PageInput(BaseModel):
    page: int = Field(default=1, ge=1)


class SearchInput(BaseModel):
    query: str
    page: int = Field(default=1, ge=1)

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("query must not be empty")
        if len(v) > 500:
            raise ValueError("query must not exceed 500 characters")
        return v


class NovelPathInput(BaseModel):
    path: str

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("path must not be empty")
        if len(v) > 2048:
            raise ValueError("path must not exceed 2048 characters")
        if "://" in v or v.startswith("//"):
            raise ValueError("path must be relative to the site, not an absolute URL")
        return v


class ChapterPageInput(NovelPathInput):
    page: int = Field(default=1, ge=1)
