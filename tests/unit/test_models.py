"""Unit tests for the pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fictionzone.models import (
    ChapterListRequest,
    ChapterListResponse,
    ChapterPageInput,
    NovelPathInput,
    PageInput,
    SearchInput,
    SourceNovel,
)


class TestChapterListResponse:
    def test_reads_underscore_data(self) -> None:
        data = ChapterListResponse.model_validate(
            {"_data": [{"title": "Ch 1", "slug": "chapter-1", "created_at": "2024-01-01T00:00:00Z"}]}
        )
        assert data.chapters[0].slug == "chapter-1"

    def test_missing_data_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChapterListResponse.model_validate({"data": []})


class TestChapterListRequest:
    def test_serialised_body(self) -> None:
        request = ChapterListRequest(path="/chapter/all/abc", query={"page": 3})
        assert request.model_dump() == {
            "path": "/chapter/all/abc",
            "query": {"page": 3},
            "method": "get",
            "headers": {"content-type": "application/json"},
        }


class TestSourceNovel:
    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SourceNovel(path="novel/a", name="")

    def test_total_pages_at_least_one(self) -> None:
        with pytest.raises(ValidationError):
            SourceNovel(path="novel/a", name="A", total_pages=0)


class TestToolInputs:
    def test_page_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PageInput(page=0)

    def test_search_query_stripped(self) -> None:
        assert SearchInput(query="  ashen  ").query == "ashen"

    def test_search_query_empty_rejected(self) -> None:
        with pytest.raises(ValidationError, match="query must not be empty"):
            SearchInput(query="   ")

    def test_search_query_too_long_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchInput(query="a" * 501)

    def test_path_absolute_url_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute URL"):
            NovelPathInput(path="https://evil.example/novel/a")

    def test_path_protocol_relative_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute URL"):
            NovelPathInput(path="//evil.example/x")

    def test_path_single_leading_slash_allowed(self) -> None:
        assert NovelPathInput(path="/novel/a").path == "/novel/a"

    def test_path_empty_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NovelPathInput(path="")

    def test_chapter_page_input(self) -> None:
        validated = ChapterPageInput(path=" novel/a ", page=2)
        assert validated.path == "novel/a"
        assert validated.page == 2
