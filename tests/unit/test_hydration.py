"""Unit tests for fictionzone.hydration."""

from __future__ import annotations

import pytest

from fictionzone.errors import StructuralParseError
from fictionzone.hydration import extract_novel_id, find_route


class TestExtractNovelId:
    def test_single_route(self) -> None:
        assert extract_novel_id('[{"path":"/novel/abc123"}]') == "abc123"

    def test_first_route_wins(self) -> None:
        payload = '[["ShallowReactive",1],{"data":2},{"path":"/novel/first"},{"path":"/novel/second"}]'
        assert extract_novel_id(payload) == "first"

    def test_non_string_path_is_skipped(self) -> None:
        assert extract_novel_id('[{"path":4},{"path":"/novel/xyz"}]') == "xyz"

    def test_null_elements_are_skipped(self) -> None:
        assert extract_novel_id('[null,{"path":"/novel/xyz"}]') == "xyz"

    def test_path_without_slash(self) -> None:
        assert extract_novel_id('[{"path":"xyz"}]') == "xyz"

    def test_trailing_slash_yields_none(self) -> None:
        assert extract_novel_id('[{"path":"/novel/"}]') is None

    def test_no_route_yields_none(self) -> None:
        assert extract_novel_id('[{"data":1},"/novel/not-a-route"]') is None

    def test_object_payload_yields_none(self) -> None:
        assert extract_novel_id('{"path":"/novel/abc"}') is None

    def test_empty_array_yields_none(self) -> None:
        assert extract_novel_id("[]") is None

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(StructuralParseError):
            extract_novel_id("[{not json")


class TestFindRoute:
    def test_returns_route_model(self) -> None:
        route = find_route([1, "a", {"path": "/novel/abc", "query": {"page": 1}}])
        assert route is not None
        assert route.path == "/novel/abc"

    def test_non_list_returns_none(self) -> None:
        assert find_route("not a list") is None
