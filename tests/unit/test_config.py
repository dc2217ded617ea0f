"""Unit tests for configuration defaults and overrides."""

from __future__ import annotations

import pytest

from fictionzone.config import DEFAULT_ORIGIN, Settings


class TestDefaults:
    def test_site_defaults(self) -> None:
        settings = Settings()
        assert settings.site.origin == DEFAULT_ORIGIN == "https://fictionzone.net"
        assert settings.site.api_path == "/api/__api_party/api-v1"

    def test_novel_id_ttl_is_one_hour(self) -> None:
        assert Settings().cache.novel_id_ttl_seconds == 3600

    def test_logging_defaults(self) -> None:
        settings = Settings()
        assert settings.logging.level == "INFO"
        assert settings.logging.format == "json"


class TestOverrides:
    def test_init_args(self) -> None:
        settings = Settings(site={"origin": "https://mirror.example"})
        assert settings.site.origin == "https://mirror.example"
        assert settings.site.api_path == "/api/__api_party/api-v1"

    def test_nested_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FICTIONZONE__CACHE__NOVEL_ID_TTL_SECONDS", "60")
        assert Settings().cache.novel_id_ttl_seconds == 60

    def test_invalid_log_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            Settings(logging={"level": "VERBOSE"})
