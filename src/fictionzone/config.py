"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (FICTIONZONE__SITE__ORIGIN=https://...)
  2. fictionzone.yaml       (searched in cwd, then platform config dir)
  3. Hardcoded defaults

The config file is optional; all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_ORIGIN = "https://fictionzone.net"


def _find_config_file() -> str | None:
    """Return the path of the first fictionzone.yaml found, or None."""
    candidates = [
        Path("fictionzone.yaml"),
        Path(platformdirs.user_config_dir("fictionzone")) / "fictionzone.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class SiteSettings(BaseModel):
    origin: str = DEFAULT_ORIGIN
    api_path: str = "/api/__api_party/api-v1"
    user_agent: str = "fictionzone/1.0"
    timeout_seconds: float = 30.0


class CacheSettings(BaseModel):
    novel_id_ttl_seconds: int = 3600


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: FICTIONZONE__CACHE__NOVEL_ID_TTL_SECONDS=60
        env_prefix="FICTIONZONE__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    site: SiteSettings = SiteSettings()
    cache: CacheSettings = CacheSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
        )
