"""Application configuration and .env loading."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "watching_log_parser"


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_DIR_NAME / "config"


def default_cache_dir() -> Path:
    base = os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache"
    return Path(base) / APP_DIR_NAME


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    config_path: Path = Field(
        default_factory=default_config_path, validation_alias="WATCHLOG_CONFIG_PATH"
    )
    cache_dir: Path = Field(
        default_factory=default_cache_dir, validation_alias="WATCHLOG_CACHE_DIR"
    )
    cache_enabled: bool = Field(default=True, validation_alias="WATCHLOG_CACHE_ENABLED")
    log_level: str = Field(default="warn", validation_alias="WATCHLOG_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = [
    "APP_DIR_NAME",
    "Settings",
    "default_cache_dir",
    "default_config_path",
    "get_settings",
]
