"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
import logging
import sqlite3
from enum import Enum
from pathlib import Path
from typing import Any

import typer

from core.config import Settings, get_settings
from core.parser_config import ParserConfigError, load_parser_config
from persistence.cache import ContentCache
from schemas.config import ParserConfig
from services.log_parser import LogParser

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    error = "error"
    warn = "warn"
    info = "info"
    debug = "debug"


_LOG_LEVELS = {
    LogLevel.error: logging.ERROR,
    LogLevel.warn: logging.WARNING,
    LogLevel.info: logging.INFO,
    LogLevel.debug: logging.DEBUG,
}


def resolve_log_level(value: LogLevel | str | None) -> LogLevel:
    if isinstance(value, LogLevel):
        return value
    cleaned = (value or "").strip().lower()
    if cleaned == "warning":
        cleaned = "warn"
    try:
        return LogLevel(cleaned)
    except ValueError:
        return LogLevel.warn


def configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(levelname)s: %(message)s",
        force=True,
    )


def emit_json(data: Any) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


def read_lines(path: Path) -> list[str]:
    """Split a log file into lines, dropping ``\\r`` and a trailing empty line."""
    text = path.read_text(encoding="utf-8")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_config_or_exit(config_path: Path | None, settings: Settings | None = None) -> ParserConfig:
    resolved = config_path or (settings or get_settings()).config_path
    try:
        return load_parser_config(resolved)
    except ParserConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def open_cache(cache_dir: Path) -> ContentCache | None:
    try:
        return ContentCache.open(cache_dir)
    except (sqlite3.Error, OSError) as exc:
        logger.warning("Cache unavailable at %s, parsing without it: %s", cache_dir, exc)
        return None


def build_log_parser(config: ParserConfig, *, cache: ContentCache | None) -> LogParser:
    return LogParser(
        config.reg_pattern_list,
        config.finished_reg_pattern_list,
        cache=cache,
        max_thread_num=config.max_thread_num,
        min_tasks_per_thread=config.min_task_num_per_thread,
    )


__all__ = [
    "LogLevel",
    "build_log_parser",
    "configure_logging",
    "emit_json",
    "load_config_or_exit",
    "open_cache",
    "read_lines",
    "resolve_log_level",
]
