"""Cache management commands."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from dataclasses import asdict
from pathlib import Path
from typing import Iterator

import typer

from cli.common import emit_json
from core.config import get_settings
from persistence.cache import CACHE_DB_NAME, ContentCache


app = typer.Typer(
    help="缓存查看与清理",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
    options_metavar="[选项]",
    subcommand_metavar="命令 [参数]",
)


@app.command("stats", help="查看缓存状态")
def cache_stats() -> None:
    cache_dir = get_settings().cache_dir
    with _unreadable_cache_exits(cache_dir):
        cache = _open_existing(cache_dir)
        if cache is None:
            emit_json({"path": str(cache_dir / CACHE_DB_NAME), "records": 0, "exists": False})
            return
        payload = {"path": str(cache.store.path), "exists": True}
        payload.update(asdict(cache.stats()))
    emit_json(payload)


@app.command("list", help="列出缓存记录")
def cache_list(
    limit: int = typer.Option(
        20,
        "--limit",
        min=1,
        help="最多输出的记录数",
    ),
) -> None:
    cache_dir = get_settings().cache_dir
    with _unreadable_cache_exits(cache_dir):
        cache = _open_existing(cache_dir)
        if cache is None:
            emit_json([])
            return
        rows = cache.store.list_records(limit=limit)
    emit_json(
        [
            {**asdict(row), "id": str(row.id), "created_at": row.created_at.isoformat()}
            for row in rows
        ]
    )


@app.command("clear", help="清理全部缓存")
def cache_clear() -> None:
    cache_dir = get_settings().cache_dir
    with _unreadable_cache_exits(cache_dir):
        cache = _open_existing(cache_dir)
        removed = cache.clear() if cache is not None else 0
    emit_json({"removed": removed})


@app.command("prune", help="清理过期缓存")
def cache_prune(
    days: int = typer.Option(
        30,
        "--days",
        min=1,
        help="删除超过指定天数的缓存条目",
    ),
) -> None:
    cache_dir = get_settings().cache_dir
    with _unreadable_cache_exits(cache_dir):
        cache = _open_existing(cache_dir)
        if cache is None:
            emit_json({"removed": 0, "reason": "cache_missing"})
            return
        removed = cache.prune_older_than(days=days)
    emit_json({"removed": removed})


def _open_existing(cache_dir: Path) -> ContentCache | None:
    if not (cache_dir / CACHE_DB_NAME).exists():
        return None
    return ContentCache.open(cache_dir)


@contextmanager
def _unreadable_cache_exits(cache_dir: Path) -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        emit_json(
            {"path": str(cache_dir / CACHE_DB_NAME), "exists": True, "error": str(exc)}
        )
        raise typer.Exit(code=1) from exc


__all__ = ["app"]
