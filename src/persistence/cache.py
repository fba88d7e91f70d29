"""Content-addressed cache of parsed watch records."""

from __future__ import annotations

import sqlite3
from datetime import timedelta, timezone
from pathlib import Path

from pydantic import ValidationError

from persistence.models import CacheStats, RecordRow
from persistence.sqlite_store import SqliteStore, now_utc
from parsing.temporal import seconds_from_midnight
from schemas.records import WatchRecord

CACHE_DB_NAME = "cache.db"


class CacheError(RuntimeError):
    """The cache could not serve or store a record."""


class CacheReadError(CacheError):
    pass


class CacheWriteError(CacheError):
    pass


class ContentCache:
    """Durable ``id -> WatchRecord`` store.

    Both directions raise :class:`CacheError` subclasses instead of degrading
    silently; deciding that a failed read is a miss and a failed write is only
    lost durability belongs to the caller.
    """

    def __init__(self, store: SqliteStore) -> None:
        self._store = store

    @classmethod
    def open(cls, cache_dir: str | Path) -> "ContentCache":
        return cls(SqliteStore(Path(cache_dir) / CACHE_DB_NAME))

    @property
    def store(self) -> SqliteStore:
        return self._store

    def get(self, key: int) -> WatchRecord | None:
        try:
            payload = self._store.get_serialized(key)
        except sqlite3.Error as exc:
            raise CacheReadError(f"Failed to read cache entry {key}: {exc}") from exc
        if payload is None:
            return None
        try:
            return WatchRecord.model_validate_json(payload)
        except ValidationError as exc:
            raise CacheReadError(f"Failed to decode cache entry {key}: {exc}") from exc

    def put(self, record: WatchRecord) -> None:
        try:
            payload = record.model_dump_json()
            self._store.upsert_record(_record_row(record), payload)
        except (sqlite3.Error, ValueError) as exc:
            raise CacheWriteError(f"Failed to store cache entry {record.id}: {exc}") from exc

    def stats(self) -> CacheStats:
        return self._store.stats()

    def clear(self) -> int:
        return self._store.clear()

    def prune_older_than(self, *, days: int) -> int:
        cutoff = now_utc() - timedelta(days=days)
        return self._store.delete_older_than(cutoff)


def _record_row(record: WatchRecord) -> RecordRow:
    logged_time = None
    if record.logged_at is not None:
        logged_time = int(record.logged_at.replace(tzinfo=timezone.utc).timestamp())
    return RecordRow(
        id=record.id,
        title=record.title,
        finished=record.finished,
        episode=record.episode,
        time_at_episode=(
            seconds_from_midnight(record.elapsed_time)
            if record.elapsed_time is not None
            else None
        ),
        season=record.season,
        logged_time=logged_time,
        note=record.note,
        created_at=now_utc(),
    )


__all__ = [
    "CACHE_DB_NAME",
    "CacheError",
    "CacheReadError",
    "CacheWriteError",
    "ContentCache",
]
