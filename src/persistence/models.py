"""Lightweight persistence records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RecordRow:
    """Denormalized columns of one cached record, for inspection without decoding."""

    id: int
    title: str
    finished: bool
    episode: int | None
    time_at_episode: int | None
    season: int | None
    logged_time: int | None
    note: str | None
    created_at: datetime


@dataclass(frozen=True)
class CacheStats:
    records: int
    finished: int
    titles: int


__all__ = ["CacheStats", "RecordRow"]
