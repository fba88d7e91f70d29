"""Persistence subsystem exports."""

from persistence.cache import (
    CacheError,
    CacheReadError,
    CacheWriteError,
    ContentCache,
)
from persistence.contracts import RecordCache
from persistence.hashing import content_key
from persistence.sqlite_store import SqliteStore

__all__ = [
    "CacheError",
    "CacheReadError",
    "CacheWriteError",
    "ContentCache",
    "RecordCache",
    "SqliteStore",
    "content_key",
]
