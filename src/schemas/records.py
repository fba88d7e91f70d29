"""Parsed watch-log record contracts."""

from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_COUNTER = 65535
MAX_CONTENT_HASH = 2**64 - 1


class MatchedEntry(BaseModel):
    """Fields extracted from one log line by the first valid extraction pattern."""

    title: str
    finished: bool = False
    episode: Optional[int] = Field(default=None, ge=0, le=MAX_COUNTER)
    season: Optional[int] = Field(default=None, ge=0, le=MAX_COUNTER)
    elapsed_time: Optional[time] = None
    logged_at: Optional[datetime] = None
    note: Optional[str] = None

    raw_line: str
    matched_pattern: str
    matched_finished_pattern: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class WatchRecord(MatchedEntry):
    """A matched entry bound to its content hash and source line position.

    ``id`` is the cache key of the line under the active pattern set, not a
    creation-order identifier. ``index`` only re-establishes input order and is
    overwritten whenever a record is served from the cache.
    """

    id: int = Field(ge=0, le=MAX_CONTENT_HASH)
    index: int = Field(ge=0)

    @classmethod
    def from_entry(cls, entry: MatchedEntry, *, id: int, index: int) -> "WatchRecord":
        return cls(**entry.model_dump(), id=id, index=index)

    def at_index(self, index: int) -> "WatchRecord":
        return self.model_copy(update={"index": index})


__all__ = ["MAX_CONTENT_HASH", "MAX_COUNTER", "MatchedEntry", "WatchRecord"]
