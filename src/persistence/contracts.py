"""Persistence protocol contracts."""

from __future__ import annotations

from typing import Protocol

from schemas.records import WatchRecord


class RecordCache(Protocol):
    def get(self, key: int) -> WatchRecord | None: ...

    def put(self, record: WatchRecord) -> None: ...


__all__ = ["RecordCache"]
