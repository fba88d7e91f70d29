"""Aggregated watch state per title and season."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .records import WatchRecord


class WatchSummary(BaseModel):
    """All records sharing one ``(title, season)`` pair."""

    title: str
    season: Optional[int] = None
    watched_times: int = Field(default=0, ge=0)
    finished: bool = False
    entries: List[WatchRecord] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @property
    def state(self) -> str:
        return "finished" if self.finished else "unfinished"


__all__ = ["WatchSummary"]
