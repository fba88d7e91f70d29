"""Per-title watch state built on top of parsed records."""

from __future__ import annotations

from typing import Iterable, Optional

from schemas.records import WatchRecord
from schemas.stats import WatchSummary


class WatchStats:
    """Group records by ``(title, season)`` in first-seen order."""

    def __init__(self, records: Iterable[WatchRecord]) -> None:
        self._records = list(records)
        self._summaries: dict[tuple[str, Optional[int]], WatchSummary] = {}
        for record in self._records:
            group = (record.title, record.season)
            summary = self._summaries.get(group)
            if summary is None:
                summary = WatchSummary(title=record.title, season=record.season)
                self._summaries[group] = summary
            summary.watched_times += 1
            summary.finished = summary.finished or record.finished
            summary.entries.append(record)

    @property
    def records(self) -> list[WatchRecord]:
        return list(self._records)

    def all(self) -> list[WatchSummary]:
        return list(self._summaries.values())

    def unfinished(self) -> list[WatchSummary]:
        return [summary for summary in self._summaries.values() if not summary.finished]

    def query(self, name: str) -> list[WatchSummary]:
        needle = name.casefold()
        return [
            summary
            for summary in self._summaries.values()
            if needle in summary.title.casefold()
        ]


def format_summary(summary: WatchSummary, *, with_state: bool = True) -> str:
    label = summary.title
    if summary.season is not None:
        label = f"{label} season {summary.season}"
    if with_state:
        label = f"{label} - {summary.state}"
    return label


__all__ = ["WatchStats", "format_summary"]
