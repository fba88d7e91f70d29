"""Cache-aware, multi-threaded parsing of watch-log lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from parsing.matcher import match_line
from persistence.cache import CacheError
from persistence.contracts import RecordCache
from persistence.hashing import content_key
from scheduling.scheduler import ParseTask, TaskScheduler
from schemas.records import WatchRecord

logger = logging.getLogger(__name__)


@dataclass
class ParseReport:
    records: list[WatchRecord] = field(default_factory=list)
    unmatched_count: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    cache_read_failures: int = 0
    cache_write_failures: int = 0


class LogParser:
    """Turn raw log lines into ordered :class:`WatchRecord` values.

    Lines already present in the cache under the current pattern set are
    served from it; the rest are parsed on worker threads and written back.
    Output order always follows input order.
    """

    def __init__(
        self,
        patterns: Sequence[str],
        finished_patterns: Sequence[str],
        *,
        cache: RecordCache | None = None,
        max_thread_num: int = 1,
        min_tasks_per_thread: int = 1,
        log: logging.Logger | None = None,
    ) -> None:
        self._patterns = tuple(patterns)
        self._finished_patterns = tuple(finished_patterns)
        self._cache = cache
        self._log = log or logger
        self._scheduler = TaskScheduler(
            max_thread_num, min_tasks_per_thread, log=self._log
        )

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    @property
    def finished_patterns(self) -> tuple[str, ...]:
        return self._finished_patterns

    @property
    def scheduler(self) -> TaskScheduler:
        return self._scheduler

    def parse(self, lines: Iterable[str]) -> list[WatchRecord]:
        return self.parse_with_report(lines).records

    def parse_with_report(self, lines: Iterable[str]) -> ParseReport:
        report = ParseReport()
        hits: list[WatchRecord] = []
        tasks: list[ParseTask] = []

        for index, line in enumerate(lines):
            key = content_key(line, self._patterns, self._finished_patterns)
            cached = self._lookup(key, report)
            if cached is not None:
                report.cache_hits += 1
                hits.append(cached.at_index(index))
                continue
            report.cache_misses += 1
            tasks.append(
                ParseTask(
                    index=index,
                    key=key,
                    line=line,
                    patterns=self._patterns,
                    finished_patterns=self._finished_patterns,
                )
            )

        fresh: list[WatchRecord] = []
        for record in self._scheduler.run(tasks, self._parse_task):
            if record is None:
                report.unmatched_count += 1
                continue
            self._store(record, report)
            fresh.append(record)

        report.records = sorted(hits + fresh, key=lambda record: record.index)
        self._log.info(
            "Parsed %d lines: %d records, %d cache hits, %d misses, %d unmatched",
            report.cache_hits + report.cache_misses,
            len(report.records),
            report.cache_hits,
            report.cache_misses,
            report.unmatched_count,
        )
        return report

    def _parse_task(self, task: ParseTask) -> Optional[WatchRecord]:
        entry = match_line(
            task.line, task.patterns, task.finished_patterns, log=self._log
        )
        if entry is None:
            return None
        return WatchRecord.from_entry(entry, id=task.key, index=task.index)

    def _lookup(self, key: int, report: ParseReport) -> Optional[WatchRecord]:
        if self._cache is None:
            return None
        try:
            return self._cache.get(key)
        except CacheError as exc:
            report.cache_read_failures += 1
            self._log.warning("Cache lookup failed, parsing again: %s", exc)
            return None

    def _store(self, record: WatchRecord, report: ParseReport) -> None:
        if self._cache is None:
            return
        try:
            self._cache.put(record)
        except CacheError as exc:
            report.cache_write_failures += 1
            self._log.error("%s", exc)


__all__ = ["LogParser", "ParseReport"]
