"""Ordered extraction-pattern matching for watch-log lines."""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from parsing.numerals import parse_number
from parsing.temporal import parse_elapsed_time, parse_logged_time
from schemas.records import MatchedEntry

logger = logging.getLogger(__name__)


class PatternCompileError(ValueError):
    """A configured pattern is not a valid regular expression."""

    def __init__(self, pattern: str, error: re.error) -> None:
        super().__init__(f"Invalid pattern {pattern!r}: {error}")
        self.pattern = pattern
        self.error = error


def compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternCompileError(pattern, exc) from exc


def match_finished(line: str, finished_patterns: Sequence[str]) -> Optional[str]:
    """Return the first finished pattern that matches ``line``, if any."""
    for pattern in finished_patterns:
        if compile_pattern(pattern).search(line):
            return pattern
    return None


def match_line(
    line: str,
    patterns: Sequence[str],
    finished_patterns: Sequence[str],
    *,
    log: logging.Logger | None = None,
) -> Optional[MatchedEntry]:
    """Extract a record from ``line`` using the first pattern that binds ``name``.

    Patterns are tried in list order with no specificity ranking, so callers
    must list narrower patterns first. A regex hit without a ``name`` group does
    not count and matching moves on to the next pattern. Patterns are compiled
    on every call; an invalid one raises :class:`PatternCompileError`.
    """
    log = log or logger
    for pattern in patterns:
        found = compile_pattern(pattern).search(line)
        if found is None:
            continue
        groups = found.groupdict()
        name = groups.get("name")
        if name is None:
            log.debug("Pattern %r matched without a name group: %s", pattern, line)
            continue

        finished_pattern = match_finished(line, finished_patterns)
        entry = MatchedEntry(
            title=name,
            finished=finished_pattern is not None,
            episode=_optional(groups.get("episode"), parse_number),
            season=_optional(groups.get("season"), parse_number),
            elapsed_time=_optional(groups.get("time_at_episode"), parse_elapsed_time),
            logged_at=_optional(groups.get("logged_time"), parse_logged_time),
            note=groups.get("note"),
            raw_line=line,
            matched_pattern=pattern,
            matched_finished_pattern=finished_pattern,
        )
        log.debug(
            "title=%s finished=%s season=%s episode=%s elapsed=%s logged_at=%s note=%s raw=%s pattern=%s",
            entry.title,
            entry.finished,
            entry.season,
            entry.episode,
            entry.elapsed_time,
            entry.logged_at,
            entry.note,
            line,
            pattern,
        )
        return entry

    log.error("This line cannot match any regex patterns:\n%s", line)
    return None


def _optional(token: Optional[str], parse):
    if token is None:
        return None
    return parse(token)


__all__ = [
    "PatternCompileError",
    "compile_pattern",
    "match_finished",
    "match_line",
]
