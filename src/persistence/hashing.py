"""Hashing helpers for content-addressed cache keys."""

from __future__ import annotations

import json
import struct
from typing import Sequence

import xxhash

_COUNT = struct.Struct("<Q")


def content_key(line: str, patterns: Sequence[str], finished_patterns: Sequence[str]) -> int:
    """Return the unsigned 64-bit cache key of ``line`` under a pattern set.

    Every extraction and finished pattern is folded into the digest, so editing,
    adding, removing or moving any pattern yields a new key for every line.
    Fields are length-prefixed, so no byte sequence inside a line or a pattern
    can be mistaken for a field boundary.
    """
    hasher = xxhash.xxh3_64()
    _update_field(hasher, line.encode("utf-8"))
    for group in (patterns, finished_patterns):
        hasher.update(_COUNT.pack(len(group)))
        for pattern in group:
            _update_field(hasher, pattern.encode("utf-8"))
    return hasher.intdigest()


def _update_field(hasher: "xxhash.xxh3_64", data: bytes) -> None:
    hasher.update(_COUNT.pack(len(data)))
    hasher.update(data)


def stable_json_dumps(payload: object) -> str:
    """Dump JSON with stable ordering for hashing."""
    return json.dumps(
        payload,
        ensure_ascii=True,
        sort_keys=True,
        separators=(",", ":"),
        default=str,
    )


def pattern_set_digest(patterns: Sequence[str], finished_patterns: Sequence[str]) -> str:
    """Return a short, human-readable fingerprint of the active pattern set."""
    payload = {"patterns": list(patterns), "finished_patterns": list(finished_patterns)}
    return xxhash.xxh3_64_hexdigest(stable_json_dumps(payload).encode("utf-8"))


__all__ = [
    "content_key",
    "pattern_set_digest",
    "stable_json_dumps",
]
