"""CLI command groups."""

__all__ = ["cache", "config"]

from . import cache, config
