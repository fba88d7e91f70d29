"""Schema package for parsed records, parser config and summaries."""

from .config import ParserConfig
from .records import MatchedEntry, WatchRecord
from .stats import WatchSummary

__all__ = ["MatchedEntry", "ParserConfig", "WatchRecord", "WatchSummary"]
