"""Line matching and token normalization."""

from .matcher import PatternCompileError, match_finished, match_line
from .numerals import parse_cjk_number, parse_number
from .temporal import parse_elapsed_time, parse_logged_time

__all__ = [
    "PatternCompileError",
    "match_finished",
    "match_line",
    "parse_cjk_number",
    "parse_elapsed_time",
    "parse_logged_time",
    "parse_number",
]
