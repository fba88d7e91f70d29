"""Core configuration and shared utilities."""

from dotenv import load_dotenv

from .config import Settings, get_settings
from .parser_config import ParserConfigError, load_parser_config

load_dotenv()

__all__ = ["ParserConfigError", "Settings", "get_settings", "load_parser_config"]
