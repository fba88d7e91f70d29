"""Load parser patterns and tuning from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from schemas.config import ParserConfig


class ParserConfigError(ValueError):
    """The parser config file is missing or malformed."""


def load_parser_config(path: Path | str) -> ParserConfig:
    """Load and validate the parser config from YAML."""
    resolved = Path(path)
    if not resolved.exists():
        raise ParserConfigError(
            f"Parser config not found: {resolved}. "
            "Pass --config-path or create one at the default location."
        )

    try:
        raw = yaml.safe_load(resolved.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ParserConfigError(f"Parser config is not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ParserConfigError("Parser config must be a YAML mapping")

    try:
        return ParserConfig.model_validate(raw)
    except ValidationError as exc:
        raise ParserConfigError(f"Invalid parser config {resolved}: {exc}") from exc


__all__ = ["ParserConfigError", "load_parser_config"]
