"""Parser configuration schema."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParserConfig(BaseModel):
    """Root object of the YAML parser config file."""

    reg_pattern_list: List[str]
    finished_reg_pattern_list: List[str] = Field(default_factory=list)
    max_thread_num: int = Field(default=1, ge=1)
    min_task_num_per_thread: int = Field(default=1, ge=1)

    model_config = ConfigDict(extra="ignore")

    @field_validator("max_thread_num", "min_task_num_per_thread", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any) -> Any:
        return 1 if value is None else value

    @field_validator("finished_reg_pattern_list", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


__all__ = ["ParserConfig"]
