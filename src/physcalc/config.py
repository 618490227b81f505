"""Runtime settings loaded from ``PHYSCALC_*`` environment variables."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    log_level: str = Field(default="WARNING", description="Level passed to configure_logging")
    strict_units: bool = Field(
        default=True,
        description="Reject unknown unit symbols instead of treating them as dimensionless",
    )
    max_depth: int = Field(default=200, gt=0, description="Maximum parenthesis nesting")
    output: Literal["text", "json"] = Field(default="text", description="Default CLI output format")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        values = {}
        level = os.getenv("PHYSCALC_LOG_LEVEL")
        if level:
            values["log_level"] = level
        strict = os.getenv("PHYSCALC_STRICT_UNITS")
        if strict:
            values["strict_units"] = strict.strip()
        depth = os.getenv("PHYSCALC_MAX_DEPTH")
        if depth:
            values["max_depth"] = depth
        output = os.getenv("PHYSCALC_OUTPUT")
        if output:
            values["output"] = output.strip().lower()
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings"]
