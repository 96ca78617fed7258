"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ValidatorConfig(BaseModel):
    """Configuration for the record validator."""

    # Off by default: stats sub-keys are checked for presence only
    strict_stats: bool = False


class InputConfig(BaseModel):
    """Where records are read from."""

    data_file: Path = Field(default=Path("data/pokemon_data.json"))
    encoding: str = Field(default="utf-8")


class ReportConfig(BaseModel):
    """Console report settings."""

    show_names: bool = False
    sort_names: bool = True
    max_messages: Optional[int] = Field(default=None, ge=0)


class AppConfig(BaseModel):
    """Root configuration object."""

    log_level: str = Field(default="WARNING")
    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level
