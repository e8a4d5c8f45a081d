"""
Configuration — typed settings for twotrack's logging, loaded from the environment.

Uses pydantic-settings so misconfiguration fails at load time rather than
at the first log call:

    TWOTRACK_LOG_LEVEL=DEBUG
    TWOTRACK_LOG_FORMAT=json
    TWOTRACK_MAX_LOGGED_MESSAGES=5

An optional .env file in the working directory is read as a fallback.
The Result combinators read no settings; only observability does.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TwoTrackSettings(BaseSettings):
    """
    Logging settings.

    Load order (highest priority first):
      1. Environment variables (TWOTRACK_*)
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TWOTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Standard logging level name")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="console for humans, json for log shippers",
    )
    max_logged_messages: int = Field(
        default=10,
        ge=1,
        description="Warnings/errors included in an outcome log event before truncating",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject names the logging module does not know."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
