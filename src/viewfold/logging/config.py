# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
Configuration for viewfold logging, read from ``VIEWFOLD_LOGGING_*`` variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from viewfold.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """
    Configuration settings for viewfold loggers.
    Loads from environment variables using Pydantic v2's env support.
    """

    model_config = SettingsConfigDict(
        env_prefix="VIEWFOLD_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.INFO.value, description="Log level")
    json_format: bool = Field(default=False, description="Enable JSON log format")
    include_timestamp: bool = Field(
        default=True, description="Include timestamp in logs"
    )
    include_level: bool = Field(default=True, description="Include log level in logs")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_path: str | None = Field(default=None, description="Path to log file")

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Accept level names, enum members or stdlib level numbers."""
        return LogLevel.parse(v).value

    @classmethod
    def load(cls) -> LoggingSettings:
        """Load logging settings from environment variables or defaults."""
        return cls()
