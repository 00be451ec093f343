# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""Configuration for the projection runtime."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProjectionSettings(BaseSettings):
    """Configuration settings for ``ViewProjection``.

    Settings can be configured via environment variables with the
    `VIEWFOLD_PROJECTION_` prefix.
    """

    trace_events: bool = Field(
        default=False, description="Log every applied event at DEBUG level"
    )
    max_events: int | None = Field(
        default=None,
        gt=0,
        description="Maximum number of events a projection may apply before reset",
    )

    model_config = SettingsConfigDict(
        env_prefix="VIEWFOLD_PROJECTION_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def load(cls) -> "ProjectionSettings":
        """Load projection settings from environment variables or defaults."""
        return cls()
