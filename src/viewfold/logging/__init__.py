# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold

"""
Public API for viewfold logging.

Structured, environment-configured loggers used by the projection runtime.
"""

from __future__ import annotations

from viewfold.logging.config import LoggingSettings
from viewfold.logging.errors import LoggingError
from viewfold.logging.level import LogLevel
from viewfold.logging.logger import (
    StructuredFormatter,
    ViewfoldJsonEncoder,
    ViewfoldLogger,
    get_logger,
)
from viewfold.logging.protocols import LoggerProtocol

__all__ = [
    # Core interfaces
    "LoggerProtocol",
    "LogLevel",
    # Implementation
    "ViewfoldLogger",
    "StructuredFormatter",
    "ViewfoldJsonEncoder",
    "LoggingError",
    # Settings
    "LoggingSettings",
    # Factory functions
    "get_logger",
]
