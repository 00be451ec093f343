# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
Logging error definitions.
"""

from __future__ import annotations

from typing import Any, Final

from viewfold.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, ViewfoldError

LOGGING = ErrorCategory.get_or_create("LOGGING")
LOGGING_ERROR: Final = ErrorCode.get_or_create("LOGGING_ERROR", LOGGING)
LOGGING_CONFIGURATION: Final = ErrorCode.get_or_create(
    "LOGGING_CONFIGURATION", LOGGING
)


class LoggingError(ViewfoldError):
    """Base exception for all logging-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = LOGGING_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )
