# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
projections.errors
Error types raised while materializing a view.
"""

from __future__ import annotations

from typing import Any, Final

from viewfold.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, ViewfoldError

PROJECTION = ErrorCategory.get_or_create("PROJECTION")
PROJECTION_ERROR: Final = ErrorCode.get_or_create("PROJECTION_ERROR", PROJECTION)
PROJECTION_EVOLVE_FAILED: Final = ErrorCode.get_or_create(
    "PROJECTION_EVOLVE_FAILED", PROJECTION
)
PROJECTION_LIMIT_EXCEEDED: Final = ErrorCode.get_or_create(
    "PROJECTION_LIMIT_EXCEEDED", PROJECTION
)


class ProjectionError(ViewfoldError):
    """Base class for all projection-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = PROJECTION_ERROR,
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


class ProjectionEvolveError(ProjectionError):
    """Raised when a view's evolve function fails on an event."""

    def __init__(self, event_type: str, events_applied: int, **kwargs: Any) -> None:
        super().__init__(
            f"Evolve failed on event {event_type} after {events_applied} event(s)",
            code=PROJECTION_EVOLVE_FAILED,
            event_type=event_type,
            events_applied=events_applied,
            **kwargs,
        )


class ProjectionLimitError(ProjectionError):
    """Raised when a projection receives more events than it is allowed to apply."""

    def __init__(self, max_events: int, **kwargs: Any) -> None:
        super().__init__(
            f"Projection exceeded the limit of {max_events} event(s)",
            code=PROJECTION_LIMIT_EXCEEDED,
            severity=ErrorSeverity.WARNING,
            max_events=max_events,
            **kwargs,
        )
