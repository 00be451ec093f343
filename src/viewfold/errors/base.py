# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
Base error classes for viewfold.

Errors carry a registered error code, the code's category, a severity and a
free-form context dictionary so that failures raised while materializing a
view can be logged in structured form.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final

from viewfold.errors.registry import registry


class ErrorSeverity(str, Enum):
    """Severity levels for viewfold errors."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory:
    """Named error category, optionally nested under a parent category."""

    def __init__(self, name: str, parent: ErrorCategory | None = None) -> None:
        """Initialize a new error category.

        Args:
            name: Unique identifier for this category
            parent: Optional parent category for hierarchical structure
        """
        self.name = name
        self.parent = parent

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ErrorCategory({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCategory):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def is_subcategory_of(self, category: ErrorCategory) -> bool:
        """Check if this category is ``category`` or nested somewhere below it."""
        current: ErrorCategory | None = self
        while current:
            if current == category:
                return True
            current = current.parent
        return False

    @classmethod
    def get_or_create(
        cls, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """Get or create an error category."""
        return registry.get_category(name, parent)


class ErrorCode:
    """Error code associated with a category."""

    def __init__(self, code: str, category: ErrorCategory) -> None:
        self.code = code
        self.category = category

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, category={self.category.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> ErrorCode:
        """Get or create an error code."""
        return registry.get_code(name, category.name)

    @classmethod
    def get_by_code(
        cls, code: str, *, raise_if_missing: bool = True
    ) -> ErrorCode | None:
        """Get an error code by its string representation."""
        error_code = registry.lookup_code(code)
        if error_code is None and raise_if_missing:
            raise ValueError(f"Error code '{code}' not found in registry")
        return error_code


INTERNAL: Final = ErrorCategory.get_or_create("INTERNAL")
INTERNAL_ERROR: Final = ErrorCode.get_or_create("INTERNAL_ERROR", INTERNAL)


class ViewfoldError(Exception):
    """
    Base error class for viewfold errors.
    Should only be subclassed for package-specific errors, not instantiated directly.
    """

    message: str
    code: ErrorCode
    category: ErrorCategory
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> ViewfoldError:
        if cls is ViewfoldError:
            raise TypeError(
                "Do not instantiate ViewfoldError directly; subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new error (never instantiate ViewfoldError directly).

        Args:
            message: Human-readable error message
            code: ErrorCode object containing the code and category
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Extra context keys, merged into ``context``
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        full_context = dict(context or {})
        full_context.update(kwargs)

        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> ViewfoldError:
        """Add a key-value pair to the error context and return self for chaining."""
        self.context[key] = value
        return self

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.value,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
