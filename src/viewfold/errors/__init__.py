# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold

"""
Error handling for viewfold.
"""

from viewfold.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    ViewfoldError,
)
from viewfold.errors.registry import ErrorRegistry, registry

__all__ = [
    # Error categories
    "ErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "INTERNAL",
    "INTERNAL_ERROR",
    # Base errors
    "ViewfoldError",
    # Registry
    "ErrorRegistry",
    "registry",
]
