# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""Process-wide registry of error categories and codes."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from viewfold.errors.base import ErrorCategory, ErrorCode


class ErrorRegistry:
    """Singleton registry so each category and code name maps to one object."""

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()

    _categories: dict[str, ErrorCategory]
    _codes: dict[str, ErrorCode]

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def get_category(
        self, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """Get a category by name, registering it on first use.

        Args:
            name: The category name
            parent: Optional parent category, only used on registration

        Returns:
            The registered ErrorCategory
        """
        with self._lock:
            if name not in self._categories:
                from viewfold.errors.base import ErrorCategory

                self._categories[name] = ErrorCategory(name, parent)
            return self._categories[name]

    def get_code(self, code: str, category_name: str = "INTERNAL") -> ErrorCode:
        """Get an error code, registering it under ``category_name`` on first use.

        Args:
            code: The error code
            category_name: The owning category name

        Returns:
            The registered ErrorCode
        """
        with self._lock:
            if code not in self._codes:
                from viewfold.errors.base import ErrorCode

                category = self.get_category(category_name)
                self._codes[code] = ErrorCode(code, category)
            return self._codes[code]

    def lookup_code(self, code: str) -> ErrorCode | None:
        """Look up an error code without creating it."""
        with self._lock:
            return self._codes.get(code)

    def lookup_category(self, name: str) -> ErrorCategory | None:
        """Look up a category without creating it."""
        with self._lock:
            return self._categories.get(name)

    def get_all_codes(self) -> list[ErrorCode]:
        with self._lock:
            return list(self._codes.values())

    def get_all_categories(self) -> list[ErrorCategory]:
        with self._lock:
            return list(self._categories.values())


registry = ErrorRegistry()
