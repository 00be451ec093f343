# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold

"""
Logging interface definitions for viewfold.
"""

from __future__ import annotations

from typing import Any, Protocol

from viewfold.logging.level import LogLevel


class LoggerProtocol(Protocol):
    """
    Interface expected from loggers handed to viewfold components.

    This protocol is NOT runtime_checkable and should be used
    for static type checking only.
    """

    async def debug(self, message: str, /, **kwargs: Any) -> None: ...

    async def info(self, message: str, /, **kwargs: Any) -> None: ...

    async def warning(self, message: str, /, **kwargs: Any) -> None: ...

    async def error(self, message: str, /, **kwargs: Any) -> None: ...

    async def critical(self, message: str, /, **kwargs: Any) -> None: ...

    def set_level(self, level: LogLevel) -> None: ...

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Return a logger that adds ``kwargs`` to every message."""
        ...
