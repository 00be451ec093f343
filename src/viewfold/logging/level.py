# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
Log levels understood by viewfold loggers.

Levels arrive as enum members, names from ``VIEWFOLD_LOGGING_LEVEL`` or the
integers the standard library logger reports back; ``LogLevel.parse`` accepts
all three.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def number(self) -> int:
        """The matching standard library level."""
        return logging.getLevelNamesMapping()[self.value]

    @classmethod
    def parse(cls, value: LogLevel | str | int) -> LogLevel:
        """Resolve an enum member, a case-insensitive name or a stdlib level number.

        Raises:
            ValueError: If ``value`` names no level viewfold supports
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid log level: {value!r}")
        if isinstance(value, int):
            name = logging.getLevelName(value)
            if name in cls.__members__:
                return cls[name]
            raise ValueError(f"Invalid log level: {value!r}")
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARN":
                name = "WARNING"
            if name in cls.__members__:
                return cls[name]
        raise ValueError(f"Invalid log level: {value!r}")
