# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
Logger implementation for viewfold.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured logging capabilities.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import uuid
from contextvars import ContextVar
from logging import StreamHandler
from typing import TYPE_CHECKING, Any

from viewfold.logging.config import LoggingSettings
from viewfold.logging.errors import LOGGING_CONFIGURATION, LoggingError
from viewfold.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from viewfold.logging.protocols import LoggerProtocol

# Context variable for storing log context data
_log_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "viewfold_log_context", default=None
)

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class ViewfoldJsonEncoder(json.JSONEncoder):
    """JSON encoder that falls back to readable strings for unknown types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, enum.Enum):
            return obj.value
        if hasattr(obj, "model_dump"):  # Pydantic v2 models
            return obj.model_dump(mode="json")
        return str(obj)


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        }

        if self.json_format:
            return self._format_json(record, extra)
        return self._format_text(super().format(record), extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "name": record.name,
            **extra,
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data, cls=ViewfoldJsonEncoder, ensure_ascii=False)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        """Format a value for text output.

        Args:
            value: Value to format

        Returns:
            Formatted value string
        """
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, BaseException):
            return json.dumps(
                {"type": type(value).__name__, "message": str(value)},
                cls=ViewfoldJsonEncoder,
            )
        return json.dumps(value, cls=ViewfoldJsonEncoder)


class ViewfoldLogger:
    """Default logger implementation for viewfold.

    Log methods are coroutines so that they can be awaited from the async
    projection runtime; the record itself is emitted through the standard
    library logger named ``name``.
    """

    def __init__(
        self,
        name: str,
        level: LogLevel | str | int | None = None,
        settings: LoggingSettings | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            level: Log level; defaults to the configured settings level
            settings: Optional logger settings (loads from environment if None)
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = {}
        self._context: dict[str, Any] = {}

        self._configure()
        self.set_level(level or self._settings.level)

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    def _configure(self) -> None:
        """Attach handlers described by the settings to the stdlib logger."""
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        if self._settings.console_enabled:
            console = StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            try:
                file_handler = logging.FileHandler(self._settings.file_path)
            except OSError as e:
                raise LoggingError(
                    f"Cannot open log file: {self._settings.file_path}",
                    code=LOGGING_CONFIGURATION,
                    file_path=self._settings.file_path,
                ) from e
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False

    def _merged_context(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        combined = {**self._bound_context, **self._context}
        context_var_data = _log_context.get()
        if context_var_data:
            combined.update(context_var_data)
        combined.update(kwargs)
        return {
            f"ctx_{key}" if key in _RECORD_ATTRS else key: value
            for key, value in combined.items()
        }

    async def _log(self, level: int, msg: str, /, **kwargs: Any) -> None:
        """Log a message with the given level and context.

        Args:
            level: Log level (DEBUG, INFO, etc.)
            msg: Message to log
            **kwargs: Additional context values
        """
        if not self._logger.isEnabledFor(level):
            return
        exc_info = kwargs.pop("exc_info", None)
        self._logger.log(
            level, msg, extra=self._merged_context(kwargs), exc_info=exc_info
        )

    async def debug(self, message: str, /, **kwargs: Any) -> None:
        await self._log(logging.DEBUG, message, **kwargs)

    async def info(self, message: str, /, **kwargs: Any) -> None:
        await self._log(logging.INFO, message, **kwargs)

    async def warning(self, message: str, /, **kwargs: Any) -> None:
        await self._log(logging.WARNING, message, **kwargs)

    async def error(self, message: str, /, **kwargs: Any) -> None:
        await self._log(logging.ERROR, message, **kwargs)

    async def critical(self, message: str, /, **kwargs: Any) -> None:
        await self._log(logging.CRITICAL, message, **kwargs)

    def set_level(self, level: LogLevel | str | int) -> None:
        """Set the logger's level.

        Args:
            level: New logging level
        """
        self._logger.setLevel(LogLevel.parse(level).number)

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None]:
        """
        Context manager for adding contextual information to log messages.

        Args:
            **kwargs: Context key-value pairs to add to log messages
        """
        original_context = self._context.copy()
        self._context.update(kwargs)
        try:
            yield
        finally:
            self._context = original_context

    @contextlib.asynccontextmanager
    async def async_context(self, **kwargs: Any) -> AsyncGenerator[None]:
        """Add context information to all logs emitted within this async scope."""
        current = _log_context.get() or {}
        token = _log_context.set({**current, **kwargs})
        try:
            yield
        finally:
            _log_context.reset(token)

    def bind(self, **kwargs: Any) -> ViewfoldLogger:
        """Create a new logger with bound context values.

        Args:
            **kwargs: Context values to bind

        Returns:
            New logger instance with bound context
        """
        logger = ViewfoldLogger(
            self.name,
            level=self._logger.level,
            settings=self._settings,
        )
        logger._bound_context = {**self._bound_context, **kwargs}
        return logger


def get_logger(name: str, level: LogLevel | None = None) -> LoggerProtocol:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    return ViewfoldLogger(name, level=level, settings=LoggingSettings.load())
