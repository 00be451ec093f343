"""Tests for the structured logger."""

import io
import json
import logging

import pytest

from viewfold.logging import (
    LoggingError,
    LoggingSettings,
    LogLevel,
    StructuredFormatter,
    ViewfoldLogger,
    get_logger,
)


def capture(logger: ViewfoldLogger, formatter: logging.Formatter) -> io.StringIO:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    logger._logger.handlers.clear()
    logger._logger.addHandler(handler)
    return stream


@pytest.fixture
def logger(quiet_logging_settings):
    return ViewfoldLogger("viewfold.test", level="DEBUG", settings=quiet_logging_settings)


@pytest.fixture
def text_formatter():
    return StructuredFormatter(include_timestamp=False)


@pytest.mark.asyncio
async def test_text_output_includes_context(logger, text_formatter) -> None:
    stream = capture(logger, text_formatter)

    await logger.info("Event applied", event_type="EvenNumberAdded", count=3)

    assert stream.getvalue().strip() == (
        "Event applied [INFO] event_type=EvenNumberAdded count=3"
    )


@pytest.mark.asyncio
async def test_json_output(logger) -> None:
    stream = capture(logger, StructuredFormatter(json_format=True, include_timestamp=False))

    await logger.warning("Slow projection", view="orders")

    data = json.loads(stream.getvalue())
    assert data["message"] == "Slow projection"
    assert data["level"] == "WARNING"
    assert data["view"] == "orders"
    assert data["name"] == "viewfold.test"


@pytest.mark.asyncio
async def test_level_filters_messages(logger, text_formatter) -> None:
    stream = capture(logger, text_formatter)
    logger.set_level(LogLevel.ERROR)

    await logger.info("hidden")
    await logger.error("shown")

    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()


@pytest.mark.asyncio
async def test_bind_adds_context(logger, text_formatter) -> None:
    bound = logger.bind(view="orders")
    stream = capture(bound, text_formatter)

    await bound.debug("tick")

    assert "view=orders" in stream.getvalue()
    assert logger._bound_context == {}


@pytest.mark.asyncio
async def test_context_managers(logger, text_formatter) -> None:
    stream = capture(logger, text_formatter)

    with logger.context(request_id="abc"):
        async with logger.async_context(stream_id="s-1"):
            await logger.info("inside")
    await logger.info("outside")

    inside, outside = stream.getvalue().strip().splitlines()
    assert "request_id=abc" in inside
    assert "stream_id=s-1" in inside
    assert outside == "outside [INFO]"


def test_formatter_quotes_strings_with_spaces(text_formatter) -> None:
    assert text_formatter._format_value("two words") == '"two words"'
    assert text_formatter._format_value(LogLevel.INFO) == "INFO"
    assert json.loads(text_formatter._format_value(ValueError("bad"))) == {
        "type": "ValueError",
        "message": "bad",
    }


def test_unwritable_log_file_raises_logging_error(tmp_path) -> None:
    settings = LoggingSettings(
        console_enabled=False,
        file_enabled=True,
        file_path=str(tmp_path / "missing" / "viewfold.log"),
    )

    with pytest.raises(LoggingError):
        ViewfoldLogger("viewfold.test.file", settings=settings)


def test_file_logging(tmp_path) -> None:
    path = tmp_path / "viewfold.log"
    settings = LoggingSettings(console_enabled=False, file_enabled=True, file_path=str(path))

    logger = ViewfoldLogger("viewfold.test.file_ok", settings=settings)

    assert any(isinstance(h, logging.FileHandler) for h in logger._logger.handlers)
    file_handler_of(logger).close()


def file_handler_of(logger: ViewfoldLogger) -> logging.FileHandler:
    (handler,) = [
        h for h in logger._logger.handlers if isinstance(h, logging.FileHandler)
    ]
    return handler


@pytest.fixture
def file_settings(tmp_path):
    return LoggingSettings(
        console_enabled=False, file_enabled=True, file_path=str(tmp_path / "viewfold.log")
    )


def test_bind_closes_replaced_file_handler(file_settings) -> None:
    logger = ViewfoldLogger("viewfold.test.bind_file", settings=file_settings)
    replaced = file_handler_of(logger)

    bound = logger.bind(view="orders")

    assert replaced not in bound._logger.handlers
    assert replaced.stream is None or replaced.stream.closed
    file_handler_of(bound).close()


def test_new_logger_with_same_name_closes_previous_file_handler(file_settings) -> None:
    first = file_handler_of(
        ViewfoldLogger("viewfold.test.same_name", settings=file_settings)
    )

    second = ViewfoldLogger("viewfold.test.same_name", settings=file_settings)

    assert first.stream is None or first.stream.closed
    current = file_handler_of(second)
    assert current.stream is not None and not current.stream.closed
    current.close()


def test_bind_keeps_level(logger) -> None:
    logger.set_level(LogLevel.WARNING)

    bound = logger.bind(view="orders")

    assert bound._logger.level == logging.WARNING


@pytest.mark.asyncio
async def test_context_keys_clashing_with_record_attributes(logger) -> None:
    stream = capture(logger, StructuredFormatter(json_format=True, include_timestamp=False))

    await logger.info(
        "clash", name="orders", message="m", args=(1,), levelname="high", view="v"
    )

    data = json.loads(stream.getvalue())
    assert data["message"] == "clash"
    assert data["name"] == "viewfold.test"
    assert data["ctx_name"] == "orders"
    assert data["ctx_message"] == "m"
    assert data["ctx_args"] == [1]
    assert data["level"] == "INFO"
    assert data["ctx_levelname"] == "high"
    assert data["view"] == "v"


def test_get_logger_uses_environment(monkeypatch) -> None:
    monkeypatch.setenv("VIEWFOLD_LOGGING_LEVEL", "WARNING")
    monkeypatch.setenv("VIEWFOLD_LOGGING_CONSOLE_ENABLED", "false")

    logger = get_logger("viewfold.test.env")

    assert logger._logger.level == logging.WARNING
    assert logger._logger.handlers == []
