"""Tests for logging configuration and the events the library emits."""

from __future__ import annotations

import io
import logging

import orjson
import pytest

from resultcase.foundation.errors import UnwrapError
from resultcase.monads import Err, attempt, failure, methods, success
from resultcase.observability import configure_logging, get_logger, log_event, reset_logging


def _lines(stream: io.StringIO) -> list[str]:
    return [line for line in stream.getvalue().splitlines() if line]


def test_json_output_for_misuse() -> None:
    stream = io.StringIO()
    configure_logging(stream=stream, format="json", level="DEBUG")
    with pytest.raises(UnwrapError):
        methods.unwrap(failure("boom"))
    entry = orjson.loads(_lines(stream)[-1])
    assert entry["event"] == "result misuse"
    assert entry["level"] == "debug"
    assert entry["logger"] == "resultcase.misuse"
    assert entry["operation"] == "unwrap"
    assert entry["code"] == "UNWRAP_ON_ERR"
    assert "timestamp" in entry


def test_text_output_for_facade_misuse() -> None:
    stream = io.StringIO()
    configure_logging(stream=stream, format="text", level="DEBUG")
    with pytest.raises(UnwrapError):
        Err("boom").expect("needed a value")
    line = _lines(stream)[-1]
    assert "[debug] result misuse" in line
    assert "operation='expect'" in line


def test_attempt_logs_captured_exception() -> None:
    stream = io.StringIO()
    configure_logging(stream=stream, format="json", level="DEBUG")
    attempt(int, "nope")
    entry = orjson.loads(_lines(stream)[-1])
    assert entry["logger"] == "resultcase.attempt"
    assert entry["exc_type"] == "ValueError"


def test_level_filters_debug_events() -> None:
    stream = io.StringIO()
    configure_logging(stream=stream, format="json", level="WARNING")
    with pytest.raises(UnwrapError):
        methods.unwrap_err(success(1))
    assert _lines(stream) == []


def test_settings_drive_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    from resultcase.foundation.config import clear_settings_cache

    monkeypatch.setenv("RESULTCASE_LOG_FORMAT", "json")
    monkeypatch.setenv("RESULTCASE_DEBUG", "true")
    clear_settings_cache()
    stream = io.StringIO()
    handler = configure_logging(stream=stream)
    assert isinstance(handler.formatter, logging.Formatter)
    assert logging.getLogger("resultcase").level == logging.DEBUG
    log_event(get_logger("app"), logging.INFO, "hello", n=1)
    entry = orjson.loads(_lines(stream)[-1])
    assert entry["event"] == "hello"
    assert entry["logger"] == "resultcase.app"
    assert entry["n"] == 1


def test_reconfigure_replaces_handler() -> None:
    configure_logging(stream=io.StringIO())
    configure_logging(stream=io.StringIO())
    owned = [h for h in logging.getLogger("resultcase").handlers if getattr(h, "_resultcase_handler", False)]
    assert len(owned) == 1
    reset_logging()
    assert not [h for h in logging.getLogger("resultcase").handlers if getattr(h, "_resultcase_handler", False)]


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")  # type: ignore[arg-type]


def test_get_logger_namespace() -> None:
    assert get_logger().name == "resultcase"
    assert get_logger("codec").name == "resultcase.codec"
