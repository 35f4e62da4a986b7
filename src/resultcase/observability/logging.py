"""Structured logging for resultcase on top of the standard library.

Library modules log through ``logging.getLogger("resultcase.<area>")`` and
attach key/value fields with :func:`log_event`. Nothing is printed until the
application calls :func:`configure_logging`, which installs one handler on the
``resultcase`` logger with either a human-readable or a JSON Lines format.

Quick Start:
    >>> from resultcase.observability import configure_logging, get_logger, log_event
    >>> configure_logging()  # level/format from RESULTCASE_LOG_* settings
    >>> log = get_logger("app")
    >>> log_event(log, logging.INFO, "parsed config", keys=3)
    # => 10:30:45.123 [info] parsed config keys=3
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Literal, TextIO

import orjson

if TYPE_CHECKING:
    from resultcase.foundation.config import ResultcaseSettings

ROOT_LOGGER = "resultcase"

# Marks the handler configure_logging() owns so reconfiguring replaces it
_HANDLER_ATTR = "_resultcase_handler"


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the ``resultcase`` namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def log_event(logger: logging.Logger, level: int, event: str, **fields: object) -> None:
    """Log ``event`` with structured fields, skipping work when disabled."""
    if logger.isEnabledFor(level):
        logger.log(level, event, extra={"fields": fields})


# ─────────────────────────────────────────────────────────────────────────────
# Formatters
# ─────────────────────────────────────────────────────────────────────────────


def _fields(record: logging.LogRecord) -> dict[str, object]:
    return getattr(record, "fields", None) or {}


class TextFormatter(logging.Formatter):
    """Format: ``HH:MM:SS.mmm [level] event key=value ...``"""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=UTC).strftime("%H:%M:%S.%f")[:-3]
        parts = [ts, f"[{record.levelname.lower()}]", record.getMessage()]
        parts += [f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in sorted(_fields(record).items())]
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
            **_fields(record),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str, option=orjson.OPT_NON_STR_KEYS).decode()


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


def configure_logging(
    settings: ResultcaseSettings | None = None,
    *,
    stream: TextIO | None = None,
    format: Literal["text", "json"] | None = None,  # noqa: A002 - matches settings field
    level: str | None = None,
) -> logging.Handler:
    """Install the resultcase handler. Explicit arguments override settings."""
    if settings is None:
        from resultcase.foundation.config import get_settings
        settings = get_settings()

    fmt = format or settings.logging.format
    match fmt:
        case "text": formatter: logging.Formatter = TextFormatter()
        case "json": formatter = JsonFormatter()
        case _: raise ValueError(f"Unknown format: {fmt}. Use 'text' or 'json'")

    root = logging.getLogger(ROOT_LOGGER)
    reset_logging()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
    root.setLevel(getattr(logging, (level or settings.effective_log_level).upper(), logging.WARNING))
    return handler


def reset_logging() -> None:
    """Remove the handler installed by configure_logging(), if any."""
    root = logging.getLogger(ROOT_LOGGER)
    for h in [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]:
        root.removeHandler(h)
        h.close()
    root.setLevel(logging.NOTSET)
