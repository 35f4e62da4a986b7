"""Logging for resultcase: namespaced stdlib loggers with text/JSON output."""

from .logging import (
    JsonFormatter,
    TextFormatter,
    configure_logging,
    get_logger,
    log_event,
    reset_logging,
)

__all__ = ["JsonFormatter", "TextFormatter", "configure_logging", "get_logger", "log_event", "reset_logging"]
