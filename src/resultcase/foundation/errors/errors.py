"""Misuse errors raised by the unwrap family.

Extracting the wrong variant's payload is a programming error, not a data
condition, so it raises instead of returning a sentinel. The structured
description lives in a frozen pydantic model; the exception wraps it.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel


class ErrorCode(StrEnum):
    """Codes for every way the library can be misused or fed bad data."""
    UNWRAP_ON_ERR = "UNWRAP_ON_ERR"
    UNWRAP_ERR_ON_OK = "UNWRAP_ERR_ON_OK"
    EXPECT_FAILED = "EXPECT_FAILED"
    EXPECT_ERR_FAILED = "EXPECT_ERR_FAILED"
    WRONG_VARIANT = "WRONG_VARIANT"
    DECODE_FAILED = "DECODE_FAILED"
    ENCODE_FAILED = "ENCODE_FAILED"
    UNKNOWN_CODEC = "UNKNOWN_CODEC"


UNWRAP_ON_ERR_MESSAGE = "Called unwrap on an Err value"
UNWRAP_ERR_ON_OK_MESSAGE = "Called unwrapErr on an Ok value"


class Misuse(BaseModel):
    """Structured description of an invalid extraction."""

    model_config = {"frozen": True}

    operation: str
    message: str
    code: ErrorCode
    payload_type: str | None = None

    def render(self) -> str:
        """One-line description for logs and debugging."""
        kind = f" (payload: {self.payload_type})" if self.payload_type else ""
        return f"[{self.code}] {self.operation}: {self.message}{kind}"


class UnwrapError(RuntimeError):
    """Raised when a payload is extracted from the wrong variant.

    ``str(exc)`` is the diagnostic message verbatim, so callers can match on it.
    """

    def __init__(self, misuse: Misuse) -> None:
        self.misuse = misuse
        super().__init__(misuse.message)

    @classmethod
    def create(cls, operation: str, message: str, code: ErrorCode, *, payload: object = None) -> Self:
        """Build from parts, recording only the payload's type name."""
        return cls(Misuse(
            operation=operation,
            message=message,
            code=code,
            payload_type=type(payload).__name__ if payload is not None else None,
        ))

    @property
    def code(self) -> ErrorCode:
        return self.misuse.code


class VariantAccessError(UnwrapError, AttributeError):
    """Raised when reading ``value`` on an Err or ``error`` on an Ok.

    Also an AttributeError, so ``hasattr`` reports the accessor as missing.
    """


class CodecError(ValueError):
    """Raised when a result cannot be encoded, decoded or validated on the wire."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.DECODE_FAILED) -> None:
        self.code = code
        super().__init__(message)
