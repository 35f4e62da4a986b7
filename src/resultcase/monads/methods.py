"""Functional combinators over :class:`ResultValue`.

Every operation of the result algebra is implemented here exactly once, as a
plain function taking the tagged value first. The object facade in
:mod:`resultcase.monads.result` delegates to these functions.

Only the tag is ever consulted; payload truthiness never matters.

Example:
    >>> from resultcase.monads import methods as R
    >>> from resultcase.monads.value import success, failure
    >>> R.unwrap_or(R.map(success(5), lambda x: x * 2), 0)
    10
    >>> R.or_(failure("a"), failure("b"))
    ResultValue(tag='err', inner='b')
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, NoReturn, TypeVar

from resultcase.foundation.errors import (
    UNWRAP_ERR_ON_OK_MESSAGE,
    UNWRAP_ON_ERR_MESSAGE,
    ErrorCode,
    UnwrapError,
)
from resultcase.observability.logging import log_event

from .value import ERR, OK, ResultValue, failure, success

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type
R = TypeVar("R")  # Handler return type

logger = logging.getLogger("resultcase.misuse")
_attempt_logger = logging.getLogger("resultcase.attempt")


def _panic(operation: str, message: str, code: ErrorCode, payload: object) -> NoReturn:
    err = UnwrapError.create(operation, message, code, payload=payload)
    log_event(logger, logging.DEBUG, "result misuse", operation=operation, code=str(code))
    raise err


# ─── Type Checking ───────────────────────────────────────────────────────────


def is_ok(result: ResultValue[T, E]) -> bool:
    """True if ``result`` is tagged ``ok``."""
    return result.tag == OK


def is_err(result: ResultValue[T, E]) -> bool:
    """True if ``result`` is tagged ``err``."""
    return result.tag == ERR


def is_ok_and(result: ResultValue[T, E], predicate: Callable[[T], bool]) -> bool:
    """True if ok and ``predicate(value)`` holds. Predicate is skipped on err."""
    return result.tag == OK and bool(predicate(result.inner))  # type: ignore[arg-type]


def is_err_and(result: ResultValue[T, E], predicate: Callable[[E], bool]) -> bool:
    """True if err and ``predicate(error)`` holds. Predicate is skipped on ok."""
    return result.tag == ERR and bool(predicate(result.inner))  # type: ignore[arg-type]


# ─── Optional Views ──────────────────────────────────────────────────────────


def result_ok(result: ResultValue[T, E]) -> T | None:
    """Ok payload, or None on err."""
    return result.inner if result.tag == OK else None  # type: ignore[return-value]


def result_err(result: ResultValue[T, E]) -> E | None:
    """Err payload, or None on ok."""
    return result.inner if result.tag == ERR else None  # type: ignore[return-value]


# ─── Functor Operations ──────────────────────────────────────────────────────


def map(result: ResultValue[T, E], f: Callable[[T], U]) -> ResultValue[U, E]:  # noqa: A001
    """Apply f to the ok payload. An err is returned as is.

    Signature: ResultValue[T,E] → (T→U) → ResultValue[U,E]
    """
    return success(f(result.inner)) if result.tag == OK else result  # type: ignore[arg-type,return-value]


def map_or(result: ResultValue[T, E], default: U, f: Callable[[T], U]) -> U:
    """``f(value)`` if ok, else ``default``.

    ``default`` is an already-computed value; use :func:`map_or_else` when the
    fallback is expensive.
    """
    return f(result.inner) if result.tag == OK else default  # type: ignore[arg-type]


def map_or_else(result: ResultValue[T, E], fallback: Callable[[E], U], f: Callable[[T], U]) -> U:
    """``f(value)`` if ok, else ``fallback(error)``. Only one branch runs."""
    return f(result.inner) if result.tag == OK else fallback(result.inner)  # type: ignore[arg-type]


def map_err(result: ResultValue[T, E], f: Callable[[E], F]) -> ResultValue[T, F]:
    """Apply f to the err payload. An ok is returned as is.

    Signature: ResultValue[T,E] → (E→F) → ResultValue[T,F]
    """
    return failure(f(result.inner)) if result.tag == ERR else result  # type: ignore[arg-type,return-value]


def inspect(result: ResultValue[T, E], f: Callable[[T], object]) -> ResultValue[T, E]:
    """Call f with the ok payload for its side effect; return ``result``."""
    if result.tag == OK:
        f(result.inner)  # type: ignore[arg-type]
    return result


def inspect_err(result: ResultValue[T, E], f: Callable[[E], object]) -> ResultValue[T, E]:
    """Call f with the err payload for its side effect; return ``result``."""
    if result.tag == ERR:
        f(result.inner)  # type: ignore[arg-type]
    return result


# ─── Value Extraction ────────────────────────────────────────────────────────


def expect(result: ResultValue[T, E], message: str) -> T:
    """Ok payload. Raises UnwrapError carrying ``message`` verbatim on err."""
    if result.tag == OK:
        return result.inner  # type: ignore[return-value]
    _panic("expect", message, ErrorCode.EXPECT_FAILED, result.inner)


def unwrap(result: ResultValue[T, E]) -> T:
    """Ok payload.

    Prefer :func:`match`, :func:`unwrap_or` or :func:`unwrap_or_else`; this is
    the escape hatch for results the caller knows to be ok.

    Raises:
        UnwrapError: "Called unwrap on an Err value"
    """
    if result.tag == OK:
        return result.inner  # type: ignore[return-value]
    _panic("unwrap", UNWRAP_ON_ERR_MESSAGE, ErrorCode.UNWRAP_ON_ERR, result.inner)


def unwrap_or(result: ResultValue[T, E], default: T) -> T:
    """Ok payload, or the already-computed ``default``."""
    return result.inner if result.tag == OK else default  # type: ignore[return-value]


def unwrap_or_else(result: ResultValue[T, E], f: Callable[[E], T]) -> T:
    """Ok payload, or ``f(error)`` computed only on err."""
    return result.inner if result.tag == OK else f(result.inner)  # type: ignore[return-value,arg-type]


def expect_err(result: ResultValue[T, E], message: str) -> E:
    """Err payload. Raises UnwrapError carrying ``message`` verbatim on ok."""
    if result.tag == ERR:
        return result.inner  # type: ignore[return-value]
    _panic("expect_err", message, ErrorCode.EXPECT_ERR_FAILED, result.inner)


def unwrap_err(result: ResultValue[T, E]) -> E:
    """Err payload.

    Raises:
        UnwrapError: "Called unwrapErr on an Ok value"
    """
    if result.tag == ERR:
        return result.inner  # type: ignore[return-value]
    _panic("unwrap_err", UNWRAP_ERR_ON_OK_MESSAGE, ErrorCode.UNWRAP_ERR_ON_OK, result.inner)


# ─── Logical Combinators ─────────────────────────────────────────────────────


def and_(result: ResultValue[T, E], other: ResultValue[U, E]) -> ResultValue[U, E]:
    """``other`` if ok, else ``result``. ``other`` is a value, not a thunk."""
    return other if result.tag == OK else result  # type: ignore[return-value]


def and_then(result: ResultValue[T, E], f: Callable[[T], ResultValue[U, E]]) -> ResultValue[U, E]:
    """Monadic bind: ``f(value)`` if ok, else ``result`` without calling f.

    Signature: ResultValue[T,E] → (T → ResultValue[U,E]) → ResultValue[U,E]
    """
    return f(result.inner) if result.tag == OK else result  # type: ignore[arg-type,return-value]


def or_(result: ResultValue[T, E], other: ResultValue[T, F]) -> ResultValue[T, F]:
    """``result`` if ok, else ``other``."""
    return result if result.tag == OK else other  # type: ignore[return-value]


def or_else(result: ResultValue[T, E], f: Callable[[E], ResultValue[T, F]]) -> ResultValue[T, F]:
    """``result`` if ok (f not called), else ``f(error)``."""
    return result if result.tag == OK else f(result.inner)  # type: ignore[arg-type,return-value]


# ─── Pattern Matching ────────────────────────────────────────────────────────


def match(result: ResultValue[T, E], *, ok: Callable[[T], U], err: Callable[[E], R]) -> U | R:
    """Exhaustive case analysis: call exactly one handler and return its result.

    Example:
        >>> match(success(42), ok=lambda x: f"got {x}", err=lambda e: f"failed: {e}")
        'got 42'
    """
    return ok(result.inner) if result.tag == OK else err(result.inner)  # type: ignore[arg-type]


# ─── Conversion & Collections ────────────────────────────────────────────────


def flatten(result: ResultValue[ResultValue[T, E], E]) -> ResultValue[T, E]:
    """ResultValue[ResultValue[T,E],E] → ResultValue[T,E]"""
    return result.inner if result.tag == OK else result  # type: ignore[return-value]


def sequence(results: Iterable[ResultValue[T, E]]) -> ResultValue[list[T], E]:
    """Iterable[ResultValue[T,E]] → ResultValue[list[T], E]. Fail-fast on first err."""
    values: list[T] = []
    for r in results:
        if r.tag == ERR:
            return r  # type: ignore[return-value]
        values.append(r.inner)  # type: ignore[arg-type]
    return success(values)


def traverse(items: Iterable[T], f: Callable[[T], ResultValue[U, E]]) -> ResultValue[list[U], E]:
    """Map f over items and sequence the results. Stops calling f at the first err."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if r.tag == ERR:
            return r  # type: ignore[return-value]
        values.append(r.inner)  # type: ignore[arg-type]
    return success(values)


def attempt(
    operation: Callable[..., T],
    *args: object,
    catch: tuple[type[Exception], ...] = (Exception,),
    **kwargs: object,
) -> ResultValue[T, Exception]:
    """Call ``operation``, turning raised exceptions into a failure.

    Only exception types listed in ``catch`` are captured; anything else
    propagates. The exception object becomes the err payload.

    Example:
        >>> attempt(int, "42")
        ResultValue(tag='ok', inner=42)
        >>> attempt(int, "x", catch=(ValueError,)).tag
        'err'
    """
    try:
        return success(operation(*args, **kwargs))
    except catch as exc:
        log_event(
            _attempt_logger, logging.DEBUG, "captured exception",
            operation=getattr(operation, "__qualname__", repr(operation)), exc_type=type(exc).__name__,
        )
        return failure(exc)
