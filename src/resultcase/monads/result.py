"""Object facade over the tagged result value.

``Result`` is a closed two-variant hierarchy (``Ok`` / ``Err``) exposing the
whole algebra as chainable methods. Each instance wraps one
:class:`~resultcase.monads.value.ResultValue` and every method is a thin
wrapper over the matching function in :mod:`resultcase.monads.methods`, so the
two APIs cannot drift apart.

Example:
    >>> from resultcase.monads import Result, Ok, Err
    >>>
    >>> def parse_port(raw: str) -> Result[int, str]:
    ...     return Ok(int(raw)) if raw.isdigit() else Err(f"not a port: {raw}")
    >>>
    >>> parse_port("8080").map(lambda p: p + 1).unwrap_or(0)
    8081
    >>> str(parse_port("http"))
    'Err(not a port: http)'

Structural pattern matching works on the variants:
    >>> match parse_port("22"):
    ...     case Ok(port): print("port", port)
    ...     case Err(reason): print("bad", reason)
    port 22
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Generic, Literal, TypeVar, final

from resultcase.foundation.errors import ErrorCode, VariantAccessError

from . import methods as _m
from .value import OK, ResultValue, failure, success

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type
R = TypeVar("R")  # Handler return type


class Result(ABC, Generic[T, E]):
    """Success-or-failure value with chainable combinators.

    Construct with ``Ok(v)`` / ``Err(e)``, ``Result.make_ok`` / ``Result.make_err``,
    or convert a tagged value with ``Result.from_result_value``.

    Notes:
        - Immutable; combinators return new instances
        - ``inspect``/``inspect_err`` return the receiver itself
        - Reading ``error`` on Ok or ``value`` on Err raises VariantAccessError
    """

    __slots__ = ("_inner",)

    _inner: ResultValue[T, E]

    # ─── Construction & Bridging ─────────────────────────────────────────

    @staticmethod
    def make_ok(value: T) -> Result[T, E]:
        """Success variant wrapping ``value``."""
        return Ok(value)

    @staticmethod
    def make_err(error: E) -> Result[T, E]:
        """Failure variant wrapping ``error``."""
        return Err(error)

    @staticmethod
    def from_result_value(result: ResultValue[T, E]) -> Result[T, E]:
        """Facade variant matching the tag of ``result``."""
        return from_result_value(result)

    def to_result_value(self) -> ResultValue[T, E]:
        """Tagged value with the same tag and payload."""
        return self._inner

    # ─── Type Checking ───────────────────────────────────────────────────

    @abstractmethod
    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""

    @abstractmethod
    def is_err(self) -> bool:
        """Check if Result is Err variant."""

    @property
    @abstractmethod
    def value(self) -> T:
        """Ok payload. Raises VariantAccessError on Err."""

    @property
    @abstractmethod
    def error(self) -> E:
        """Err payload. Raises VariantAccessError on Ok."""

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return _m.is_ok_and(self._inner, predicate)

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        return _m.is_err_and(self._inner, predicate)

    # ─── Optional Views ──────────────────────────────────────────────────

    def ok(self) -> T | None:
        """Ok payload, or None on Err."""
        return _m.result_ok(self._inner)

    def err(self) -> E | None:
        """Err payload, or None on Ok."""
        return _m.result_err(self._inner)

    # ─── Functor Operations ──────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return from_result_value(_m.map(self._inner, f))

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return _m.map_or(self._inner, default, f)

    def map_or_else(self, fallback: Callable[[E], U], f: Callable[[T], U]) -> U:
        return _m.map_or_else(self._inner, fallback, f)

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return from_result_value(_m.map_err(self._inner, f))

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call f with Ok value for side effects, return self."""
        _m.inspect(self._inner, f)
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call f with Err value for side effects, return self."""
        _m.inspect_err(self._inner, f)
        return self

    # ─── Value Extraction ────────────────────────────────────────────────

    def expect(self, message: str) -> T:
        """Extract Ok value; raise UnwrapError(message) on Err."""
        return _m.expect(self._inner, message)

    def unwrap(self) -> T:
        """Extract Ok value; raise UnwrapError on Err."""
        return _m.unwrap(self._inner)

    def unwrap_or(self, default: T) -> T:
        return _m.unwrap_or(self._inner, default)

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return _m.unwrap_or_else(self._inner, f)

    def expect_err(self, message: str) -> E:
        """Extract Err value; raise UnwrapError(message) on Ok."""
        return _m.expect_err(self._inner, message)

    def unwrap_err(self) -> E:
        """Extract Err value; raise UnwrapError on Ok."""
        return _m.unwrap_err(self._inner)

    # ─── Logical Combinators ─────────────────────────────────────────────

    def and_(self, other: Result[U, E] | ResultValue[U, E]) -> Result[U, E]:
        """Return other if self is Ok, otherwise self's Err."""
        return from_result_value(_m.and_(self._inner, to_result_value(other)))

    def and_then(self, f: Callable[[T], Result[U, E] | ResultValue[U, E]]) -> Result[U, E]:
        """Chain an operation that can fail. Signature: Result[T,E] → (T → Result[U,E]) → Result[U,E]"""
        return from_result_value(_m.and_then(self._inner, lambda v: to_result_value(f(v))))

    def or_(self, other: Result[T, F] | ResultValue[T, F]) -> Result[T, F]:
        """Return self if Ok, otherwise other."""
        return from_result_value(_m.or_(self._inner, to_result_value(other)))

    def or_else(self, f: Callable[[E], Result[T, F] | ResultValue[T, F]]) -> Result[T, F]:
        """Recover from Err via f. Ok passes through."""
        return from_result_value(_m.or_else(self._inner, lambda e: to_result_value(f(e))))

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Result[Result[T,E],E] → Result[T,E]"""
        return self.and_then(lambda inner: inner)

    # ─── Pattern Matching ────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], R]) -> U | R:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return _m.match(self._inner, ok=ok, err=err)

    # ─── Rendering ───────────────────────────────────────────────────────

    @abstractmethod
    def to_dict(self) -> dict[str, object]:
        """Structured rendering: ``{"kind", "value"}`` or ``{"kind", "error"}``."""

    # ─── Dunder Methods ──────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return _m.is_ok(self._inner)

    def __eq__(self, other: object) -> bool:
        return self._inner == other._inner if isinstance(other, Result) else NotImplemented

    def __hash__(self) -> int:
        return hash(self._inner)

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if _m.is_ok(self._inner):
            yield self._inner.inner  # type: ignore[misc]

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


@final
class Ok(Result[T, E]):
    """Success variant."""

    __slots__ = ()
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_inner", success(value))

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    @property
    def value(self) -> T:
        return self._inner.inner  # type: ignore[return-value]

    @property
    def error(self) -> E:
        raise VariantAccessError.create("error", "Accessed error on an Ok value", ErrorCode.WRONG_VARIANT, payload=self._inner.inner)

    def to_dict(self) -> dict[str, object]:
        return {"kind": "ok", "value": self._inner.inner}

    def __repr__(self) -> str:
        return f"Ok({self._inner.inner!r})"

    def __str__(self) -> str:
        return f"Ok({self._inner.inner})"

    def __reduce__(self) -> tuple[type[Ok], tuple[object]]:
        return (Ok, (self._inner.inner,))


@final
class Err(Result[T, E]):
    """Failure variant."""

    __slots__ = ()
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        object.__setattr__(self, "_inner", failure(error))

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    @property
    def value(self) -> T:
        raise VariantAccessError.create("value", "Accessed value on an Err value", ErrorCode.WRONG_VARIANT, payload=self._inner.inner)

    @property
    def error(self) -> E:
        return self._inner.inner  # type: ignore[return-value]

    def to_dict(self) -> dict[str, object]:
        return {"kind": "err", "error": self._inner.inner}

    def __repr__(self) -> str:
        return f"Err({self._inner.inner!r})"

    def __str__(self) -> str:
        return f"Err({self._inner.inner})"

    def __reduce__(self) -> tuple[type[Err], tuple[object]]:
        return (Err, (self._inner.inner,))


# ═══════════════════════════════════════════════════════════════════════════════
# Bridge
# ═══════════════════════════════════════════════════════════════════════════════


def from_result_value(result: ResultValue[T, E]) -> Result[T, E]:
    """ResultValue → Ok | Err, preserving tag and payload."""
    if not isinstance(result, ResultValue):
        raise TypeError(f"expected ResultValue, got {type(result).__name__}")
    return Ok(result.inner) if result.tag == OK else Err(result.inner)  # type: ignore[arg-type]


def to_result_value(result: Result[T, E] | ResultValue[T, E]) -> ResultValue[T, E]:
    """Ok | Err → ResultValue. A ResultValue is returned unchanged."""
    if isinstance(result, Result):
        return result._inner
    if isinstance(result, ResultValue):
        return result
    raise TypeError(f"expected Result or ResultValue, got {type(result).__name__}")


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """List[Result[T,E]] → Result[List[T], E]. Fail-fast on first Err.

    Example:
        >>> sequence([Ok(1), Ok(2)]).unwrap()
        [1, 2]
        >>> sequence([Ok(1), Err("fail"), Ok(3)]).unwrap_err()
        'fail'
    """
    return from_result_value(_m.sequence(to_result_value(r) for r in results))


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items, sequence results. Fail-fast on first Err."""
    return from_result_value(_m.traverse(items, lambda item: to_result_value(f(item))))
