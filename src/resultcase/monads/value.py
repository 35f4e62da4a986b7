"""Plain tagged result value: the data every combinator reads and produces.

A ``ResultValue`` carries a tag (``"ok"`` or ``"err"``) and exactly one payload
in ``inner``. It has no behavior of its own; the operations live in
:mod:`resultcase.monads.methods`.

Serialized as plain data (orjson handles dataclasses natively) it reads
``{"tag": "ok", "inner": ...}`` or ``{"tag": "err", "inner": ...}``.

Example:
    >>> from resultcase.monads.value import success, failure
    >>> success(5)
    ResultValue(tag='ok', inner=5)
    >>> failure("boom").tag
    'err'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Generic, Literal, Never, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type

Tag: TypeAlias = Literal["ok", "err"]

OK: Final = "ok"
ERR: Final = "err"


@dataclass(frozen=True, slots=True)
class ResultValue(Generic[T, E]):
    """Either ``ok`` with a success payload or ``err`` with an error payload.

    Frozen: every transformation builds a new instance. Build through
    :func:`success` and :func:`failure`.
    """

    tag: Tag
    inner: T | E

    def __post_init__(self) -> None:
        if self.tag not in (OK, ERR):
            raise ValueError(f"ResultValue tag must be 'ok' or 'err', got {self.tag!r}")

    def to_dict(self) -> dict[str, object]:
        """Plain mapping in the tagged wire shape (shallow; payload kept as is)."""
        return {"tag": self.tag, "inner": self.inner}


def success(value: T) -> ResultValue[T, Never]:
    """Wrap ``value`` under tag ``ok``."""
    return ResultValue(OK, value)


def failure(error: E) -> ResultValue[Never, E]:
    """Wrap ``error`` under tag ``err``."""
    return ResultValue(ERR, error)
