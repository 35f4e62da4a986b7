"""resultcase - explicit success-or-failure values for Python.

A result is either a success carrying a payload or a failure carrying an
error payload. The same algebra is exposed twice:

Functional style (plain tagged value + free functions):
    >>> from resultcase import success, failure, methods as R
    >>>
    >>> R.map(success(5), lambda x: x * 2)
    ResultValue(tag='ok', inner=10)
    >>> R.unwrap_or(failure("e"), 0)
    0

Object style (chainable methods on Ok/Err):
    >>> from resultcase import Result
    >>>
    >>> (
    ...     Result.make_ok(5)
    ...     .map(lambda x: x * 2)
    ...     .and_then(lambda x: Result.make_ok(x + 1))
    ...     .unwrap_or(0)
    ... )
    11

Bridging between the two:
    >>> Result.from_result_value(success(3))
    Ok(3)
    >>> Result.make_err("boom").to_result_value()
    ResultValue(tag='err', inner='boom')

Wire formats:
    >>> from resultcase.io import dump_value, dump_result
    >>> dump_value(success(1)), dump_result(Result.make_ok(1))
    (b'{"tag":"ok","inner":1}', b'{"kind":"ok","value":1}')
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .foundation.errors import CodecError, ErrorCode, Misuse, UnwrapError, VariantAccessError

# Result algebra
from .monads import (
    ERR,
    OK,
    Err,
    Ok,
    Result,
    ResultValue,
    Tag,
    attempt,
    failure,
    from_result_value,
    methods,
    sequence,
    success,
    to_result_value,
    traverse,
)

__all__ = [
    "__version__",
    # Tagged value
    "ResultValue", "Tag", "OK", "ERR", "success", "failure",
    # Functional combinators
    "methods", "attempt",
    # Facade
    "Result", "Ok", "Err", "from_result_value", "to_result_value",
    # Collection ops
    "sequence", "traverse",
    # Errors
    "ErrorCode", "Misuse", "UnwrapError", "VariantAccessError", "CodecError",
]
