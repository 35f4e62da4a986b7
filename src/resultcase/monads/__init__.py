"""Result algebra in two equivalent styles.

- Functional: ``ResultValue`` plus free functions in ``methods``
- Object: ``Result`` with ``Ok``/``Err`` variants and chainable methods
- Bridge: ``from_result_value`` / ``to_result_value``

Example:
    >>> from resultcase.monads import Result, methods, success
    >>>
    >>> methods.map(success(5), lambda x: x * 2)
    ResultValue(tag='ok', inner=10)
    >>> Result.make_ok(5).map(lambda x: x * 2).and_then(lambda x: Result.make_ok(x + 1)).unwrap_or(0)
    11
"""

from . import methods
from .methods import attempt
from .result import Err, Ok, Result, from_result_value, sequence, to_result_value, traverse
from .value import ERR, OK, ResultValue, Tag, failure, success

__all__ = [
    # Tagged value
    "ResultValue", "Tag", "OK", "ERR", "success", "failure",
    # Functional combinators
    "methods", "attempt",
    # Facade
    "Result", "Ok", "Err",
    # Bridge
    "from_result_value", "to_result_value",
    # Collection ops
    "sequence", "traverse",
]
