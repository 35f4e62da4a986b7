"""Error types for resultcase.

- ErrorCode: Stable codes for misuse and decoding failures
- Misuse/UnwrapError: Structured description and the exception wrapping it
- VariantAccessError: Wrong accessor on a facade variant
- CodecError: Undecodable or mis-shaped wire data
"""

from .errors import (
    UNWRAP_ERR_ON_OK_MESSAGE,
    UNWRAP_ON_ERR_MESSAGE,
    CodecError,
    ErrorCode,
    Misuse,
    UnwrapError,
    VariantAccessError,
)

__all__ = [
    "ErrorCode", "Misuse", "UnwrapError", "VariantAccessError", "CodecError",
    "UNWRAP_ON_ERR_MESSAGE", "UNWRAP_ERR_ON_OK_MESSAGE",
]
