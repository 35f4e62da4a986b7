"""Serialization codecs for both result wire shapes.

Provides orjson (JSON) and msgpack (binary) codecs. Both are core
dependencies - no fallback to stdlib json.

Usage:
    >>> from resultcase.io import dump_value, load_value, dump_result, load_result
    >>> from resultcase.monads import Ok, success
    >>> dump_value(success(5))
    b'{"tag":"ok","inner":5}'
    >>> dump_result(Ok(5))
    b'{"kind":"ok","value":5}'
    >>> load_result(b'{"kind":"err","error":"boom"}')
    Err('boom')
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import msgpack
import orjson
from pydantic import ValidationError

from resultcase.foundation.errors import CodecError, ErrorCode
from resultcase.monads.result import Err, Ok, Result
from resultcase.monads.value import ResultValue
from resultcase.observability.logging import log_event

from .shapes import FacadeAdapter, OkShape, TaggedAdapter

if TYPE_CHECKING:
    from pydantic import TypeAdapter

logger = logging.getLogger("resultcase.codec")


class CodecType(StrEnum):
    """Supported codec types."""
    ORJSON = "orjson"
    MSGPACK = "msgpack"


@runtime_checkable
class Codec(Protocol):
    """Protocol for serialization codecs."""
    
    name: str
    content_type: str
    
    def encode(self, data: Any) -> bytes: ...
    def decode(self, data: bytes) -> Any: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Codec Implementations
# ═══════════════════════════════════════════════════════════════════════════════

class OrjsonCodec:
    """orjson codec. Handles dataclasses, datetimes and UUIDs in payloads."""
    
    __slots__ = ()
    name = "orjson"
    content_type = "application/json"
    
    def encode(self, data: Any) -> bytes:
        return orjson.dumps(data, option=orjson.OPT_UTC_Z)
    
    def decode(self, data: bytes) -> Any:
        return orjson.loads(data)


def _msgpack_default(obj: Any) -> Any:
    """Nested ResultValue payloads encode in the tagged shape, as orjson does."""
    if isinstance(obj, ResultValue):
        return obj.to_dict()
    raise TypeError(f"can not serialize {type(obj).__name__!r} object")


class MsgpackCodec:
    """MessagePack codec - binary protocol, smaller payloads than JSON."""
    
    __slots__ = ()
    name = "msgpack"
    content_type = "application/msgpack"
    
    def encode(self, data: Any) -> bytes:
        return msgpack.packb(data, default=_msgpack_default, use_bin_type=True, strict_types=False)
    
    def decode(self, data: bytes) -> Any:
        return msgpack.unpackb(data, raw=False, strict_map_key=False)


_CODECS: dict[str, Codec] = {"orjson": OrjsonCodec(), "msgpack": MsgpackCodec()}


def get_codec(name: str | CodecType | None = None) -> Codec:
    """Get codec by name. None resolves through RESULTCASE_CODEC_DEFAULT."""
    if name is None:
        from resultcase.foundation.config import get_settings
        name = get_settings().codec.default
    try:
        return _CODECS[str(name)]
    except KeyError:
        raise CodecError(f"Unknown codec: {name!r}. Use one of {sorted(_CODECS)}", ErrorCode.UNKNOWN_CODEC) from None


def register_codec(name: str, codec: Codec) -> None:
    """Register custom codec implementation."""
    _CODECS[name] = codec


def _resolve(codec: Codec | str | None) -> Codec:
    return codec if isinstance(codec, Codec) else get_codec(codec)


def _encode(codec: Codec, data: dict[str, object]) -> bytes:
    try:
        return codec.encode(data)
    except (TypeError, ValueError, OverflowError) as e:
        raise CodecError(f"{codec.name} cannot encode payload: {e}", ErrorCode.ENCODE_FAILED) from e


def _decode(codec: Codec, data: bytes | str, adapter: TypeAdapter[Any], shape: str) -> Any:
    try:
        raw = codec.decode(data)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        log_event(logger, logging.DEBUG, "decode failed", codec=codec.name, shape=shape, reason=str(e))
        raise CodecError(f"{codec.name} cannot decode {shape} payload: {e}") from e
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        log_event(logger, logging.DEBUG, "invalid shape", codec=codec.name, shape=shape, errors=e.error_count())
        raise CodecError(f"payload is not a {shape} result: {e}") from e


# ═══════════════════════════════════════════════════════════════════════════════
# Tagged Value Shape: {"tag", "inner"}
# ═══════════════════════════════════════════════════════════════════════════════

def dump_value(result: ResultValue[Any, Any], codec: Codec | str | None = None) -> bytes:
    """Encode a ResultValue in the tagged shape."""
    return _encode(_resolve(codec), result.to_dict())


def load_value(data: bytes | str, codec: Codec | str | None = None) -> ResultValue[Any, Any]:
    """Decode tagged-shape bytes into a ResultValue."""
    shape = _decode(_resolve(codec), data, TaggedAdapter, "tagged")
    return ResultValue(shape.tag, shape.inner)


# ═══════════════════════════════════════════════════════════════════════════════
# Facade Shape: {"kind", "value"} / {"kind", "error"}
# ═══════════════════════════════════════════════════════════════════════════════

def dump_result(result: Result[Any, Any], codec: Codec | str | None = None) -> bytes:
    """Encode an Ok/Err facade in its own shape."""
    return _encode(_resolve(codec), result.to_dict())


def load_result(data: bytes | str, codec: Codec | str | None = None) -> Result[Any, Any]:
    """Decode facade-shape bytes into Ok or Err."""
    shape = _decode(_resolve(codec), data, FacadeAdapter, "facade")
    return Ok(shape.value) if isinstance(shape, OkShape) else Err(shape.error)
