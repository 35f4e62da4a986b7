"""Wire codecs for results (orjson JSON and msgpack)."""

from .codec import (
    Codec,
    CodecType,
    MsgpackCodec,
    OrjsonCodec,
    dump_result,
    dump_value,
    get_codec,
    load_result,
    load_value,
    register_codec,
)
from .shapes import ErrShape, OkShape, TaggedShape

__all__ = [
    "Codec", "CodecType", "OrjsonCodec", "MsgpackCodec", "get_codec", "register_codec",
    "dump_value", "load_value", "dump_result", "load_result",
    "TaggedShape", "OkShape", "ErrShape",
]
