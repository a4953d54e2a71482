"""respcodec: RESP Wire Codec

A Python library for encoding and decoding the Redis serialization protocol
(RESP2 and the RESP3 scalar/aggregate types). Frames are validated Pydantic
models; decoding is resumable over streams that deliver partial frames.

Key Features:
- Pydantic-based frame variants validated at construction
- Byte-exact, deterministic encoding
- Two-pass decoding that never consumes a partial frame
- Distinct RESP2/RESP3 null forms preserved through a round trip

Quick Start:
    >>> from respcodec import Array, BulkString, SimpleString, decode, encode
    >>>
    >>> frame = Array([SimpleString("SET"), BulkString(b"key"), BulkString(b"value")])
    >>> data = encode(frame)
    >>> buffer = bytearray(data)
    >>> decoded, consumed = decode(buffer)
    >>> decoded == frame and consumed == len(data)
    True
"""

from __future__ import annotations

from .codec import DecoderConfig, decode, decode_as, encode, expect_length, format_double, parse
from .exceptions import (
    ConversionError,
    DecodeError,
    InvalidFrameError,
    InvalidFrameLengthError,
    InvalidFrameTypeError,
    NotCompleteError,
    RespError,
)
from .models import (
    INT64_MAX,
    INT64_MIN,
    Array,
    Boolean,
    BulkString,
    Double,
    Frame,
    FrameModel,
    Integer,
    Map,
    Null,
    NullArray,
    NullBulkString,
    Set,
    SimpleError,
    SimpleString,
    to_frame,
)
from .stream import FrameReader

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_as",
    "expect_length",
    "parse",
    "format_double",
    "DecoderConfig",
    "FrameReader",
    # Frames
    "Frame",
    "FrameModel",
    "SimpleString",
    "SimpleError",
    "Integer",
    "BulkString",
    "NullBulkString",
    "Array",
    "NullArray",
    "Null",
    "Boolean",
    "Double",
    "Map",
    "Set",
    "INT64_MIN",
    "INT64_MAX",
    "to_frame",
    # Exceptions
    "RespError",
    "NotCompleteError",
    "DecodeError",
    "InvalidFrameError",
    "InvalidFrameTypeError",
    "InvalidFrameLengthError",
    "ConversionError",
    # Version
    "__version__",
]
