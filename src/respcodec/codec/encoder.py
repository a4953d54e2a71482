"""RESP frame encoder.

This module provides the encode() function that converts a frame to its
canonical wire representation. Encoding is deterministic and cannot fail for
a constructed frame: every payload was validated when the frame was built.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Callable

from ..models.frames import (
    Array,
    Boolean,
    BulkString,
    Double,
    Frame,
    Integer,
    Map,
    Null,
    NullArray,
    NullBulkString,
    Set,
    SimpleError,
    SimpleString,
)

CRLF = b"\r\n"

# Magnitude at which doubles switch to scientific notation
SCIENTIFIC_THRESHOLD = 1e8


def encode(frame: Frame) -> bytes:
    """Encode a frame to RESP wire format.

    Aggregates are written depth-first into a single growing buffer, so large
    nested frames are not re-copied at every level.

    Args:
        frame: Frame to encode

    Returns:
        Wire representation, ending in CRLF

    Raises:
        TypeError: If ``frame`` is not one of the frame variants

    Examples:
        ```python
        from respcodec import Array, Integer, SimpleString, encode

        encode(SimpleString("OK"))  # b"+OK\\r\\n"
        encode(Integer(-123))       # b":-123\\r\\n"
        encode(Array([SimpleString("PING")]))  # b"*1\\r\\n+PING\\r\\n"
        ```
    """
    buffer = bytearray()
    _encode_into(buffer, frame)
    return bytes(buffer)


def _encode_into(buffer: bytearray, frame: Frame) -> None:
    try:
        writer = _WRITERS[type(frame)]
    except KeyError:
        raise TypeError(f"Cannot encode {type(frame).__name__}: not a RESP frame") from None
    writer(buffer, frame)


def _write_line(buffer: bytearray, tag: bytes, text: str) -> None:
    buffer += tag
    buffer += text.encode("utf-8")
    buffer += CRLF


def _write_simple_string(buffer: bytearray, frame: SimpleString) -> None:
    _write_line(buffer, SimpleString.TAG, frame.value)


def _write_simple_error(buffer: bytearray, frame: SimpleError) -> None:
    _write_line(buffer, SimpleError.TAG, frame.value)


def _write_integer(buffer: bytearray, frame: Integer) -> None:
    # Non-negative integers carry an explicit "+"
    sign = "+" if frame.value >= 0 else ""
    _write_line(buffer, Integer.TAG, f"{sign}{frame.value}")


def _write_bulk_string(buffer: bytearray, frame: BulkString) -> None:
    _write_line(buffer, BulkString.TAG, str(len(frame.value)))
    buffer += frame.value
    buffer += CRLF


def _write_null_bulk_string(buffer: bytearray, frame: NullBulkString) -> None:
    buffer += b"$-1\r\n"


def _write_null_array(buffer: bytearray, frame: NullArray) -> None:
    buffer += b"*-1\r\n"


def _write_null(buffer: bytearray, frame: Null) -> None:
    buffer += b"_\r\n"


def _write_boolean(buffer: bytearray, frame: Boolean) -> None:
    _write_line(buffer, Boolean.TAG, "t" if frame.value else "f")


def _write_double(buffer: bytearray, frame: Double) -> None:
    _write_line(buffer, Double.TAG, format_double(frame.value))


def _write_sequence(buffer: bytearray, frame: Array | Set) -> None:
    _write_line(buffer, frame.TAG, str(len(frame.items)))
    for item in frame.items:
        _encode_into(buffer, item)


def _write_map(buffer: bytearray, frame: Map) -> None:
    _write_line(buffer, Map.TAG, str(len(frame.entries)))
    for key, value in frame.items():
        _write_line(buffer, SimpleString.TAG, key)
        _encode_into(buffer, value)


def format_double(value: float) -> str:
    """Format a double body as it appears on the wire.

    Values whose magnitude is at least 1e8 use scientific notation with the
    shortest round-trip mantissa and no sign on the exponent (``1.5e9``).
    Smaller values use plain positional notation, never an exponent, with an
    explicit ``+`` when non-negative and no trailing ``.0`` (``+5``,
    ``+0.0000001``, ``-123.456``). Non-finite values use ``inf``, ``-inf`` and
    ``nan``.

    Args:
        value: Float to format

    Returns:
        Frame body text (without tag or CRLF)
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # repr() gives the shortest digit string that round-trips
    digits = Decimal(repr(value)).normalize()

    if abs(value) >= SCIENTIFIC_THRESHOLD:
        sign, mantissa_digits, exponent = digits.as_tuple()
        mantissa = "".join(str(d) for d in mantissa_digits)
        if len(mantissa) > 1:
            mantissa = f"{mantissa[0]}.{mantissa[1:]}"
        exponent += len(mantissa_digits) - 1  # type: ignore[operator]
        return f"{'-' if sign else ''}{mantissa}e{exponent}"

    text = format(digits, "f")
    return text if text.startswith("-") else f"+{text}"


_WRITERS: dict[type, Callable[[bytearray, Frame], None]] = {
    SimpleString: _write_simple_string,  # type: ignore[dict-item]
    SimpleError: _write_simple_error,  # type: ignore[dict-item]
    Integer: _write_integer,  # type: ignore[dict-item]
    BulkString: _write_bulk_string,  # type: ignore[dict-item]
    NullBulkString: _write_null_bulk_string,  # type: ignore[dict-item]
    Array: _write_sequence,  # type: ignore[dict-item]
    NullArray: _write_null_array,  # type: ignore[dict-item]
    Null: _write_null,  # type: ignore[dict-item]
    Boolean: _write_boolean,  # type: ignore[dict-item]
    Double: _write_double,  # type: ignore[dict-item]
    Map: _write_map,  # type: ignore[dict-item]
    Set: _write_sequence,  # type: ignore[dict-item]
}
