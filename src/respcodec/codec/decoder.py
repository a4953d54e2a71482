"""RESP frame decoder.

This module parses RESP frames from a byte buffer that may hold only part of
a frame. Decoding runs in two passes over the buffer:

1. ``expect_length()`` walks the frame headers (recursing into aggregates)
   and computes how many bytes the complete frame occupies. It raises
   ``NotCompleteError`` as soon as it needs a byte that has not arrived.
2. Only once the whole frame is buffered is it parsed into frame models and
   removed from the buffer.

A ``NotCompleteError`` therefore never consumes anything, even for nested
aggregates whose first elements are already complete.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from ..exceptions import (
    ConversionError,
    DecodeError,
    InvalidFrameError,
    InvalidFrameLengthError,
    InvalidFrameTypeError,
    NotCompleteError,
)
from ..models.frames import (
    INT64_MAX,
    INT64_MIN,
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
from .config import DEFAULT_CONFIG, DecoderConfig

logger = logging.getLogger(__name__)

CRLF = b"\r\n"

Buffer = Union[bytes, bytearray]


def expect_length(buffer: Buffer, config: Optional[DecoderConfig] = None) -> int:
    """Compute the total size of the frame at the start of ``buffer``.

    Only headers and line terminators are inspected. A bulk string body
    does not need to be buffered yet: its size is known from the header, so
    the returned length may exceed the bytes currently in ``buffer``.
    Aggregates need the headers of all their elements.

    Args:
        buffer: Bytes beginning at a frame boundary
        config: Decoder limits (defaults to ``DecoderConfig()``)

    Returns:
        Number of bytes the complete frame occupies

    Raises:
        NotCompleteError: If the buffer ends before the frame does
        DecodeError: If the buffer can never hold a valid frame
    """
    return _frame_end(buffer, 0, config or DEFAULT_CONFIG, 0)


def parse(buffer: Buffer, config: Optional[DecoderConfig] = None) -> tuple[Frame, int]:
    """Parse the frame at the start of ``buffer`` without modifying it.

    Args:
        buffer: Bytes beginning at a frame boundary
        config: Decoder limits (defaults to ``DecoderConfig()``)

    Returns:
        Tuple of (frame, number of bytes the frame occupies)

    Raises:
        NotCompleteError: If the buffer ends before the frame does
        DecodeError: If the frame is malformed
    """
    config = config or DEFAULT_CONFIG
    length = _frame_end(buffer, 0, config, 0)
    if len(buffer) < length:
        raise NotCompleteError()
    frame, end = _parse_frame(buffer, 0)
    if end != length:
        raise InvalidFrameError(f"Frame length mismatch: expected {length} bytes, parsed {end}")
    return frame, length


def decode(buffer: bytearray, config: Optional[DecoderConfig] = None) -> tuple[Frame, int]:
    """Decode one frame from the front of ``buffer`` and remove its bytes.

    This is the streaming entry point: append incoming bytes to a
    ``bytearray`` and call decode() until it raises ``NotCompleteError``.

    Args:
        buffer: Mutable buffer beginning at a frame boundary
        config: Decoder limits (defaults to ``DecoderConfig()``)

    Returns:
        Tuple of (frame, number of bytes consumed)

    Raises:
        NotCompleteError: If the buffer holds only part of a frame. The
            buffer is left unchanged.
        DecodeError: If the frame is malformed. The stream should be
            considered corrupted.

    Examples:
        ```python
        from respcodec import NotCompleteError, decode

        buffer = bytearray(b"*2\\r\\n+OK\\r\\n:+1")
        try:
            decode(buffer)
        except NotCompleteError:
            buffer += b"\\r\\n"

        frame, consumed = decode(buffer)  # Array([...]), 14
        ```
    """
    try:
        frame, consumed = parse(buffer, config)
    except DecodeError as e:
        logger.debug("Undecodable frame at buffer head: %s", e)
        raise

    del buffer[:consumed]
    return frame, consumed


def decode_as(
    frame_type: type[Frame], buffer: bytearray, config: Optional[DecoderConfig] = None
) -> Frame:
    """Decode one frame that must be of ``frame_type``.

    Use this when the protocol position already determines the variant, for
    example a command that must arrive as an ``Array``.

    Raises:
        InvalidFrameTypeError: If the frame is of another variant. The buffer
            is left unchanged.
    """
    frame, consumed = parse(buffer, config)
    if type(frame) is not frame_type:
        raise InvalidFrameTypeError(
            bytes(buffer[:1]),
            f"Expected {frame_type.__name__}, got {type(frame).__name__}",
        )
    del buffer[:consumed]
    return frame


# --------------------------------------------------------------------------
# Pass 1: frame extents


def _line_end(buffer: Buffer, start: int) -> int:
    """Return the index of the CRLF terminating the line that starts at ``start``."""
    index = buffer.find(CRLF, start)
    if index < 0:
        raise NotCompleteError()
    return index


def _read_header(buffer: Buffer, pos: int) -> tuple[int, int]:
    """Read a decimal length header; return (declared length, index after CRLF)."""
    index = _line_end(buffer, pos + 1)
    text = bytes(buffer[pos + 1 : index])
    try:
        declared = int(text.decode("ascii"))
    except (UnicodeDecodeError, ValueError) as e:
        raise InvalidFrameError(f"Malformed length header: {text!r}") from e
    return declared, index + 2


def _frame_end(buffer: Buffer, pos: int, config: DecoderConfig, depth: int) -> int:
    if pos >= len(buffer):
        raise NotCompleteError()

    tag = bytes(buffer[pos : pos + 1])
    rule = _EXTENT_RULES.get(tag)
    if rule is None:
        raise InvalidFrameTypeError(tag)
    return rule(buffer, pos, config, depth)


def _line_extent(buffer: Buffer, pos: int, config: DecoderConfig, depth: int) -> int:
    return _line_end(buffer, pos + 1) + 2


def _bulk_extent(buffer: Buffer, pos: int, config: DecoderConfig, depth: int) -> int:
    declared, body_start = _read_header(buffer, pos)
    if declared == -1:
        return body_start
    if declared < 0 or declared > config.max_bulk_length:
        raise InvalidFrameLengthError(declared)

    end = body_start + declared + 2
    if len(buffer) >= end and buffer[end - 2 : end] != CRLF:
        raise InvalidFrameError(f"Bulk string of length {declared} is not terminated by CRLF")
    return end


def _aggregate_header(
    buffer: Buffer, pos: int, config: DecoderConfig, depth: int, nullable: bool
) -> tuple[int, int]:
    declared, cursor = _read_header(buffer, pos)
    if declared == -1 and nullable:
        return declared, cursor
    if declared < 0 or declared > config.max_aggregate_length:
        raise InvalidFrameLengthError(declared)
    if depth >= config.max_nesting_depth:
        raise InvalidFrameError(
            f"Aggregate nesting exceeds max_nesting_depth={config.max_nesting_depth}"
        )
    return declared, cursor


def _array_extent(buffer: Buffer, pos: int, config: DecoderConfig, depth: int) -> int:
    count, cursor = _aggregate_header(buffer, pos, config, depth, nullable=True)
    for _ in range(max(count, 0)):
        cursor = _frame_end(buffer, cursor, config, depth + 1)
    return cursor


def _set_extent(buffer: Buffer, pos: int, config: DecoderConfig, depth: int) -> int:
    count, cursor = _aggregate_header(buffer, pos, config, depth, nullable=False)
    for _ in range(count):
        cursor = _frame_end(buffer, cursor, config, depth + 1)
    return cursor


def _map_extent(buffer: Buffer, pos: int, config: DecoderConfig, depth: int) -> int:
    count, cursor = _aggregate_header(buffer, pos, config, depth, nullable=False)
    for _ in range(count):
        if cursor >= len(buffer):
            raise NotCompleteError()
        key_tag = bytes(buffer[cursor : cursor + 1])
        if key_tag != SimpleString.TAG:
            raise InvalidFrameTypeError(
                key_tag, f"Map key must be a simple string, got {key_tag!r}"
            )
        cursor = _line_end(buffer, cursor + 1) + 2
        cursor = _frame_end(buffer, cursor, config, depth + 1)
    return cursor


ExtentRule = Callable[[Buffer, int, DecoderConfig, int], int]

_EXTENT_RULES: dict[bytes, ExtentRule] = {
    SimpleString.TAG: _line_extent,
    SimpleError.TAG: _line_extent,
    Integer.TAG: _line_extent,
    Boolean.TAG: _line_extent,
    Double.TAG: _line_extent,
    Null.TAG: _line_extent,
    BulkString.TAG: _bulk_extent,
    Array.TAG: _array_extent,
    Set.TAG: _set_extent,
    Map.TAG: _map_extent,
}


# --------------------------------------------------------------------------
# Pass 2: frame construction (the whole frame is known to be buffered)


def _read_line(buffer: Buffer, pos: int) -> tuple[bytes, int]:
    index = _line_end(buffer, pos + 1)
    return bytes(buffer[pos + 1 : index]), index + 2


def _read_text(buffer: Buffer, pos: int) -> tuple[str, int]:
    body, end = _read_line(buffer, pos)
    if b"\r" in body or b"\n" in body:
        raise InvalidFrameError(f"Line frame contains a bare CR or LF: {body!r}")
    try:
        return body.decode("utf-8"), end
    except UnicodeDecodeError as e:
        raise ConversionError(f"Invalid UTF-8 in frame body {body!r}: {e}") from e


def _parse_frame(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    tag = bytes(buffer[pos : pos + 1])
    parser = _PARSERS.get(tag)
    if parser is None:
        raise InvalidFrameTypeError(tag)
    return parser(buffer, pos)


def _parse_simple_string(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    text, end = _read_text(buffer, pos)
    return SimpleString(text), end


def _parse_simple_error(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    text, end = _read_text(buffer, pos)
    return SimpleError(text), end


def _parse_integer(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    text, end = _read_text(buffer, pos)
    try:
        value = int(text)
    except ValueError as e:
        raise ConversionError(f"Invalid integer body {text!r}: {e}") from e
    if not INT64_MIN <= value <= INT64_MAX:
        raise ConversionError(f"Integer {value} is outside the signed 64-bit range")
    return Integer(value), end


def _parse_double(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    text, end = _read_text(buffer, pos)
    try:
        value = float(text)
    except ValueError as e:
        raise ConversionError(f"Invalid double body {text!r}: {e}") from e
    return Double(value), end


def _parse_boolean(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    body, end = _read_line(buffer, pos)
    if body == b"t":
        return Boolean(True), end
    if body == b"f":
        return Boolean(False), end
    raise InvalidFrameError(f"Invalid boolean body: {body!r}")


def _parse_null(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    body, end = _read_line(buffer, pos)
    if body:
        raise InvalidFrameError(f"Null frame must have an empty body, got {body!r}")
    return Null(), end


def _parse_bulk_string(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    declared, body_start = _read_header(buffer, pos)
    if declared == -1:
        return NullBulkString(), body_start
    body_end = body_start + declared
    return BulkString(bytes(buffer[body_start:body_end])), body_end + 2


def _parse_items(buffer: Buffer, cursor: int, count: int) -> tuple[list[Frame], int]:
    items: list[Frame] = []
    for _ in range(count):
        item, cursor = _parse_frame(buffer, cursor)
        items.append(item)
    return items, cursor


def _parse_array(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    count, cursor = _read_header(buffer, pos)
    if count == -1:
        return NullArray(), cursor
    items, cursor = _parse_items(buffer, cursor, count)
    return Array(items), cursor


def _parse_set(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    count, cursor = _read_header(buffer, pos)
    items, cursor = _parse_items(buffer, cursor, count)
    return Set(items), cursor


def _parse_map(buffer: Buffer, pos: int) -> tuple[Frame, int]:
    count, cursor = _read_header(buffer, pos)
    entries: dict[str, Frame] = {}
    for _ in range(count):
        key, cursor = _read_text(buffer, cursor)
        if key in entries:
            raise InvalidFrameError(f"Duplicate map key: {key!r}")
        entries[key], cursor = _parse_frame(buffer, cursor)
    return Map(entries), cursor


_PARSERS: dict[bytes, Callable[[Buffer, int], tuple[Frame, int]]] = {
    SimpleString.TAG: _parse_simple_string,
    SimpleError.TAG: _parse_simple_error,
    Integer.TAG: _parse_integer,
    Boolean.TAG: _parse_boolean,
    Double.TAG: _parse_double,
    Null.TAG: _parse_null,
    BulkString.TAG: _parse_bulk_string,
    Array.TAG: _parse_array,
    Set.TAG: _parse_set,
    Map.TAG: _parse_map,
}
