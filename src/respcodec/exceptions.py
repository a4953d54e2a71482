"""Exception hierarchy for respcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from RespError for easy catching of any respcodec-specific error.

Decoding distinguishes two outcomes:

- ``NotCompleteError``: the buffer holds only a prefix of a frame. The buffer is
  left untouched and the caller should append more bytes and retry.
- ``DecodeError`` and its subclasses: the bytes can never form a valid frame.
  The caller should treat the stream as corrupted.
"""

from __future__ import annotations


class RespError(Exception):
    """Base exception for all respcodec errors."""

    pass


class NotCompleteError(RespError):
    """Raised when the buffer does not yet hold a complete frame.

    This is a control signal rather than a fault: no bytes have been consumed,
    and the same call succeeds once the remainder of the frame is appended.
    """

    def __init__(self, message: str = "Frame is not complete") -> None:
        super().__init__(message)


class DecodeError(RespError):
    """Base class for permanent decoding failures.

    Examples:
        - Unknown tag byte
        - Negative or oversized declared length
        - Malformed header or missing CRLF terminator
        - Non-numeric integer/double body
    """

    pass


class InvalidFrameError(DecodeError):
    """Raised when a frame is structurally malformed.

    Examples:
        - Bulk string body not followed by CRLF
        - Boolean body other than ``t`` or ``f``
        - Duplicate key inside a map
        - Aggregates nested deeper than the configured limit
    """

    pass


class InvalidFrameTypeError(DecodeError):
    """Raised when a tag byte does not name a supported frame variant."""

    def __init__(self, tag: bytes, message: str | None = None) -> None:
        self.tag = tag
        super().__init__(message or f"Invalid frame type: {tag!r}")


class InvalidFrameLengthError(DecodeError):
    """Raised when a declared length is outside its allowed domain.

    ``-1`` is only valid for bulk strings and arrays, where it denotes the
    corresponding null form.
    """

    def __init__(self, length: int, message: str | None = None) -> None:
        self.length = length
        super().__init__(message or f"Invalid frame length: {length}")


class ConversionError(DecodeError):
    """Raised when a frame body cannot be converted to its host value.

    Always chained (``raise ... from``) to the underlying ``ValueError`` or
    ``UnicodeDecodeError``.
    """

    pass
