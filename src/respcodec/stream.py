"""Incremental frame reading over a byte stream.

A FrameReader owns the receive buffer for one connection. Transport code
feeds it whatever bytes arrive and pulls out complete frames; frames split
across reads are reassembled transparently.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Optional

from .codec.config import DecoderConfig
from .codec.decoder import decode
from .exceptions import NotCompleteError
from .models.frames import Frame

logger = logging.getLogger(__name__)


class FrameReader:
    """Reassembles frames from arbitrarily fragmented input.

    The reader performs no I/O and is not thread-safe; use one reader per
    connection.

    Example:
        >>> reader = FrameReader()
        >>> reader.feed(b"+OK\\r\\n:+4")
        >>> list(reader)
        [SimpleString(value='OK')]
        >>> reader.feed(b"2\\r\\n")
        >>> reader.read_frame()
        Integer(value=42)

    A ``DecodeError`` from read_frame() propagates unchanged and leaves the
    offending bytes in the buffer; the stream cannot be resynchronized.
    """

    def __init__(self, config: Optional[DecoderConfig] = None) -> None:
        self._buffer = bytearray()
        self._config = config

    @property
    def buffered(self) -> int:
        """Number of received bytes not yet returned as frames."""
        return len(self._buffer)

    def feed(self, data: bytes) -> None:
        """Append received bytes to the buffer."""
        self._buffer += data

    def read_frame(self) -> Optional[Frame]:
        """Return the next complete frame, or None if more data is needed.

        Raises:
            DecodeError: If the buffered bytes cannot form a valid frame
        """
        try:
            frame, consumed = decode(self._buffer, self._config)
        except NotCompleteError:
            return None

        logger.debug(
            "Decoded %s (%d bytes, %d buffered)", type(frame).__name__, consumed, self.buffered
        )
        return frame

    def clear(self) -> None:
        """Discard any buffered bytes."""
        self._buffer.clear()

    def __iter__(self) -> Iterator[Frame]:
        while True:
            frame = self.read_frame()
            if frame is None:
                return
            yield frame
