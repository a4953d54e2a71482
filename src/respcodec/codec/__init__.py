"""RESP wire codec for respcodec.

This module provides encoding of frames to bytes and resumable decoding of
frames from a byte buffer that may hold partial data.
"""

from __future__ import annotations

from .config import DecoderConfig
from .decoder import decode, decode_as, expect_length, parse
from .encoder import encode, format_double

__all__ = [
    "encode",
    "decode",
    "decode_as",
    "expect_length",
    "parse",
    "format_double",
    "DecoderConfig",
]
