"""RESP frame modeling for respcodec.

This module provides the frame variants, the ``Frame`` union and helpers for
building frames from plain Python values.
"""

from __future__ import annotations

from .convert import to_frame
from .frames import (
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
)

__all__ = [
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
]
