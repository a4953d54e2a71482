"""Conversion from natural Python values to frames.

These helpers are conveniences for application code; the wire format only
ever sees the frame variants themselves.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .frames import (
    Array,
    Boolean,
    BulkString,
    Double,
    Frame,
    FrameModel,
    Integer,
    Map,
    Null,
    Set,
    SimpleString,
)


def to_frame(value: Any) -> Frame:
    """Convert a Python value to the frame variant that naturally represents it.

    Conversion rules:
        - frame instances are returned unchanged
        - ``None`` -> Null
        - ``bool`` -> Boolean (checked before ``int``)
        - ``int`` -> Integer
        - ``float`` -> Double
        - ``str`` -> SimpleString
        - ``bytes``/``bytearray``/``memoryview`` -> BulkString
        - mappings -> Map (keys must be ``str``)
        - ``set``/``frozenset`` -> Set
        - ``list``/``tuple`` -> Array

    Containers are converted recursively. The RESP2 null forms are never
    produced here; construct ``NullBulkString``/``NullArray`` explicitly.

    Args:
        value: Python value to convert

    Returns:
        Frame representing the value

    Raises:
        TypeError: If the value (or a nested value) has no frame equivalent
        pydantic.ValidationError: If a payload is invalid (e.g. text with CR/LF)

    Example:
        >>> to_frame(["SET", b"key", 1])
        Array(items=[SimpleString(value='SET'), BulkString(value=b'key'), Integer(value=1)])
    """
    if isinstance(value, FrameModel):
        return value  # type: ignore[return-value]
    if value is None:
        return Null()
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, float):
        return Double(value)
    if isinstance(value, str):
        return SimpleString(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BulkString(value)
    if isinstance(value, Mapping):
        converted = Map()
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Map keys must be str, got {type(key).__name__}")
            converted.insert(key, to_frame(item))
        return converted
    if isinstance(value, (set, frozenset)):
        return Set([to_frame(item) for item in value])
    if isinstance(value, (list, tuple)):
        return Array([to_frame(item) for item in value])

    raise TypeError(f"Cannot convert {type(value).__name__} to a RESP frame")
