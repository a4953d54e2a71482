"""RESP frame variants.

Every value that crosses the wire is one of the twelve variants below. The set
is closed: ``Frame`` is the union of all of them, and both the encoder and the
decoder dispatch on it exhaustively.

Variants are Pydantic models so that payloads are validated once, at
construction time. Scalar and sequence variants are frozen; ``Map`` accepts
insertions while it is being built.

Example:
    >>> frame = Array([SimpleString("SET"), BulkString(b"key"), Integer(42)])
    >>> len(frame)
    3
    >>> Map({"b": Integer(1), "a": Double(2.5)}).keys()
    ['a', 'b']
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _check_line(text: str) -> str:
    if "\r" in text or "\n" in text:
        raise ValueError(f"text must not contain CR or LF: {text!r}")
    return text


class FrameModel(BaseModel):
    """Base class for all frame variants.

    Equality is structural: two frames are equal when they are the same
    variant with equal payloads. Frames of the same variant are also ordered
    by payload. Comparing different variants raises ``TypeError``, as does
    ordering sequences that mix variants.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    TAG: ClassVar[bytes] = b""

    def _sort_key(self) -> Any:
        return ()

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() < other._sort_key()  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() <= other._sort_key()  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() > other._sort_key()  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() >= other._sort_key()  # type: ignore[attr-defined]


class _LineFrame(FrameModel):
    value: str

    def __init__(self, value: str) -> None:
        super().__init__(value=value)

    @field_validator("value")
    @classmethod
    def _single_line(cls, value: str) -> str:
        return _check_line(value)

    def _sort_key(self) -> Any:
        return self.value


class SimpleString(_LineFrame):
    """Short status text such as ``OK``. Must not contain CR or LF."""

    TAG: ClassVar[bytes] = b"+"


class SimpleError(_LineFrame):
    """Error message text. Must not contain CR or LF."""

    TAG: ClassVar[bytes] = b"-"


class Integer(FrameModel):
    """Signed 64-bit integer."""

    TAG: ClassVar[bytes] = b":"

    value: int = Field(strict=True, ge=INT64_MIN, le=INT64_MAX)

    def __init__(self, value: int) -> None:
        super().__init__(value=value)

    def _sort_key(self) -> Any:
        return self.value


class BulkString(FrameModel):
    """Length-prefixed binary-safe string.

    ``len()`` returns the payload size in bytes, which is the length written
    in the frame header.
    """

    TAG: ClassVar[bytes] = b"$"

    value: bytes

    def __init__(self, value: bytes | bytearray | memoryview | str) -> None:
        if isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
        super().__init__(value=value)

    def __len__(self) -> int:
        return len(self.value)

    def _sort_key(self) -> Any:
        return self.value


class NullBulkString(FrameModel):
    """RESP2 null in a bulk-string slot (``$-1``)."""

    TAG: ClassVar[bytes] = b"$"


class NullArray(FrameModel):
    """RESP2 null in an array slot (``*-1``)."""

    TAG: ClassVar[bytes] = b"*"


class Null(FrameModel):
    """RESP3 generic null (``_``)."""

    TAG: ClassVar[bytes] = b"_"


class Boolean(FrameModel):
    """RESP3 boolean."""

    TAG: ClassVar[bytes] = b"#"

    value: bool = Field(strict=True)

    def __init__(self, value: bool) -> None:
        super().__init__(value=value)

    def _sort_key(self) -> Any:
        return self.value


class Double(FrameModel):
    """RESP3 double precision float. NaN payloads do not compare equal."""

    TAG: ClassVar[bytes] = b","

    value: float

    def __init__(self, value: float) -> None:
        super().__init__(value=value)

    def _sort_key(self) -> Any:
        return self.value


class _SequenceFrame(FrameModel):
    items: list[Frame] = Field(default_factory=list)

    def __init__(self, items: Optional[list[Frame]] = None) -> None:
        super().__init__(items=list(items) if items is not None else [])

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Frame:
        return self.items[index]

    def _sort_key(self) -> Any:
        return self.items


class Array(_SequenceFrame):
    """Ordered, possibly heterogeneous, sequence of frames."""

    TAG: ClassVar[bytes] = b"*"


class Set(_SequenceFrame):
    """RESP3 set. Element uniqueness is not enforced."""

    TAG: ClassVar[bytes] = b"~"


class Map(FrameModel):
    """RESP3 map from string keys to frames.

    Keys are always iterated in ascending order regardless of insertion
    order, and that order is the order used on the wire. Keys are encoded as
    simple strings, so they must not contain CR or LF.

    Unlike the other variants, a map can be filled after construction:

        >>> m = Map()
        >>> m["b"] = Integer(1)
        >>> m.insert("a", Integer(2))
        >>> m.keys()
        ['a', 'b']
    """

    model_config = ConfigDict(frozen=False, extra="forbid")

    TAG: ClassVar[bytes] = b"%"

    entries: dict[str, Frame] = Field(default_factory=dict)

    def __init__(self, entries: Optional[Mapping[str, Frame]] = None) -> None:
        super().__init__(entries=dict(entries) if entries is not None else {})

    @field_validator("entries")
    @classmethod
    def _single_line_keys(cls, entries: dict[str, Frame]) -> dict[str, Frame]:
        for key in entries:
            _check_line(key)
        return entries

    def insert(self, key: str, value: Frame) -> Optional[Frame]:
        """Insert ``value`` under ``key`` and return the value it replaced, if any."""
        if not isinstance(key, str):
            raise TypeError(f"map keys must be str, got {type(key).__name__}")
        if not isinstance(value, FrameModel):
            raise TypeError(f"map values must be frames, got {type(value).__name__}")
        _check_line(key)
        previous = self.entries.get(key)
        self.entries[key] = value  # type: ignore[assignment]
        return previous

    def keys(self) -> list[str]:
        return sorted(self.entries)

    def items(self) -> list[tuple[str, Frame]]:
        return [(key, self.entries[key]) for key in self.keys()]

    def get(self, key: str, default: Optional[Frame] = None) -> Optional[Frame]:
        return self.entries.get(key, default)

    def __setitem__(self, key: str, value: Frame) -> None:
        self.insert(key, value)

    def __getitem__(self, key: str) -> Frame:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def _sort_key(self) -> Any:
        return self.items()


Frame = Union[
    SimpleString,
    SimpleError,
    Integer,
    BulkString,
    NullBulkString,
    Array,
    NullArray,
    Null,
    Boolean,
    Double,
    Map,
    Set,
]

# Resolve the recursive ``Frame`` references now that the union exists
Array.model_rebuild()
Set.model_rebuild()
Map.model_rebuild()
