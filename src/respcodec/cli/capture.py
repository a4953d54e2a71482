"""Capture inspection CLI command."""

from __future__ import annotations

from pathlib import Path

from ..exceptions import NotCompleteError
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
from ..stream import FrameReader


def inspect_file(file_path: Path) -> int:
    """Decode every frame in a file of captured RESP bytes and print it.

    Args:
        file_path: Path to a file holding raw wire bytes

    Returns:
        Number of frames decoded

    Raises:
        DecodeError: If the capture contains a malformed frame
        NotCompleteError: If the capture ends partway through a frame
    """
    data = file_path.read_bytes()

    reader = FrameReader()
    reader.feed(data)

    print("|" * 7, "respcodec: RESP Wire Codec", "|" * 7)
    print(f"{len(data)} bytes read from {file_path}")
    print()

    count = 0
    for frame in reader:
        count += 1
        offset = len(data) - reader.buffered
        print(f"{'=' * 19} Frame {count} (ends at byte {offset}) {'=' * 19}")
        for line in describe(frame):
            print(line)
        print()

    if reader.buffered:
        raise NotCompleteError(
            f"Capture ends with an incomplete frame ({reader.buffered} trailing bytes)"
        )

    print(f"{count} frame{'s' if count != 1 else ''} decoded.")
    return count


def describe(frame: Frame, indent: int = 0) -> list[str]:
    """Render a frame as indented, redis-cli style text lines."""
    pad = "  " * indent

    if isinstance(frame, SimpleString):
        return [f"{pad}{frame.value}"]
    if isinstance(frame, SimpleError):
        return [f"{pad}(error) {frame.value}"]
    if isinstance(frame, Integer):
        return [f"{pad}(integer) {frame.value}"]
    if isinstance(frame, Double):
        return [f"{pad}(double) {frame.value!r}"]
    if isinstance(frame, Boolean):
        return [f"{pad}({'true' if frame.value else 'false'})"]
    if isinstance(frame, BulkString):
        return [f"{pad}{frame.value!r} ({len(frame)} bytes)"]
    if isinstance(frame, NullBulkString):
        return [f"{pad}(nil bulk string)"]
    if isinstance(frame, NullArray):
        return [f"{pad}(nil array)"]
    if isinstance(frame, Null):
        return [f"{pad}(null)"]
    if isinstance(frame, Map):
        lines = [f"{pad}(map) {len(frame)} pairs"]
        for key, value in frame.items():
            lines.append(f"{pad}  {key} =>")
            lines.extend(describe(value, indent + 2))
        return lines
    if isinstance(frame, (Array, Set)):
        kind = "array" if isinstance(frame, Array) else "set"
        lines = [f"{pad}({kind}) {len(frame)} elements"]
        for item in frame.items:
            lines.extend(describe(item, indent + 1))
        return lines

    raise TypeError(f"Cannot describe {type(frame).__name__}")
