#!/usr/bin/env python3
"""Basic usage example for respcodec.

This example demonstrates:
1. Building frames from plain Python values
2. Encoding to RESP wire format
3. Decoding back to frames
4. Keeping the three null forms apart
"""

from __future__ import annotations

from respcodec import Map, Null, NullArray, NullBulkString, decode, encode, to_frame


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("respcodec Basic Usage Example")
    print("=" * 60)
    print()

    # Build a command frame
    print("1. Building a command frame...")
    command = to_frame([b"HSET", b"probe:7", b"depth", b"1500"])
    print(f"   {command!r}")
    print()

    # Encode it
    print("2. Encoding to RESP...")
    data = encode(command)
    print(f"   {len(data)} bytes: {data!r}")
    print()

    # Decode it again
    print("3. Decoding from a buffer...")
    buffer = bytearray(data)
    decoded, consumed = decode(buffer)
    print(f"   Consumed {consumed} bytes, {len(buffer)} left")
    print(f"   Round trip {'succeeded' if decoded == command else 'FAILED'}")
    print()

    # Maps go out in key order
    print("4. Encoding a map...")
    reply = Map()
    reply["status"] = to_frame("surfacing")
    reply["battery_pct"] = to_frame(87)
    reply["depth_m"] = to_frame(15.25)
    print(f"   {encode(reply)!r}")
    print()

    # Nulls
    print("5. Null forms...")
    for frame in (Null(), NullBulkString(), NullArray()):
        wire = encode(frame)
        back, _ = decode(bytearray(wire))
        print(f"   {type(frame).__name__:<16} {wire!r:<12} -> {type(back).__name__}")
    print()


if __name__ == "__main__":
    main()
