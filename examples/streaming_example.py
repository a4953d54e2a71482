#!/usr/bin/env python3
"""Streaming example for respcodec.

Simulates a socket that delivers pipelined replies in small, arbitrary
chunks and shows how FrameReader reassembles them.
"""

from __future__ import annotations

import random

from respcodec import FrameReader, encode, to_frame


def main() -> None:
    """Run the streaming example."""
    replies = [
        to_frame("OK"),
        to_frame(b"a bulk string with\r\nline breaks"),
        to_frame({"pong": True, "latency_ms": 0.42}),
        to_frame([1, 2, [3, None]]),
    ]
    stream = b"".join(encode(reply) for reply in replies)

    rng = random.Random(7)
    reader = FrameReader()
    position = 0

    print(f"Streaming {len(stream)} bytes holding {len(replies)} frames")
    while position < len(stream):
        size = rng.randint(1, 9)
        chunk = stream[position : position + size]
        position += size

        reader.feed(chunk)
        for frame in reader:
            print(f"  after {position:>3} bytes: {type(frame).__name__}")

    print(f"Done, {reader.buffered} bytes left over")


if __name__ == "__main__":
    main()
