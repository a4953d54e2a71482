"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from respcodec import Array, BulkString, Frame, SimpleString


@pytest.fixture
def set_command() -> Frame:
    """A SET command as a client would send it."""
    return Array([BulkString(b"SET"), BulkString(b"greeting"), BulkString(b"hello\r\nworld")])


@pytest.fixture
def set_command_bytes() -> bytes:
    """Wire encoding of the set_command fixture."""
    return b"*3\r\n$3\r\nSET\r\n$8\r\ngreeting\r\n$12\r\nhello\r\nworld\r\n"


@pytest.fixture
def ok_reply() -> Frame:
    """Standard OK status reply."""
    return SimpleString("OK")
