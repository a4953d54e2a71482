"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from respcodec import __version__


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "respcodec.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "respcodec: RESP Wire Codec" in result.stdout
    assert "--inspect" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert f"respcodec {__version__}" in result.stdout


def test_cli_inspect_capture(tmp_path: Path) -> None:
    """Test CLI --inspect with a capture of several frames."""
    capture = tmp_path / "capture.bin"
    capture.write_bytes(
        b"*2\r\n$3\r\nGET\r\n$3\r\nkey\r\n"
        b"$-1\r\n"
        b"%1\r\n+count\r\n:+3\r\n"
    )

    result = _run("--inspect", str(capture))
    assert result.returncode == 0
    assert "respcodec: RESP Wire Codec" in result.stdout
    assert "3 frames decoded." in result.stdout
    assert "(array) 2 elements" in result.stdout
    assert "(nil bulk string)" in result.stdout
    assert "(integer) 3" in result.stdout


def test_cli_inspect_truncated_capture(tmp_path: Path) -> None:
    """Test CLI --inspect with a capture ending mid-frame."""
    capture = tmp_path / "truncated.bin"
    capture.write_bytes(b"+OK\r\n$10\r\nshort")

    result = _run("--inspect", str(capture))
    assert result.returncode == 1
    assert "incomplete frame" in result.stderr


def test_cli_inspect_corrupt_capture(tmp_path: Path) -> None:
    """Test CLI --inspect with an unknown tag byte."""
    capture = tmp_path / "corrupt.bin"
    capture.write_bytes(b"?oops\r\n")

    result = _run("--inspect", str(capture))
    assert result.returncode == 1
    assert "Invalid frame type" in result.stderr


def test_cli_inspect_missing_file() -> None:
    """Test CLI --inspect with missing file."""
    result = _run("--inspect", "nonexistent.bin")
    assert result.returncode == 1
    assert "Error" in result.stderr or "not found" in result.stderr.lower()


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "respcodec: RESP Wire Codec" in result.stdout
