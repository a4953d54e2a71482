"""Command-line tools for respcodec."""

from __future__ import annotations
