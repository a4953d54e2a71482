"""Configuration for the RESP decoder.

The decoder trusts declared lengths only up to these limits, so a corrupted
or hostile header cannot make a caller buffer unbounded data or recurse
without bound.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DecoderConfig:
    """Limits applied while decoding.

    Attributes:
        max_bulk_length: Largest declared bulk string length in bytes
            (default 512 MiB, matching Redis ``proto-max-bulk-len``).
        max_aggregate_length: Largest declared element count for arrays and
            sets, or pair count for maps (default 2**31 - 1).
        max_nesting_depth: Deepest allowed nesting of arrays, sets and maps
            (default 128). A top-level array has depth 1.

    Examples:
        ```python
        from respcodec import DecoderConfig, FrameReader

        # Reject anything that would need more than 1 MiB of buffering
        config = DecoderConfig(max_bulk_length=1024 * 1024, max_nesting_depth=8)
        reader = FrameReader(config)
        ```
    """

    max_bulk_length: int = 512 * 1024 * 1024
    max_aggregate_length: int = 2**31 - 1
    max_nesting_depth: int = 128

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_bulk_length < 0:
            raise ValueError(f"max_bulk_length must be >= 0, got {self.max_bulk_length}")

        if self.max_aggregate_length < 0:
            raise ValueError(
                f"max_aggregate_length must be >= 0, got {self.max_aggregate_length}"
            )

        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be >= 1, got {self.max_nesting_depth}")


DEFAULT_CONFIG = DecoderConfig()
