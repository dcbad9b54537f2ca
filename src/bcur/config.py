"""Configuration for the decode pipeline.

This module provides the configuration dataclass consumed by the container
unwrapper and the top-level decode entry point.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_INFLATED_SIZE = 16 * 1024 * 1024


@dataclass(frozen=True)
class DecodeConfig:
    """Limits applied while decoding an export.

    Attributes:
        max_inflated_size: Upper bound in bytes on the gzip-inflated inner
            payload (default 16 MiB). A compressed stream that would inflate
            past this is rejected instead of being expanded in memory.

    Examples:
        ```python
        from bcur import DecodeConfig, decode_export

        # Tighter bound for untrusted input
        config = DecodeConfig(max_inflated_size=256 * 1024)
        root = decode_export(text, config=config)
        ```
    """

    max_inflated_size: int = DEFAULT_MAX_INFLATED_SIZE

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_inflated_size <= 0:
            raise ValueError(f"max_inflated_size must be > 0, got {self.max_inflated_size}")
