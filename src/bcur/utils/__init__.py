"""Utility functions for bcur.

This module provides the CRC-32 helpers used by the bytewords codec.
"""

from __future__ import annotations

from .crc import CRC32_SIZE, append_crc32, crc32, crc32_bytes, split_crc32, verify_crc32

__all__ = [
    "CRC32_SIZE",
    "crc32",
    "crc32_bytes",
    "append_crc32",
    "split_crc32",
    "verify_crc32",
]
