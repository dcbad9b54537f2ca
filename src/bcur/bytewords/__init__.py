"""Bytewords text encoding for bcur.

This module provides the static word table and the minimal/standard
bytewords encoder and decoder with CRC-32 verification.
"""

from __future__ import annotations

from .codec import MIN_PAYLOAD_SIZE, Variant, decode, encode
from .table import BYTEWORDS_ALPHABET, WORD_TABLE, WordTable

__all__ = [
    "encode",
    "decode",
    "Variant",
    "MIN_PAYLOAD_SIZE",
    "WordTable",
    "WORD_TABLE",
    "BYTEWORDS_ALPHABET",
]
