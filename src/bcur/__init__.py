"""bcur: Bytewords account export decoder

A Python library for the bytewords text encoding (byte-per-word, with a CRC-32
trailer) and for decoding account exports carried in it. An export is a CBOR
byte string holding a gzip stream, which inflates to a second CBOR item laid
out positionally as ``[version, [account, ...]]``.

Key Features:
- Minimal (2 chars per byte) and standard (4 chars per byte) bytewords forms
- CRC-32 verification with typed errors for every failure mode
- Bounded gzip inflation
- Immutable Pydantic records for the decoded export

Quick Start:
    >>> from bcur import Variant, decode_bytewords, encode_bytewords
    >>>
    >>> text = encode_bytewords(b"hello", Variant.STANDARD)
    >>> decode_bytewords(text, Variant.STANDARD)
    b'hello'

Decoding a full export:
    >>> from bcur import decode_export
    >>> root = decode_export(text)  # doctest: +SKIP
    >>> root.accounts[0].wallet.name  # doctest: +SKIP
"""

from __future__ import annotations

from .bytewords import BYTEWORDS_ALPHABET, WORD_TABLE, Variant, WordTable
from .bytewords import decode as decode_bytewords
from .bytewords import encode as encode_bytewords
from .config import DecodeConfig
from .container import unwrap
from .exceptions import (
    BcurError,
    ChecksumMismatchError,
    ContainerDecodeError,
    CorruptWordError,
    DecodeError,
    MalformedTokenError,
    SchemaMismatchError,
    TooShortError,
    UnknownWordError,
)
from .mapper import map_root
from .models import Account, Root, WalletInfo
from .pipeline import decode_export
from .utils import crc32, crc32_bytes, verify_crc32

__version__ = "0.1.0"

__all__ = [
    # Core API
    "decode_export",
    "encode_bytewords",
    "decode_bytewords",
    "Variant",
    "unwrap",
    "map_root",
    "DecodeConfig",
    # Word table
    "WordTable",
    "WORD_TABLE",
    "BYTEWORDS_ALPHABET",
    # Records
    "Root",
    "Account",
    "WalletInfo",
    # Exceptions
    "BcurError",
    "DecodeError",
    "MalformedTokenError",
    "UnknownWordError",
    "CorruptWordError",
    "TooShortError",
    "ChecksumMismatchError",
    "ContainerDecodeError",
    "SchemaMismatchError",
    # CRC
    "crc32",
    "crc32_bytes",
    "verify_crc32",
    # Version
    "__version__",
]
