"""Bytewords encoder and decoder.

Two wire variants are supported:

- ``Variant.MINIMAL``: two characters per byte (first and last letter of the
  word), concatenated without a separator: bytes ``00 01`` (``able acid``)
  become ``"aead"``.
- ``Variant.STANDARD``: the full four-letter word per byte, joined with a
  separator (a space by default; ``"-"`` gives the URI-style form).

Every encoded string carries a 4-byte big-endian CRC-32 of the body, which is
verified and stripped on decode.
"""

from __future__ import annotations

import enum
import logging

from ..exceptions import (
    ChecksumMismatchError,
    CorruptWordError,
    MalformedTokenError,
    TooShortError,
    UnknownWordError,
)
from ..utils.crc import CRC32_SIZE, append_crc32, split_crc32, verify_crc32
from .table import WORD_TABLE, WordTable

logger = logging.getLogger(__name__)

# Smallest decodable payload: one body byte plus the checksum
MIN_PAYLOAD_SIZE = CRC32_SIZE + 1


class Variant(enum.Enum):
    """Bytewords wire form."""

    MINIMAL = 2
    STANDARD = 4

    @property
    def token_length(self) -> int:
        """Characters per encoded byte."""
        return self.value


def encode(
    data: bytes,
    variant: Variant = Variant.MINIMAL,
    *,
    separator: str = " ",
    table: WordTable = WORD_TABLE,
) -> str:
    """Encode bytes as a bytewords string with a CRC-32 trailer.

    Args:
        data: Body bytes to encode (may be empty, although an empty body does
            not decode back)
        variant: Wire form to produce
        separator: Word separator for ``Variant.STANDARD`` (ignored for minimal)
        table: Word table to use

    Returns:
        Encoded string

    Example:
        >>> decode(encode(b"hello")) == b"hello"
        True
    """
    payload = append_crc32(data)

    if variant is Variant.MINIMAL:
        return "".join(table.minimal_for_byte(b) for b in payload)

    return separator.join(table.word_for_byte(b) for b in payload)


def decode(
    text: str,
    variant: Variant = Variant.MINIMAL,
    *,
    separator: str = " ",
    table: WordTable = WORD_TABLE,
) -> bytes:
    """Decode a bytewords string and verify its CRC-32.

    Case is ignored. Leading and trailing whitespace around the whole input is
    stripped before tokenizing.

    Args:
        text: Encoded string
        variant: Wire form the string is in (not auto-detected)
        separator: Word separator for ``Variant.STANDARD``
        table: Word table to use

    Returns:
        The body bytes, checksum removed

    Raises:
        MalformedTokenError: Token of the wrong length or with a non-letter
        UnknownWordError: First/last letter pair not in the table
        CorruptWordError: Standard word whose interior letters do not match
        TooShortError: Fewer than 5 bytes decoded
        ChecksumMismatchError: CRC-32 trailer does not match the body
    """
    tokens = _tokenize(text.strip(), variant, separator)
    payload = bytes(_decode_token(token, variant, table, i) for i, token in enumerate(tokens))

    if len(payload) < MIN_PAYLOAD_SIZE:
        raise TooShortError(
            f"Decoded {len(payload)} bytes, need at least {MIN_PAYLOAD_SIZE} "
            f"(body plus {CRC32_SIZE}-byte checksum)"
        )

    body, checksum = split_crc32(payload)
    if not verify_crc32(body, checksum):
        raise ChecksumMismatchError(f"CRC-32 mismatch: payload carries {checksum.hex()}")

    logger.debug("Decoded %d-byte body from %d %s tokens", len(body), len(tokens), variant.name)
    return body


def _tokenize(text: str, variant: Variant, separator: str) -> list[str]:
    if not text:
        return []

    if variant is Variant.STANDARD:
        if not separator:
            raise ValueError("Standard variant requires a non-empty separator")
        return text.split(separator)

    width = variant.token_length
    return [text[i : i + width] for i in range(0, len(text), width)]


def _decode_token(token: str, variant: Variant, table: WordTable, position: int) -> int:
    """Map one token back to its byte value."""
    if len(token) != variant.token_length:
        raise MalformedTokenError(
            f"Token {position} {token!r}: expected {variant.token_length} characters, "
            f"got {len(token)}"
        )

    # Case folding can map non-ASCII letters onto a-z
    if not token.isascii() or not token.isalpha():
        raise MalformedTokenError(f"Token {position} {token!r}: only letters a-z are allowed")

    word = token.lower()
    value = table.byte_for_chars(word[0], word[-1])
    if value is None:
        raise UnknownWordError(
            f"Token {position} {token!r}: no byteword starts with {word[0]!r} "
            f"and ends with {word[-1]!r}"
        )

    if variant is Variant.STANDARD:
        expected = table.word_for_byte(value)
        if word[1:-1] != expected[1:-1]:
            raise CorruptWordError(
                f"Token {position} {token!r}: interior letters do not match {expected!r}"
            )

    return value
