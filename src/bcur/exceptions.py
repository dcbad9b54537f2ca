"""Exception hierarchy for bcur.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BcurError for easy catching of any bcur-specific error.
Every decode failure is a DecodeError, so callers that only care whether a
payload could be read can catch that single type.
"""

from __future__ import annotations


class BcurError(Exception):
    """Base exception for all bcur errors."""

    pass


class DecodeError(BcurError):
    """Raised when decoding a bytewords payload fails at any stage."""

    pass


class MalformedTokenError(DecodeError):
    """Raised when a token cannot be a byteword at all.

    Examples:
        - Token length does not match the variant (2 or 4 characters)
        - Character outside ``a``-``z`` after case folding
        - Odd-length minimal input (dangling final character)
    """

    pass


class UnknownWordError(DecodeError):
    """Raised when a token's first/last letter pair is not in the word table."""

    pass


class CorruptWordError(DecodeError):
    """Raised when a standard-variant word has valid ends but wrong interior letters."""

    pass


class TooShortError(DecodeError):
    """Raised when fewer than 5 bytes decode (no room for body plus CRC-32)."""

    pass


class ChecksumMismatchError(DecodeError):
    """Raised when the trailing CRC-32 does not match the decoded body."""

    pass


class ContainerDecodeError(DecodeError):
    """Raised when unwrapping the nested containers fails.

    Examples:
        - Malformed CBOR stream (outer or inner)
        - Outer CBOR item is not a byte string
        - Malformed or truncated gzip stream
        - Inflated data exceeds the configured size cap
    """

    pass


class SchemaMismatchError(DecodeError):
    """Raised when the decoded value tree does not have the expected positional shape."""

    pass
