"""Nested container unwrapping.

A decoded bytewords body is a CBOR byte string whose content is a gzip stream;
the inflated stream is a second CBOR item holding the export's value tree::

    body --CBOR--> outer bytes --gunzip--> inner bytes --CBOR--> value tree

Each step is strict. Any failure surfaces as ContainerDecodeError chained to
the underlying cbor2 or zlib error.
"""

from __future__ import annotations

import io
import logging
import zlib
from typing import Any

import cbor2

from .config import DecodeConfig
from .exceptions import ContainerDecodeError

logger = logging.getLogger(__name__)

# zlib window bits selecting the gzip container format
_GZIP_WBITS = zlib.MAX_WBITS | 16


def load_byte_string(data: bytes) -> bytes:
    """Decode a CBOR item that must be a single byte string.

    Raises:
        ContainerDecodeError: If the data is not valid CBOR or the item is not
            a byte string
    """
    item = _loads(data, "outer")
    if not isinstance(item, (bytes, bytearray)):
        raise ContainerDecodeError(
            f"Outer CBOR item must be a byte string, got {type(item).__name__}"
        )
    return bytes(item)


def inflate(data: bytes, max_size: int) -> bytes:
    """Inflate a gzip stream, concatenated members included.

    Args:
        data: gzip-compressed bytes
        max_size: Maximum number of inflated bytes to accept

    Returns:
        Inflated bytes

    Raises:
        ContainerDecodeError: If the stream is malformed or truncated, or it
            inflates to more than ``max_size`` bytes
    """
    if not data:
        raise ContainerDecodeError("Compressed stream is empty")

    chunks: list[bytes] = []
    total = 0
    remaining = data

    while remaining:
        decompressor = zlib.decompressobj(_GZIP_WBITS)
        try:
            # One byte past the cap is enough to tell that the cap was exceeded
            chunk = decompressor.decompress(remaining, max_size - total + 1)
        except zlib.error as e:
            raise ContainerDecodeError(f"Malformed gzip stream: {e}") from e

        total += len(chunk)
        if total > max_size:
            raise ContainerDecodeError(f"Inflated data exceeds limit of {max_size} bytes")
        chunks.append(chunk)

        if not decompressor.eof:
            raise ContainerDecodeError("Truncated gzip stream")

        remaining = decompressor.unused_data

    return b"".join(chunks)


def load_value_tree(data: bytes) -> Any:
    """Decode the inner CBOR item into a generic value tree."""
    return _loads(data, "inner")


def unwrap(body: bytes, *, config: DecodeConfig | None = None) -> Any:
    """Unwrap a bytewords body into the export's value tree.

    Args:
        body: Body bytes returned by the bytewords decoder
        config: Decode limits (defaults to ``DecodeConfig()``)

    Returns:
        Untyped value tree (lists, dicts, ints, strings, bytes, booleans, ...)

    Raises:
        ContainerDecodeError: If any of the three layers fails to decode
    """
    config = config or DecodeConfig()

    outer = load_byte_string(body)
    inner = inflate(outer, config.max_inflated_size)
    logger.debug("Inflated %d compressed bytes to %d bytes", len(outer), len(inner))

    return load_value_tree(inner)


def _loads(data: bytes, layer: str) -> Any:
    if not data:
        raise ContainerDecodeError(f"{layer.capitalize()} CBOR data is empty")
    with io.BytesIO(data) as fp:
        try:
            item = cbor2.CBORDecoder(fp).decode()
        except (cbor2.CBORDecodeError, ValueError, TypeError, OverflowError) as e:
            raise ContainerDecodeError(f"Malformed {layer} CBOR: {e}") from e

        if fp.read(1):
            raise ContainerDecodeError(
                f"Malformed {layer} CBOR: extraneous data after item at offset {fp.tell() - 1}"
            )

    return item
