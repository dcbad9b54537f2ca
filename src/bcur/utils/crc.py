"""CRC-32 checksum helpers.

Bytewords payloads carry a 4-byte big-endian CRC-32 (IEEE 802.3 polynomial)
of the body as a trailer. These helpers compute, append, split and verify it.
"""

from __future__ import annotations

import struct
import zlib

CRC32_SIZE = 4


def crc32(data: bytes) -> int:
    """Calculate CRC-32 checksum.

    Uses the standard CRC-32 polynomial (IEEE 802.3) compatible with
    zlib.crc32() and binascii.crc32().

    Args:
        data: Data to checksum

    Returns:
        32-bit unsigned CRC value

    Example:
        >>> hex(crc32(b"123456789"))
        '0xcbf43926'
    """
    return zlib.crc32(data) & 0xFFFFFFFF


def crc32_bytes(data: bytes) -> bytes:
    """Calculate CRC-32 checksum and return as 4 bytes (big-endian).

    Example:
        >>> crc32_bytes(b"123456789")
        b'\\xcb\\xf49&'
    """
    return struct.pack(">I", crc32(data))


def append_crc32(body: bytes) -> bytes:
    """Return ``body`` followed by its big-endian CRC-32."""
    return bytes(body) + crc32_bytes(body)


def split_crc32(payload: bytes) -> tuple[bytes, bytes]:
    """Split a payload into ``(body, checksum)``.

    Raises:
        ValueError: If the payload is shorter than the checksum itself
    """
    if len(payload) < CRC32_SIZE:
        raise ValueError(f"Payload too short for CRC-32: {len(payload)} bytes")
    return payload[:-CRC32_SIZE], payload[-CRC32_SIZE:]


def verify_crc32(data: bytes, expected_crc: int | bytes) -> bool:
    """Verify CRC-32 checksum.

    Args:
        data: Data to verify
        expected_crc: Expected CRC value (int or 4 big-endian bytes)

    Returns:
        True if CRC matches, False otherwise

    Raises:
        ValueError: If ``expected_crc`` is bytes of the wrong length
    """
    if isinstance(expected_crc, (bytes, bytearray)):
        if len(expected_crc) != CRC32_SIZE:
            raise ValueError(f"CRC-32 must be 4 bytes, got {len(expected_crc)}")
        expected_crc = struct.unpack(">I", expected_crc)[0]

    return crc32(data) == expected_crc
