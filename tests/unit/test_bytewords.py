"""Unit tests for the bytewords encoder and decoder."""

from __future__ import annotations

import pytest

from bcur.bytewords import WORD_TABLE, Variant, decode, encode
from bcur.exceptions import (
    ChecksumMismatchError,
    CorruptWordError,
    DecodeError,
    MalformedTokenError,
    TooShortError,
    UnknownWordError,
)
from bcur.utils.crc import append_crc32


def _render_minimal(payload: bytes) -> str:
    """Render bytes as minimal words without adding a checksum."""
    return "".join(WORD_TABLE.minimal_for_byte(b) for b in payload)


class TestEncode:
    """Test bytewords encoding."""

    def test_minimal_length(self, sample_payload: bytes) -> None:
        """Test minimal form uses two characters per byte including the checksum."""
        text = encode(sample_payload, Variant.MINIMAL)

        assert len(text) == 2 * (len(sample_payload) + 4)
        assert " " not in text

    def test_standard_word_count(self, sample_payload: bytes) -> None:
        """Test standard form emits one word per byte including the checksum."""
        words = encode(sample_payload, Variant.STANDARD).split(" ")

        assert len(words) == len(sample_payload) + 4
        assert all(len(word) == 4 for word in words)

    def test_known_prefix(self) -> None:
        """Test body bytes map to their table words."""
        assert encode(b"\x00\xff", Variant.MINIMAL).startswith("aezm")
        assert encode(b"\x00\xff", Variant.STANDARD).startswith("able zoom ")

    def test_default_variant_is_minimal(self) -> None:
        """Test minimal is the default form."""
        assert encode(b"abc") == encode(b"abc", Variant.MINIMAL)

    def test_custom_separator(self) -> None:
        """Test URI-style dash separator."""
        text = encode(b"\x00\x01", Variant.STANDARD, separator="-")

        assert text.startswith("able-acid-")
        assert " " not in text

    def test_checksum_is_rendered(self) -> None:
        """Test the trailer equals the rendered CRC-32."""
        assert encode(b"hello") == _render_minimal(append_crc32(b"hello"))

    def test_empty_body(self) -> None:
        """Test empty body encodes to the checksum alone."""
        assert len(encode(b"", Variant.MINIMAL)) == 8


class TestDecode:
    """Test bytewords decoding."""

    def test_roundtrip_minimal(self, sample_payload: bytes) -> None:
        """Test minimal decode recovers the body."""
        assert decode(encode(sample_payload, Variant.MINIMAL), Variant.MINIMAL) == sample_payload

    def test_roundtrip_standard(self, sample_payload: bytes) -> None:
        """Test standard decode recovers the body."""
        text = encode(sample_payload, Variant.STANDARD)
        assert decode(text, Variant.STANDARD) == sample_payload

    def test_roundtrip_dash_separator(self, sample_payload: bytes) -> None:
        """Test standard decode with a custom separator."""
        text = encode(sample_payload, Variant.STANDARD, separator="-")
        assert decode(text, Variant.STANDARD, separator="-") == sample_payload

    def test_case_insensitive(self, sample_payload: bytes) -> None:
        """Test uppercase input decodes."""
        minimal = encode(sample_payload, Variant.MINIMAL).upper()
        standard = encode(sample_payload, Variant.STANDARD).upper()

        assert decode(minimal, Variant.MINIMAL) == sample_payload
        assert decode(standard, Variant.STANDARD) == sample_payload

    def test_surrounding_whitespace_ignored(self, sample_payload: bytes) -> None:
        """Test leading and trailing whitespace is stripped."""
        text = f"  {encode(sample_payload)}\n"
        assert decode(text) == sample_payload

    def test_all_errors_are_decode_errors(self) -> None:
        """Test every failure is catchable as DecodeError."""
        with pytest.raises(DecodeError):
            decode("not bytewords", Variant.MINIMAL)


class TestDecodeErrors:
    """Test bytewords decode failures."""

    def test_odd_length_minimal(self, sample_payload: bytes) -> None:
        """Test a dangling final character is malformed."""
        text = encode(sample_payload, Variant.MINIMAL)

        with pytest.raises(MalformedTokenError, match="expected 2 characters"):
            decode(text[:-1], Variant.MINIMAL)

    def test_wrong_word_length_standard(self) -> None:
        """Test a three-letter word is malformed."""
        text = encode(b"hello", Variant.STANDARD)
        words = text.split(" ")
        words[0] = words[0][:3]

        with pytest.raises(MalformedTokenError, match="expected 4 characters"):
            decode(" ".join(words), Variant.STANDARD)

    def test_double_separator(self) -> None:
        """Test an empty token between separators is malformed."""
        text = encode(b"hello", Variant.STANDARD).replace(" ", "  ", 1)

        with pytest.raises(MalformedTokenError):
            decode(text, Variant.STANDARD)

    def test_non_letter_character(self) -> None:
        """Test digits are rejected."""
        text = encode(b"hello", Variant.MINIMAL)

        with pytest.raises(MalformedTokenError, match="a-z"):
            decode("a1" + text[2:], Variant.MINIMAL)

    def test_non_ascii_character(self) -> None:
        """Test non-ASCII letters are rejected."""
        text = encode(b"hello", Variant.MINIMAL)

        with pytest.raises(MalformedTokenError):
            decode("ée" + text[2:], Variant.MINIMAL)

    def test_kelvin_sign(self) -> None:
        """Test a non-ASCII character that lower-cases to a-z is rejected."""
        text = encode(b"hello", Variant.MINIMAL)

        with pytest.raises(MalformedTokenError, match="a-z"):
            decode("\u212a" + text[1:], Variant.MINIMAL)

    def test_unknown_pair(self) -> None:
        """Test a letter pair with no table entry."""
        text = encode(b"hello", Variant.MINIMAL)

        with pytest.raises(UnknownWordError):
            decode("az" + text[2:], Variant.MINIMAL)

    def test_corrupt_interior(self) -> None:
        """Test a standard word with valid ends but wrong middle letters."""
        words = encode(b"hello", Variant.STANDARD).split(" ")
        word = words[2]
        replacement = "x" if word[1] != "x" else "y"
        words[2] = word[0] + replacement + word[2:]

        with pytest.raises(CorruptWordError):
            decode(" ".join(words), Variant.STANDARD)

    def test_empty_input(self) -> None:
        """Test empty input is too short."""
        with pytest.raises(TooShortError):
            decode("", Variant.MINIMAL)
        with pytest.raises(TooShortError):
            decode("", Variant.STANDARD)

    def test_checksum_only(self) -> None:
        """Test an empty body does not decode."""
        with pytest.raises(TooShortError):
            decode(encode(b""), Variant.MINIMAL)

    def test_four_bytes(self) -> None:
        """Test four decoded bytes are too short."""
        with pytest.raises(TooShortError, match="at least 5"):
            decode("aeaeaeae", Variant.MINIMAL)

    def test_standard_requires_separator(self) -> None:
        """Test an empty separator is a usage error."""
        with pytest.raises(ValueError, match="separator"):
            decode("able", Variant.STANDARD, separator="")


class TestChecksumSensitivity:
    """Test CRC-32 detection of corrupted payloads."""

    @pytest.mark.parametrize("bit", range(8 * 9))
    def test_single_bit_flip(self, bit: int) -> None:
        """Test flipping any single bit of body or checksum is detected."""
        payload = bytearray(append_crc32(b"hello"))
        payload[bit // 8] ^= 1 << (bit % 8)

        with pytest.raises(ChecksumMismatchError):
            decode(_render_minimal(bytes(payload)), Variant.MINIMAL)

    def test_swapped_bytes(self) -> None:
        """Test transposed body bytes are detected."""
        payload = bytearray(append_crc32(b"hello"))
        payload[0], payload[1] = payload[1], payload[0]

        with pytest.raises(ChecksumMismatchError):
            decode(_render_minimal(bytes(payload)), Variant.MINIMAL)

    def test_truncated_body(self) -> None:
        """Test a dropped word is detected."""
        text = encode(b"hello world", Variant.STANDARD)
        words = text.split(" ")
        del words[3]

        with pytest.raises(ChecksumMismatchError):
            decode(" ".join(words), Variant.STANDARD)
