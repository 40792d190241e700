"""
Unit tests for token_metadata.codec module.

Tests cover:
- encode_uint / encode_u64_le range checks
- decode_enum unknown discriminators
- ByteReader integers, bools, strings, options and underruns
- ByteWriter scalars, containers and option flavours
"""

import pytest
from solders.pubkey import Pubkey

from tests.helpers.factories import make_pubkey
from token_metadata.codec import (
    ByteReader,
    ByteWriter,
    decode_enum,
    encode_u64_le,
    encode_uint,
)
from token_metadata.enums import TokenStandard
from token_metadata.errors import (
    BufferUnderrunError,
    EncodingFormatError,
    EncodingRangeError,
    UnknownVariantError,
)


class TestEncodeUint:
    """Tests for encode_uint and encode_u64_le."""

    def test_encode_u64_le_small(self) -> None:
        """Test that small values are little-endian with zero padding."""
        assert encode_u64_le(2) == b"\x02" + bytes(7)

    def test_encode_u64_le_max(self) -> None:
        """Test the maximum u64 value."""
        assert encode_u64_le(2**64 - 1) == b"\xff" * 8

    def test_encode_u16(self) -> None:
        """Test a two-byte value."""
        assert encode_uint(0x1234, 2) == b"\x34\x12"

    def test_encode_overflow_raises(self) -> None:
        """Test that a value too large for its width is rejected."""
        with pytest.raises(EncodingRangeError, match="does not fit in u64"):
            encode_u64_le(2**64)

    def test_encode_negative_raises(self) -> None:
        """Test that negative values are rejected."""
        with pytest.raises(EncodingRangeError, match="-1"):
            encode_uint(-1, 1)

    def test_encode_bool_rejected(self) -> None:
        """Test that bools are not accepted as integers."""
        with pytest.raises(EncodingRangeError, match="Expected an integer"):
            encode_uint(True, 1)


class TestDecodeEnum:
    """Tests for decode_enum."""

    def test_known_value(self) -> None:
        """Test decoding a known discriminator."""
        assert decode_enum(TokenStandard, 4) is TokenStandard.PROGRAMMABLE_NON_FUNGIBLE

    def test_unknown_value(self) -> None:
        """Test that an unknown discriminator names the enum and value."""
        with pytest.raises(UnknownVariantError, match="TokenStandard discriminator: 9"):
            decode_enum(TokenStandard, 9)


class TestByteReader:
    """Tests for ByteReader."""

    def test_read_integers(self) -> None:
        """Test sequential integer reads advance the offset."""
        r = ByteReader(b"\x01\x02\x00\x03\x00\x00\x00")
        assert r.read_u8() == 1
        assert r.read_u16() == 2
        assert r.read_u32() == 3
        assert r.at_end()
        assert r.offset == 7

    def test_read_underrun(self) -> None:
        """Test that reading past the end raises."""
        r = ByteReader(b"\x01\x02")
        with pytest.raises(BufferUnderrunError, match="Need 8 bytes"):
            r.read_u64()

    def test_read_bool_strict(self) -> None:
        """Test that only 0 and 1 are valid bool bytes."""
        r = ByteReader(b"\x00\x01\x02")
        assert r.read_bool() is False
        assert r.read_bool() is True
        with pytest.raises(EncodingFormatError, match="0x02"):
            r.read_bool()

    def test_read_string(self) -> None:
        """Test a u32 length-prefixed UTF-8 string."""
        r = ByteReader(b"\x03\x00\x00\x00abc")
        assert r.read_string() == "abc"

    def test_read_string_invalid_utf8(self) -> None:
        """Test that invalid UTF-8 raises a format error."""
        r = ByteReader(b"\x01\x00\x00\x00\xff")
        with pytest.raises(EncodingFormatError, match="UTF-8"):
            r.read_string()

    def test_read_string_truncated(self) -> None:
        """Test that a length prefix longer than the buffer raises."""
        r = ByteReader(b"\x05\x00\x00\x00ab")
        with pytest.raises(BufferUnderrunError):
            r.read_string()

    def test_read_option(self) -> None:
        """Test absent and present options."""
        r = ByteReader(b"\x00\x01\x07")
        assert r.read_option(ByteReader.read_u8) is None
        assert r.read_option(ByteReader.read_u8) == 7

    def test_read_option_bad_tag(self) -> None:
        """Test that option tags other than 0 and 1 are rejected."""
        r = ByteReader(b"\x02")
        with pytest.raises(EncodingFormatError, match="option tag 2"):
            r.read_option(ByteReader.read_u8)

    def test_read_trailing_option_at_end(self) -> None:
        """Test that a missing trailing option decodes as None."""
        r = ByteReader(b"")
        assert r.read_trailing_option(ByteReader.read_u8) is None

    def test_read_coption_pubkey_absent(self) -> None:
        """Test that an absent COption still consumes its payload."""
        r = ByteReader(bytes(4) + bytes(32) + b"\x09")
        assert r.read_coption_pubkey() is None
        assert r.read_u8() == 9

    def test_read_zeroable_pubkey(self) -> None:
        """Test that the all-zero pubkey means absent."""
        key = make_pubkey(5)
        r = ByteReader(bytes(32) + bytes(key))
        assert r.read_zeroable_pubkey() is None
        assert r.read_zeroable_pubkey() == key

    def test_read_vec(self) -> None:
        """Test a u32 length-prefixed vector."""
        r = ByteReader(b"\x02\x00\x00\x00\x0a\x0b")
        assert r.read_vec(ByteReader.read_u8) == [10, 11]

    def test_invalid_offset(self) -> None:
        """Test that a start offset past the end is rejected."""
        with pytest.raises(BufferUnderrunError):
            ByteReader(b"\x00", offset=2)


class TestByteWriter:
    """Tests for ByteWriter."""

    def test_chained_writes(self) -> None:
        """Test that writes chain and accumulate in order."""
        out = ByteWriter().write_u8(1).write_u16(2).write_bool(True).to_bytes()
        assert out == b"\x01\x02\x00\x01"

    def test_write_bool_requires_bool(self) -> None:
        """Test that ints are not accepted as bools."""
        with pytest.raises(EncodingFormatError, match="Expected a bool"):
            ByteWriter().write_bool(1)  # type: ignore[arg-type]

    def test_write_pubkey_requires_pubkey(self) -> None:
        """Test that raw bytes are not accepted as a pubkey."""
        with pytest.raises(EncodingFormatError, match="Expected a Pubkey"):
            ByteWriter().write_pubkey(bytes(32))  # type: ignore[arg-type]

    def test_write_string(self) -> None:
        """Test a length-prefixed UTF-8 string."""
        assert ByteWriter().write_string("hé").to_bytes() == b"\x03\x00\x00\x00h\xc3\xa9"

    def test_write_map_sorted_keys(self) -> None:
        """Test that maps are written in ascending key order."""
        out = ByteWriter().write_map(
            {"b": 2, "a": 1},
            ByteWriter.write_string,
            ByteWriter.write_u8,
        )
        assert out.to_bytes() == (
            b"\x02\x00\x00\x00" + b"\x01\x00\x00\x00a\x01" + b"\x01\x00\x00\x00b\x02"
        )

    def test_write_option(self) -> None:
        """Test both option states."""
        w = ByteWriter().write_option(None, ByteWriter.write_u8)
        w.write_option(5, ByteWriter.write_u8)
        assert w.to_bytes() == b"\x00\x01\x05"

    def test_write_coption_u64_absent(self) -> None:
        """Test that an absent COption is zero-filled to full width."""
        assert ByteWriter().write_coption_u64(None).to_bytes() == bytes(12)

    def test_write_zeroable_pubkey_none(self) -> None:
        """Test that None is written as the default pubkey."""
        out = ByteWriter().write_zeroable_pubkey(None).to_bytes()
        assert out == bytes(Pubkey.default())

    def test_write_fixed_wrong_size(self) -> None:
        """Test that fixed-width fields must match exactly."""
        with pytest.raises(EncodingRangeError, match="exactly 4 bytes"):
            ByteWriter().write_fixed(b"\x00", 4)

    def test_overflow_leaves_no_partial_output(self) -> None:
        """Test that a rejected value writes nothing."""
        w = ByteWriter().write_u8(1)
        with pytest.raises(EncodingRangeError):
            w.write_u8(256)
        assert w.to_bytes() == b"\x01"
