"""
Borsh-style binary codec used by Token Metadata accounts and instructions.

All integers are unsigned little-endian. Structs are encoded field by field in
declaration order with no padding. Options come in three flavours:

- tagged ``Option<T>``: one tag byte (0 / 1) then the payload when present;
- SPL ``COption<T>``: a u32 tag then a payload that is always present
  (zero-filled when absent);
- zeroable options: no tag, absence is a sentinel value (all-zero pubkey).

``ByteWriter`` only hands out bytes once every field has been written, and
``ByteReader`` raises before returning a partial value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import IntEnum
from typing import TypeVar

from solders.pubkey import Pubkey

from .constants import (
    BYTE_ORDER,
    COPTION_TAG_SIZE,
    DEFAULT_PUBKEY,
    PUBKEY_SIZE,
    U8_SIZE,
    U16_SIZE,
    U32_SIZE,
    U64_SIZE,
    U128_SIZE,
)
from .errors import (
    BufferUnderrunError,
    EncodingFormatError,
    EncodingRangeError,
    UnknownVariantError,
)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
E = TypeVar("E", bound=IntEnum)


def _check_uint(value: int, size: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingRangeError(f"Expected an integer for u{size * 8}, got {value!r}")
    if value < 0 or value >= 1 << (size * 8):
        raise EncodingRangeError(f"Value {value} does not fit in u{size * 8}")
    return value


def encode_uint(value: int, size: int) -> bytes:
    """Encode an unsigned integer on `size` bytes, little-endian."""
    return _check_uint(value, size).to_bytes(size, BYTE_ORDER, signed=False)


def encode_u64_le(value: int) -> bytes:
    """Encode a u64 as 8 little-endian bytes (used for numeric PDA seeds)."""
    return encode_uint(value, U64_SIZE)


def decode_enum(enum_cls: type[E], value: int) -> E:
    """Map a decoded discriminator onto `enum_cls`, failing on unknown values."""
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownVariantError(
            f"Unknown {enum_cls.__name__} discriminator: {value}"
        ) from None


class ByteReader:
    """Cursor over an immutable byte buffer."""

    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = bytes(data)
        if offset < 0 or offset > len(self._data):
            raise BufferUnderrunError(
                f"Offset {offset} is outside a buffer of {len(self._data)} bytes"
            )
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def at_end(self) -> bool:
        return self._offset >= len(self._data)

    def read(self, size: int) -> bytes:
        if size < 0:
            raise EncodingRangeError(f"Cannot read a negative number of bytes: {size}")
        if size > self.remaining:
            raise BufferUnderrunError(
                f"Need {size} bytes at offset {self._offset}, "
                f"only {self.remaining} remaining"
            )
        start = self._offset
        self._offset += size
        return self._data[start : self._offset]

    # Integers

    def read_uint(self, size: int) -> int:
        return int.from_bytes(self.read(size), BYTE_ORDER, signed=False)

    def read_u8(self) -> int:
        return self.read_uint(U8_SIZE)

    def read_u16(self) -> int:
        return self.read_uint(U16_SIZE)

    def read_u32(self) -> int:
        return self.read_uint(U32_SIZE)

    def read_u64(self) -> int:
        return self.read_uint(U64_SIZE)

    def read_u128(self) -> int:
        return self.read_uint(U128_SIZE)

    # Scalars

    def read_bool(self) -> bool:
        raw = self.read_u8()
        if raw == 0:
            return False
        if raw == 1:
            return True
        raise EncodingFormatError(
            f"Invalid bool byte 0x{raw:02x} at offset {self._offset - 1}"
        )

    def read_pubkey(self) -> Pubkey:
        return Pubkey.from_bytes(self.read(PUBKEY_SIZE))

    def read_bytes(self) -> bytes:
        """Read a u32 length-prefixed byte string."""
        return self.read(self.read_u32())

    def read_string(self) -> str:
        raw = self.read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingFormatError(f"Invalid UTF-8 string: {raw!r}") from e

    def read_enum(self, enum_cls: type[E]) -> E:
        return decode_enum(enum_cls, self.read_u8())

    # Containers

    def read_vec(self, read_item: Callable[[ByteReader], T]) -> list[T]:
        length = self.read_u32()
        return [read_item(self) for _ in range(length)]

    def read_map(
        self,
        read_key: Callable[[ByteReader], K],
        read_value: Callable[[ByteReader], V],
    ) -> dict[K, V]:
        length = self.read_u32()
        out: dict[K, V] = {}
        for _ in range(length):
            key = read_key(self)
            out[key] = read_value(self)
        return out

    def read_option(self, read_item: Callable[[ByteReader], T]) -> T | None:
        tag = self.read_u8()
        if tag == 0:
            return None
        if tag == 1:
            return read_item(self)
        raise EncodingFormatError(
            f"Invalid option tag {tag} at offset {self._offset - 1}"
        )

    def read_trailing_option(self, read_item: Callable[[ByteReader], T]) -> T | None:
        """
        Read an optional field that may be cut off by the end of the buffer.

        Accounts written by older program versions stop before fields that were
        added later; those fields decode as absent.
        """
        if self.at_end():
            return None
        return self.read_option(read_item)

    def read_coption(
        self, read_item: Callable[[ByteReader], T], size: int
    ) -> T | None:
        tag = self.read_u32()
        if tag == 0:
            self.read(size)
            return None
        if tag == 1:
            return read_item(self)
        raise EncodingFormatError(
            f"Invalid COption tag {tag} at offset {self._offset - COPTION_TAG_SIZE}"
        )

    def read_coption_pubkey(self) -> Pubkey | None:
        return self.read_coption(ByteReader.read_pubkey, PUBKEY_SIZE)

    def read_coption_u64(self) -> int | None:
        return self.read_coption(ByteReader.read_u64, U64_SIZE)

    def read_zeroable_pubkey(self) -> Pubkey | None:
        key = self.read_pubkey()
        return None if key == DEFAULT_PUBKEY else key


class ByteWriter:
    """Growable output buffer; `to_bytes` returns everything written so far."""

    __slots__ = ("_buf",)

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def to_bytes(self) -> bytes:
        return bytes(self._buf)

    def write(self, data: bytes) -> ByteWriter:
        self._buf += data
        return self

    # Integers

    def write_uint(self, value: int, size: int) -> ByteWriter:
        return self.write(encode_uint(value, size))

    def write_u8(self, value: int) -> ByteWriter:
        return self.write_uint(value, U8_SIZE)

    def write_u16(self, value: int) -> ByteWriter:
        return self.write_uint(value, U16_SIZE)

    def write_u32(self, value: int) -> ByteWriter:
        return self.write_uint(value, U32_SIZE)

    def write_u64(self, value: int) -> ByteWriter:
        return self.write_uint(value, U64_SIZE)

    def write_u128(self, value: int) -> ByteWriter:
        return self.write_uint(value, U128_SIZE)

    # Scalars

    def write_bool(self, value: bool) -> ByteWriter:
        if not isinstance(value, bool):
            raise EncodingFormatError(f"Expected a bool, got {value!r}")
        return self.write_u8(1 if value else 0)

    def write_pubkey(self, value: Pubkey) -> ByteWriter:
        if not isinstance(value, Pubkey):
            raise EncodingFormatError(f"Expected a Pubkey, got {value!r}")
        return self.write(bytes(value))

    def write_fixed(self, value: bytes, size: int) -> ByteWriter:
        if len(value) != size:
            raise EncodingRangeError(
                f"Expected exactly {size} bytes, got {len(value)}"
            )
        return self.write(value)

    def write_bytes(self, value: bytes) -> ByteWriter:
        """Write a u32 length-prefixed byte string."""
        self.write_u32(len(value))
        return self.write(value)

    def write_string(self, value: str) -> ByteWriter:
        if not isinstance(value, str):
            raise EncodingFormatError(f"Expected a str, got {value!r}")
        return self.write_bytes(value.encode("utf-8"))

    def write_enum(self, value: IntEnum) -> ByteWriter:
        return self.write_u8(int(value))

    # Containers

    def write_vec(
        self, items: Iterable[T], write_item: Callable[[ByteWriter, T], object]
    ) -> ByteWriter:
        items = list(items)
        self.write_u32(len(items))
        for item in items:
            write_item(self, item)
        return self

    def write_map(
        self,
        mapping: Mapping[K, V],
        write_key: Callable[[ByteWriter, K], object],
        write_value: Callable[[ByteWriter, V], object],
    ) -> ByteWriter:
        # Borsh maps are written in ascending key order.
        self.write_u32(len(mapping))
        for key in sorted(mapping):  # type: ignore[type-var]
            write_key(self, key)
            write_value(self, mapping[key])
        return self

    def write_option(
        self, value: T | None, write_item: Callable[[ByteWriter, T], object]
    ) -> ByteWriter:
        if value is None:
            return self.write_u8(0)
        self.write_u8(1)
        write_item(self, value)
        return self

    def write_coption(
        self,
        value: T | None,
        write_item: Callable[[ByteWriter, T], object],
        size: int,
    ) -> ByteWriter:
        if value is None:
            self.write_u32(0)
            return self.write(bytes(size))
        self.write_u32(1)
        write_item(self, value)
        return self

    def write_coption_pubkey(self, value: Pubkey | None) -> ByteWriter:
        return self.write_coption(value, ByteWriter.write_pubkey, PUBKEY_SIZE)

    def write_coption_u64(self, value: int | None) -> ByteWriter:
        return self.write_coption(value, ByteWriter.write_u64, U64_SIZE)

    def write_zeroable_pubkey(self, value: Pubkey | None) -> ByteWriter:
        return self.write_pubkey(DEFAULT_PUBKEY if value is None else value)


