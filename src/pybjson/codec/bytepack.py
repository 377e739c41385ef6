"""Byte-level packing and unpacking utilities.

This module provides the low-level buffer primitives for the BJSON codec.
All multi-byte fields are little-endian; every read is bounds-checked against
the bytes remaining in the buffer.
"""

from __future__ import annotations

import struct
from typing import Union

from ..exceptions import SizeOverflowError, TruncatedError
from ..models.values import INT64_MAX, INT64_MIN
from .tags import MAX_LENGTH

BytesLike = Union[bytes, bytearray, memoryview]

_U32 = struct.Struct("<I")
_I64 = struct.Struct("<q")
_F64 = struct.Struct("<d")


class ByteWriter:
    """Appends tags and fixed-width fields to a growing byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_u8(0x1D)
        >>> writer.write_i64(-1)
        >>> writer.to_bytes()
        b'\\x1d\\xff\\xff\\xff\\xff\\xff\\xff\\xff\\xff'
    """

    def __init__(self, max_length: int = MAX_LENGTH) -> None:
        """Initialize an empty writer.

        Args:
            max_length: Largest value accepted by write_length (at most MAX_LENGTH)

        Raises:
            ValueError: If max_length is negative or exceeds the 32-bit prefix
        """
        if not 0 <= max_length <= MAX_LENGTH:
            raise ValueError(f"max_length must be 0-{MAX_LENGTH}, got {max_length}")
        self._buffer = bytearray()
        self._max_length = max_length

    def write_u8(self, value: int) -> None:
        """Write a single unsigned byte.

        Raises:
            ValueError: If value is not in 0-255
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"write_u8 requires 0-255, got {value}")
        self._buffer.append(value)

    def write_length(self, size: int, what: str = "length") -> None:
        """Write an unsigned 32-bit length or count prefix.

        Args:
            size: Byte length or element count
            what: Description used in the error message

        Raises:
            SizeOverflowError: If size exceeds the writer's max_length
        """
        if size > self._max_length:
            raise SizeOverflowError(
                f"{what} {size} exceeds the length prefix limit {self._max_length}",
                size=size,
                limit=self._max_length,
            )
        self._buffer += _U32.pack(size)

    def write_i64(self, value: int) -> None:
        """Write a signed 64-bit integer (two's complement).

        Raises:
            ValueError: If value does not fit in 64 bits
        """
        if value < INT64_MIN or value > INT64_MAX:
            raise ValueError(f"Value {value} doesn't fit in 64 bits")
        self._buffer += _I64.pack(value)

    def write_f64(self, value: float) -> None:
        """Write an IEEE-754 binary64 float."""
        self._buffer += _F64.pack(value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes without a prefix."""
        self._buffer += data

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Reads tags and fixed-width fields with a forward-only cursor.

    The cursor only moves forward. Every read checks that enough bytes remain
    and raises TruncatedError, leaving the cursor unchanged, when they don't.

    Example:
        >>> reader = ByteReader(b"\\x12\\x01\\x00\\x00\\x00a")
        >>> reader.read_u8("tag")
        18
        >>> reader.read_length("string length")
        1
    """

    def __init__(self, data: BytesLike) -> None:
        """Initialize a reader over the given buffer.

        Args:
            data: Buffer to read; it is not copied
        """
        self._data = memoryview(data).cast("B")
        self._position = 0

    def _require(self, size: int, what: str) -> None:
        available = len(self._data) - self._position
        if size > available:
            raise TruncatedError(
                what, offset=self._position, needed=size, available=available
            )

    def read_u8(self, what: str = "byte") -> int:
        """Read a single unsigned byte.

        Raises:
            TruncatedError: If the buffer is exhausted
        """
        self._require(1, what)
        value = self._data[self._position]
        self._position += 1
        return value

    def read_length(self, what: str = "length") -> int:
        """Read an unsigned 32-bit length or count prefix.

        Raises:
            TruncatedError: If fewer than 4 bytes remain
        """
        self._require(_U32.size, what)
        (value,) = _U32.unpack_from(self._data, self._position)
        self._position += _U32.size
        return value

    def read_i64(self, what: str = "int64") -> int:
        """Read a signed 64-bit integer."""
        self._require(_I64.size, what)
        (value,) = _I64.unpack_from(self._data, self._position)
        self._position += _I64.size
        return value

    def read_f64(self, what: str = "float64") -> float:
        """Read an IEEE-754 binary64 float."""
        self._require(_F64.size, what)
        (value,) = _F64.unpack_from(self._data, self._position)
        self._position += _F64.size
        return value

    def read_bytes(self, size: int, what: str = "bytes") -> bytes:
        """Read exactly size raw bytes.

        Raises:
            TruncatedError: If fewer than size bytes remain
        """
        self._require(size, what)
        start = self._position
        self._position += size
        return self._data[start : self._position].tobytes()

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position

    def at_end(self) -> bool:
        """Return True when every byte has been consumed."""
        return self._position >= len(self._data)
