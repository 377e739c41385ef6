"""Binary decoder for Value trees.

This module provides decode() and its streaming variants. Decoding is a single
recursive descent over the tag stream with a forward-only cursor: read a tag,
read the matching fixed-width or length-prefixed payload, recurse into
children. No backtracking and no lookahead beyond the current field.
"""

from __future__ import annotations

import logging
from typing import Iterator

from ..exceptions import (
    DecodeError,
    DuplicateKeyError,
    InvalidBoolError,
    InvalidTextError,
    NestingTooDeepError,
    TrailingBytesError,
    TruncatedError,
    UnknownTagError,
)
from ..models.values import Array, Bool, Float, Int, Null, Object, Text, Value
from .bytepack import ByteReader, BytesLike
from .tags import DEFAULT_MAX_DEPTH, Tag, is_assigned

logger = logging.getLogger(__name__)

# Smallest encodings: any value is at least a tag byte, any object entry at
# least an empty-string key (tag + length) plus a value tag.
_MIN_ITEM_SIZE = 1
_MIN_ENTRY_SIZE = 6

_NULL = Null()


class Decoder:
    """Decodes Values with a fixed set of limits.

    A Decoder holds no state between calls; each call creates its own cursor.

    Example:
        >>> Decoder(allow_trailing=True).decode(b"\\x00\\x00")
        Null(kind='null')
    """

    def __init__(self, *, allow_trailing: bool = False, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Initialize the decoder.

        Args:
            allow_trailing: If True, ignore bytes after the top-level value
            max_depth: Deepest allowed nesting of arrays and objects

        Raises:
            ValueError: If max_depth is negative
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.allow_trailing = allow_trailing
        self.max_depth = max_depth

    def decode(self, data: BytesLike) -> Value:
        """Decode exactly one top-level value.

        Raises:
            DecodeError: If the data is malformed (see module exceptions)
        """
        reader = ByteReader(data)
        value = self._read_value(reader, 0)

        if not reader.at_end():
            if not self.allow_trailing:
                raise TrailingBytesError(offset=reader.position(), count=reader.bytes_remaining())
            logger.debug(
                "Ignoring %d trailing bytes at offset %d",
                reader.bytes_remaining(),
                reader.position(),
            )

        logger.debug("Decoded %s from %d bytes", type(value).__name__, reader.position())
        return value

    def decode_prefix(self, data: BytesLike) -> tuple[Value, int]:
        """Decode one value from the start of data.

        Returns:
            Tuple of (value, offset just past the value)
        """
        reader = ByteReader(data)
        value = self._read_value(reader, 0)
        return value, reader.position()

    def iter_decode(self, data: BytesLike) -> Iterator[Value]:
        """Yield consecutive top-level values from concatenated encodings.

        Raises:
            DecodeError: If any value is malformed or the tail is incomplete
        """
        reader = ByteReader(data)
        while not reader.at_end():
            yield self._read_value(reader, 0)

    def _read_value(self, reader: ByteReader, depth: int) -> Value:
        """Read one value and, recursively, its children.

        Args:
            reader: ByteReader positioned at a tag byte
            depth: Number of containers enclosing the value
        """
        offset = reader.position()
        tag = reader.read_u8("type tag")

        if not is_assigned(tag):
            raise UnknownTagError(tag, offset=offset)

        if tag == Tag.NULL:
            return _NULL

        if tag == Tag.BOOL8:
            flag = reader.read_u8("bool payload")
            if flag > 1:
                raise InvalidBoolError(
                    f"Invalid bool payload 0x{flag:02X} at offset {offset + 1}",
                    offset=offset + 1,
                )
            return Bool(value=flag == 1)

        if tag == Tag.INT64:
            return Int(value=reader.read_i64("int64 payload"))

        if tag == Tag.FLOAT64:
            return Float(value=reader.read_f64("float64 payload"))

        if tag == Tag.STRING32:
            return Text(value=self._read_text_payload(reader))

        if depth >= self.max_depth:
            raise NestingTooDeepError(self.max_depth, offset=offset)

        if tag == Tag.ARRAY32:
            count = self._read_count(reader, "array count", _MIN_ITEM_SIZE)
            items = []
            for _ in range(count):
                items.append(self._read_value(reader, depth + 1))
            return Array(items=tuple(items))

        # Tag.MAP32
        count = self._read_count(reader, "object count", _MIN_ENTRY_SIZE)
        entries = []
        seen: set[str] = set()
        for _ in range(count):
            key_offset = reader.position()
            key = self._read_key(reader)
            if key in seen:
                raise DuplicateKeyError(key, offset=key_offset)
            seen.add(key)
            entries.append((key, self._read_value(reader, depth + 1)))
        return Object(entries=tuple(entries))

    def _read_key(self, reader: ByteReader) -> str:
        offset = reader.position()
        tag = reader.read_u8("object key tag")
        if tag != Tag.STRING32:
            if not is_assigned(tag):
                raise UnknownTagError(tag, offset=offset)
            raise DecodeError(
                f"Object key at offset {offset} must be a string32, got tag 0x{tag:02X}",
                offset=offset,
            )
        return self._read_text_payload(reader)

    @staticmethod
    def _read_text_payload(reader: ByteReader) -> str:
        size = reader.read_length("string byte length")
        offset = reader.position()
        raw = reader.read_bytes(size, "string bytes")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidTextError(
                f"Invalid UTF-8 in string at offset {offset}: {e}", offset=offset
            ) from e

    @staticmethod
    def _read_count(reader: ByteReader, what: str, min_size: int) -> int:
        """Read a container count and reject counts the buffer cannot hold."""
        count = reader.read_length(what)
        available = reader.bytes_remaining()
        if count * min_size > available:
            raise TruncatedError(
                f"{what} of {count}",
                offset=reader.position(),
                needed=count * min_size,
                available=available,
            )
        return count


def decode(data: BytesLike, *, allow_trailing: bool = False, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Decode binary data to a Value.

    Every read is bounds-checked; the input is never read past its end.
    Nothing is returned on failure.

    Args:
        data: Encoded bytes (bytes, bytearray or memoryview)
        allow_trailing: If True, ignore bytes after the top-level value;
            by default they raise TrailingBytesError
        max_depth: Deepest allowed nesting of arrays and objects

    Returns:
        Decoded Value

    Raises:
        UnknownTagError: If a tag byte is not assigned
        TruncatedError: If the data ends early or a prefix claims more bytes than remain
        TrailingBytesError: If bytes follow the value and allow_trailing is False
        DuplicateKeyError: If an object repeats a key
        InvalidTextError: If string bytes are not valid UTF-8
        InvalidBoolError: If a bool payload is not 0x00 or 0x01
        NestingTooDeepError: If containers nest deeper than max_depth

    Examples:
        ```python
        from pybjson import decode, encode, Int

        decode(b"\\x00")
        # Null(kind='null')

        decode(encode(Int(value=-1)))
        # Int(kind='int', value=-1)
        ```
    """
    return Decoder(allow_trailing=allow_trailing, max_depth=max_depth).decode(data)


def decode_prefix(data: BytesLike, *, max_depth: int = DEFAULT_MAX_DEPTH) -> tuple[Value, int]:
    """Decode one value from the start of data and report where it ended.

    Returns:
        Tuple of (value, offset just past the value)
    """
    return Decoder(max_depth=max_depth).decode_prefix(data)


def iter_decode(data: BytesLike, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[Value]:
    """Yield each value from a buffer of concatenated encodings.

    Example:
        >>> list(iter_decode(encode(Null()) + encode(Int(value=1))))
        [Null(kind='null'), Int(kind='int', value=1)]
    """
    return Decoder(max_depth=max_depth).iter_decode(data)
