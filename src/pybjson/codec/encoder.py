"""Binary encoder for Value trees.

This module provides the encode() function that converts a Value to its
self-describing binary form: one tag byte per value, fixed-width scalar
payloads and 32-bit length prefixes for strings, arrays and objects.
"""

from __future__ import annotations

import logging

from ..exceptions import EncodeError, NestingTooDeepError
from ..models.values import INT64_MAX, INT64_MIN, Array, Bool, Float, Int, Null, Object, Text, Value
from .bytepack import ByteWriter
from .tags import DEFAULT_MAX_DEPTH, MAX_LENGTH, Tag

logger = logging.getLogger(__name__)


class Encoder:
    """Encodes Values with a fixed set of limits.

    An Encoder holds no state between calls, so one instance may be shared
    across threads.

    Example:
        >>> encoder = Encoder(max_depth=16)
        >>> encoder.encode(Int(value=-1))
        b'\\x1d\\xff\\xff\\xff\\xff\\xff\\xff\\xff\\xff'
    """

    def __init__(self, *, max_length: int = MAX_LENGTH, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Initialize the encoder.

        Args:
            max_length: Largest string byte length or container count (at most MAX_LENGTH)
            max_depth: Deepest allowed nesting of arrays and objects

        Raises:
            ValueError: If a limit is out of range
        """
        if not 0 <= max_length <= MAX_LENGTH:
            raise ValueError(f"max_length must be 0-{MAX_LENGTH}, got {max_length}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.max_length = max_length
        self.max_depth = max_depth

    def encode(self, value: Value) -> bytes:
        """Encode a Value to bytes.

        Raises:
            EncodeError: If the tree cannot be represented
            SizeOverflowError: If a length or count exceeds max_length
            NestingTooDeepError: If containers nest deeper than max_depth
        """
        writer = ByteWriter(self.max_length)
        self._write_value(writer, value, 0)
        encoded = writer.to_bytes()
        logger.debug("Encoded %s into %d bytes", type(value).__name__, len(encoded))
        return encoded

    def _write_value(self, writer: ByteWriter, value: Value, depth: int) -> None:
        """Write one value and, recursively, its children.

        Args:
            writer: ByteWriter to append to
            value: Value to write
            depth: Number of containers enclosing value
        """
        if isinstance(value, Null):
            writer.write_u8(Tag.NULL)
            return

        if isinstance(value, Bool):
            if not isinstance(value.value, bool):
                raise EncodeError(f"Bool: expected bool, got {type(value.value).__name__}")
            writer.write_u8(Tag.BOOL8)
            writer.write_u8(1 if value.value else 0)
            return

        if isinstance(value, Int):
            # bool is an int subclass but is never a valid Int payload
            if not isinstance(value.value, int) or isinstance(value.value, bool):
                raise EncodeError(f"Int: expected int, got {type(value.value).__name__}")
            if value.value < INT64_MIN or value.value > INT64_MAX:
                raise EncodeError(
                    f"Int: value {value.value} out of bounds [{INT64_MIN}, {INT64_MAX}]"
                )
            writer.write_u8(Tag.INT64)
            writer.write_i64(value.value)
            return

        if isinstance(value, Float):
            if not isinstance(value.value, float):
                raise EncodeError(f"Float: expected float, got {type(value.value).__name__}")
            writer.write_u8(Tag.FLOAT64)
            writer.write_f64(value.value)
            return

        if isinstance(value, Text):
            self._write_text(writer, value.value)
            return

        if isinstance(value, Array):
            if depth >= self.max_depth:
                raise NestingTooDeepError(self.max_depth)
            items = value.items
            writer.write_u8(Tag.ARRAY32)
            writer.write_length(len(items), "array count")
            for item in items:
                self._write_value(writer, item, depth + 1)
            return

        if isinstance(value, Object):
            if depth >= self.max_depth:
                raise NestingTooDeepError(self.max_depth)
            entries = value.entries
            writer.write_u8(Tag.MAP32)
            writer.write_length(len(entries), "object count")
            # Duplicate keys from unvalidated models are written as-is
            for entry in entries:
                try:
                    key, item = entry
                except (TypeError, ValueError) as e:
                    raise EncodeError(f"Object: malformed entry {entry!r}") from e
                self._write_text(writer, key)
                self._write_value(writer, item, depth + 1)
            return

        raise EncodeError(f"Expected a Value, got {type(value).__name__}")

    @staticmethod
    def _write_text(writer: ByteWriter, text: str) -> None:
        if not isinstance(text, str):
            raise EncodeError(f"Text: expected str, got {type(text).__name__}")
        try:
            raw = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodeError(f"Text: cannot encode as UTF-8: {e}") from e
        writer.write_u8(Tag.STRING32)
        writer.write_length(len(raw), "string byte length")
        writer.write_bytes(raw)


def encode(value: Value, *, max_length: int = MAX_LENGTH, max_depth: int = DEFAULT_MAX_DEPTH) -> bytes:
    """Encode a Value to compact binary format.

    The output is deterministic: the same tree always yields the same bytes.
    Nothing is returned on failure.

    Args:
        value: Value tree to encode
        max_length: Largest string byte length or container count; defaults to
            the 32-bit prefix limit
        max_depth: Deepest allowed nesting of arrays and objects

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If a node is not a valid Value
        SizeOverflowError: If a length or count exceeds max_length
        NestingTooDeepError: If containers nest deeper than max_depth (including
            cyclic trees built with model_construct)

    Examples:
        ```python
        from pybjson import Array, Bool, Int, Null, Object, encode

        data = encode(Null())
        # b'\\x00'

        data = encode(Object(entries=[("a", Int(value=1)), ("b", Array(items=[Bool(value=True), Null()]))]))
        ```
    """
    return Encoder(max_length=max_length, max_depth=max_depth).encode(value)
