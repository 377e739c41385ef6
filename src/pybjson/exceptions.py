"""Exception hierarchy for pybjson.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BjsonError for easy catching of any pybjson-specific error.
"""

from __future__ import annotations


class BjsonError(Exception):
    """Base exception for all pybjson errors."""

    pass


class EncodeError(BjsonError):
    """Raised when encoding a value fails.

    Examples:
        - Integer outside the signed 64-bit range
        - Text that cannot be encoded as UTF-8
        - Node that is not a Value
    """

    pass


class SizeOverflowError(EncodeError):
    """Raised when a length or count does not fit its length prefix.

    Attributes:
        size: Byte length or element count that was rejected
        limit: Largest value the prefix may carry
    """

    def __init__(self, message: str, *, size: int, limit: int) -> None:
        super().__init__(message)
        self.size = size
        self.limit = limit


class DecodeError(BjsonError):
    """Raised when decoding binary data fails.

    Attributes:
        offset: Byte offset in the input where the problem was detected,
            or None when not tied to a position
    """

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class UnknownTagError(DecodeError):
    """Raised when a tag byte is not assigned to any value type."""

    def __init__(self, tag: int, *, offset: int) -> None:
        super().__init__(f"Unknown type tag 0x{tag:02X} at offset {offset}", offset=offset)
        self.tag = tag


class TruncatedError(DecodeError):
    """Raised when fewer bytes remain than a field declares or requires.

    Attributes:
        needed: Number of bytes the field requires
        available: Number of bytes actually remaining
    """

    def __init__(self, what: str, *, offset: int, needed: int, available: int) -> None:
        super().__init__(
            f"Truncated data while reading {what} at offset {offset}: "
            f"need {needed} bytes, have {available}",
            offset=offset,
        )
        self.needed = needed
        self.available = available


class TrailingBytesError(DecodeError):
    """Raised when bytes follow a complete top-level value in strict mode."""

    def __init__(self, *, offset: int, count: int) -> None:
        super().__init__(
            f"{count} trailing bytes after top-level value at offset {offset}", offset=offset
        )
        self.count = count


class DuplicateKeyError(DecodeError):
    """Raised when an encoded object repeats a key."""

    def __init__(self, key: str, *, offset: int) -> None:
        super().__init__(f"Duplicate object key {key!r} at offset {offset}", offset=offset)
        self.key = key


class InvalidTextError(DecodeError):
    """Raised when string bytes are not valid UTF-8."""

    pass


class InvalidBoolError(DecodeError):
    """Raised when a boolean payload byte is neither 0x00 nor 0x01."""

    pass


class NestingTooDeepError(EncodeError, DecodeError):
    """Raised when arrays and objects nest deeper than the configured limit.

    Both directions raise it, so it is caught by ``except EncodeError`` around
    ``encode()`` and by ``except DecodeError`` around ``decode()``.
    """

    def __init__(self, depth: int, *, offset: int | None = None) -> None:
        DecodeError.__init__(
            self, f"Containers nested deeper than max_depth={depth}", offset=offset
        )
        self.depth = depth


class ConversionError(BjsonError):
    """Raised when a native Python object has no Value representation.

    Examples:
        - Unsupported type (set, bytes, datetime, ...)
        - Dictionary with non-string keys
    """

    pass
