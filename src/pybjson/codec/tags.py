"""Type tags and wire-format constants.

Every encoded value starts with one tag byte. Tags reuse the BJSON numbering
wherever the payload layout is identical (null, float64, string32, array32,
map32) and take otherwise-unassigned BJSON codes for bool8 and int64, whose
layouts differ from BJSON's implicit-value booleans and sign/magnitude
integers.

Wire layout (all multi-byte fields little-endian):

    0x00  null      tag
    0x0F  float64   tag, 8-byte IEEE-754 binary64
    0x12  string32  tag, uint32 byte length, UTF-8 bytes
    0x1C  bool8     tag, 1 byte (0x00 or 0x01)
    0x1D  int64     tag, 8-byte two's complement
    0x22  array32   tag, uint32 count, items
    0x26  map32     tag, uint32 count, (string32 key, value) pairs

Every other byte value is reserved for future types.
"""

from __future__ import annotations

import enum

FORMAT_VERSION = 1

# Length and count prefixes are unsigned 32-bit
LENGTH_PREFIX_SIZE = 4
MAX_LENGTH = 0xFFFFFFFF

# Model equality, hashing and repr recurse through several interpreter frames
# per nesting level; trees this deep stay well inside the default recursion
# limit of 1000.
DEFAULT_MAX_DEPTH = 128


class Tag(enum.IntEnum):
    """Assigned tag bytes."""

    NULL = 0x00
    FLOAT64 = 0x0F
    STRING32 = 0x12
    BOOL8 = 0x1C
    INT64 = 0x1D
    ARRAY32 = 0x22
    MAP32 = 0x26


_TAG_NAMES = {
    Tag.NULL: "null",
    Tag.FLOAT64: "float64",
    Tag.STRING32: "string32",
    Tag.BOOL8: "bool8",
    Tag.INT64: "int64",
    Tag.ARRAY32: "array32",
    Tag.MAP32: "map32",
}

ASSIGNED_TAGS = frozenset(int(tag) for tag in Tag)

# Fixed payload width after the tag byte
PAYLOAD_SIZES = {
    Tag.NULL: 0,
    Tag.BOOL8: 1,
    Tag.INT64: 8,
    Tag.FLOAT64: 8,
}


def tag_name(tag: int) -> str:
    """Return the wire name of a tag byte, or "unknown" if unassigned.

    Example:
        >>> tag_name(0x12)
        'string32'
        >>> tag_name(0xFF)
        'unknown'
    """
    if tag not in ASSIGNED_TAGS:
        return "unknown"
    return _TAG_NAMES[Tag(tag)]


def is_assigned(tag: int) -> bool:
    """Return True if the byte is an assigned tag."""
    return tag in ASSIGNED_TAGS
