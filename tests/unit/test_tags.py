"""Tests for the tag table."""

from __future__ import annotations

from pybjson import FORMAT_VERSION, MAX_LENGTH, Tag, tag_name
from pybjson.codec.tags import ASSIGNED_TAGS, is_assigned


def test_tag_values_are_frozen() -> None:
    """Test the published tag assignments."""
    assert {tag.name: int(tag) for tag in Tag} == {
        "NULL": 0x00,
        "FLOAT64": 0x0F,
        "STRING32": 0x12,
        "BOOL8": 0x1C,
        "INT64": 0x1D,
        "ARRAY32": 0x22,
        "MAP32": 0x26,
    }
    assert FORMAT_VERSION == 1
    assert MAX_LENGTH == 2**32 - 1


def test_tag_names() -> None:
    """Test wire names."""
    assert tag_name(0x00) == "null"
    assert tag_name(Tag.MAP32) == "map32"
    assert tag_name(0x01) == "unknown"
    assert tag_name(0xFF) == "unknown"


def test_reserved_space() -> None:
    """Test only seven of 256 tag values are assigned."""
    assert len(ASSIGNED_TAGS) == 7
    assert sum(1 for byte in range(256) if is_assigned(byte)) == 7
