"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a Value
without actually encoding it.
"""

from __future__ import annotations

from ..codec.tags import LENGTH_PREFIX_SIZE, PAYLOAD_SIZES, Tag
from ..exceptions import EncodeError
from ..models.values import Array, Bool, Float, Int, Null, Object, Text, Value

_TAG_SIZE = 1


def _text_size(text: str) -> int:
    return _TAG_SIZE + LENGTH_PREFIX_SIZE + len(text.encode("utf-8"))


def encoded_size(value: Value) -> int:
    """Calculate the encoded size of a Value in bytes.

    The result always equals ``len(encode(value))`` for a value that encodes
    successfully; limits (max_length, max_depth) are not checked here.

    Args:
        value: Value tree to measure

    Returns:
        Size in bytes

    Raises:
        EncodeError: If a node is not a Value or text is not UTF-8 encodable

    Example:
        >>> encoded_size(Null())
        1
        >>> encoded_size(Text(value="héllo"))
        11
    """
    if isinstance(value, Null):
        return _TAG_SIZE + PAYLOAD_SIZES[Tag.NULL]
    if isinstance(value, Bool):
        return _TAG_SIZE + PAYLOAD_SIZES[Tag.BOOL8]
    if isinstance(value, Int):
        return _TAG_SIZE + PAYLOAD_SIZES[Tag.INT64]
    if isinstance(value, Float):
        return _TAG_SIZE + PAYLOAD_SIZES[Tag.FLOAT64]
    if isinstance(value, Text):
        try:
            return _text_size(value.value)
        except UnicodeEncodeError as e:
            raise EncodeError(f"Text: cannot encode as UTF-8: {e}") from e
    if isinstance(value, Array):
        return _TAG_SIZE + LENGTH_PREFIX_SIZE + sum(encoded_size(item) for item in value.items)
    if isinstance(value, Object):
        size = _TAG_SIZE + LENGTH_PREFIX_SIZE
        for key, item in value.entries:
            try:
                size += _text_size(key)
            except UnicodeEncodeError as e:
                raise EncodeError(f"Object key: cannot encode as UTF-8: {e}") from e
            size += encoded_size(item)
        return size

    raise EncodeError(f"Expected a Value, got {type(value).__name__}")


def node_counts(value: Value) -> dict[str, int]:
    """Count the nodes of each kind in a Value tree.

    Object keys are not counted as Text nodes.

    Args:
        value: Value tree to analyze

    Returns:
        Dictionary mapping kind names to counts, for kinds that occur

    Example:
        >>> node_counts(Array(items=[Int(value=1), Int(value=2), Null()]))
        {'array': 1, 'int': 2, 'null': 1}
    """
    counts: dict[str, int] = {}
    stack: list[Value] = [value]
    while stack:
        node = stack.pop()
        counts[node.kind] = counts.get(node.kind, 0) + 1
        if isinstance(node, Array):
            stack.extend(reversed(node.items))
        elif isinstance(node, Object):
            stack.extend(item for _, item in reversed(node.entries))
    return counts
