"""Conversion between native Python objects and the Value model.

The mapping follows the shape produced by ``json.loads``: dict, list, str,
int, float, bool and None. Python ints become Int and Python floats become
Float, so the numeric policy is decided by the object's Python type.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import ConversionError
from .values import Array, Bool, Float, Int, Null, Object, Text, Value


def from_python(obj: Any) -> Value:
    """Convert a JSON-shaped Python object to a Value tree.

    Args:
        obj: None, bool, int, float, str, list/tuple or dict with str keys

    Returns:
        Equivalent Value

    Raises:
        ConversionError: If obj (or anything inside it) has no Value form

    Example:
        >>> from_python({"a": 1, "b": [True, None]})
        Object(kind='object', entries=(('a', Int(kind='int', value=1)), ...))
    """
    if obj is None:
        return Null()
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return Bool(value=obj)
    if isinstance(obj, int):
        try:
            return Int(value=int(obj))
        except ValueError as e:
            raise ConversionError(f"Integer {obj} does not fit in 64 bits") from e
    if isinstance(obj, float):
        return Float(value=float(obj))
    if isinstance(obj, str):
        try:
            return Text(value=str(obj))
        except ValueError as e:
            raise ConversionError(f"String {obj!r} is not UTF-8 encodable") from e
    if isinstance(obj, (list, tuple)):
        return Array(items=tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        entries = []
        for key, item in obj.items():
            if not isinstance(key, str):
                raise ConversionError(
                    f"Object keys must be str, got {type(key).__name__}: {key!r}"
                )
            entries.append((key, from_python(item)))
        try:
            return Object(entries=tuple(entries))
        except ValueError as e:
            raise ConversionError(f"Invalid object keys: {e}") from e

    raise ConversionError(f"Cannot convert {type(obj).__name__} to a Value")


def to_python(value: Value) -> Any:
    """Convert a Value tree to plain Python objects.

    Object becomes an insertion-ordered dict and Array becomes a list.

    Raises:
        ConversionError: If value is not a Value
    """
    if isinstance(value, Null):
        return None
    if isinstance(value, (Bool, Int, Float, Text)):
        return value.value
    if isinstance(value, Array):
        return [to_python(item) for item in value.items]
    if isinstance(value, Object):
        return {key: to_python(item) for key, item in value.entries}

    raise ConversionError(f"Expected a Value, got {type(value).__name__}")
