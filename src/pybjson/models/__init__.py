"""Value model for pybjson.

This module provides the tagged-union Value model and conversion helpers
between Values and native Python objects.
"""

from __future__ import annotations

from .convert import from_python, to_python
from .values import Array, BaseValue, Bool, Float, Int, Null, Object, Text, Value

__all__ = [
    "Value",
    "BaseValue",
    "Null",
    "Bool",
    "Int",
    "Float",
    "Text",
    "Array",
    "Object",
    "from_python",
    "to_python",
]
