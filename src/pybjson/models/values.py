"""Value model: a pydantic tagged union of JSON-equivalent values.

Each case is a frozen pydantic model with a ``kind`` discriminator. Children of
Array and Object are owned, immutable tuples, so a validated Value is always a
strict tree.

Example:
    >>> doc = Object(entries=[("a", Int(value=1)), ("b", Array(items=[Bool(value=True), Null()]))])
    >>> doc.keys()
    ('a', 'b')
    >>> doc.get("a")
    Int(kind='int', value=1)
"""

from __future__ import annotations

import struct
from typing import Annotated, Any, Iterator, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_F64 = struct.Struct("<d")


def _require_utf8(text: str, what: str) -> str:
    """Reject strings with lone surrogates, which have no UTF-8 form."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"{what} is not UTF-8 encodable: {e.reason} at index {e.start}") from e
    return text


class BaseValue(BaseModel):
    """Base class for the seven value cases.

    Equality is structural: same case, same payload, same order. Values are
    frozen, so the codec never mutates a tree it is given.
    """

    model_config = ConfigDict(
        # Immutable and hashable
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )


class Null(BaseValue):
    """The null value."""

    kind: Literal["null"] = "null"


class Bool(BaseValue):
    """A boolean."""

    kind: Literal["bool"] = "bool"
    value: StrictBool


class Int(BaseValue):
    """A signed 64-bit integer."""

    kind: Literal["int"] = "int"
    value: Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]


class Float(BaseValue):
    """An IEEE-754 binary64 float. Python ints are not accepted.

    Equality and hashing compare the binary64 bit pattern, so a decoded NaN
    equals the NaN it was encoded from, and 0.0 differs from -0.0.
    """

    kind: Literal["float"] = "float"
    value: StrictFloat

    @field_validator("value", mode="before")
    @classmethod
    def _reject_non_float(cls, value: Any) -> Any:
        # StrictFloat still lets ints through
        if not isinstance(value, float):
            raise ValueError(f"expected float, got {type(value).__name__}")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return _F64.pack(self.value) == _F64.pack(other.value)

    def __hash__(self) -> int:
        return hash((self.kind, _F64.pack(self.value)))


class Text(BaseValue):
    """A Unicode string, stored on the wire as length-prefixed UTF-8.

    Strings containing lone surrogates are rejected.
    """

    kind: Literal["text"] = "text"
    value: StrictStr

    @field_validator("value")
    @classmethod
    def _check_utf8(cls, value: str) -> str:
        return _require_utf8(value, "text")


class Array(BaseValue):
    """An ordered sequence of values."""

    kind: Literal["array"] = "array"
    items: tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:  # type: ignore[override]
        return iter(self.items)


class Object(BaseValue):
    """An ordered mapping from string keys to values.

    Keys must be unique; insertion order is preserved and is part of equality.
    """

    kind: Literal["object"] = "object"
    entries: tuple[tuple[StrictStr, Value], ...] = ()

    @field_validator("entries")
    @classmethod
    def _check_unique_keys(
        cls, entries: tuple[tuple[str, Value], ...]
    ) -> tuple[tuple[str, Value], ...]:
        seen: set[str] = set()
        for key, _ in entries:
            _require_utf8(key, f"key {key!r}")
            if key in seen:
                raise ValueError(f"duplicate key {key!r}")
            seen.add(key)
        return entries

    def keys(self) -> tuple[str, ...]:
        """Return the keys in insertion order."""
        return tuple(key for key, _ in self.entries)

    def get(self, key: str, default: Value | None = None) -> Value | None:
        """Return the value stored under key, or default."""
        for entry_key, entry_value in self.entries:
            if entry_key == key:
                return entry_value
        return default

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[str, Value]]:  # type: ignore[override]
        return iter(self.entries)


Value = Annotated[
    Union[Null, Bool, Int, Float, Text, Array, Object],
    Field(discriminator="kind"),
]

VALUE_TYPES = (Null, Bool, Int, Float, Text, Array, Object)

Array.model_rebuild()
Object.model_rebuild()
