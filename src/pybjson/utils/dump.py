"""Human-readable rendering of Value trees.

The output lists one token per line, indented by nesting depth, in the same
vocabulary as the BJSON example decoder:

    {
     key ('a')
     integer (1)
     key ('b')
     [
      boolean (true)
      null
     ]
    }
"""

from __future__ import annotations

from ..codec.bytepack import BytesLike
from ..codec.decoder import decode
from ..models.values import Array, Bool, Float, Int, Null, Object, Text, Value


def dump(value: Value, indent: int = 1) -> str:
    """Render a Value tree as indented token lines.

    Strings and keys are shown as Python string literals, so quotes and
    control characters are escaped and every token stays on one line.

    Args:
        value: Value tree to render
        indent: Spaces per nesting level

    Returns:
        Rendered text, one token per line, without a trailing newline

    Raises:
        TypeError: If a node is not a Value
    """
    lines: list[str] = []
    _dump_into(lines, value, 0, indent)
    return "\n".join(lines)


def dump_bytes(data: BytesLike, indent: int = 1) -> str:
    """Decode data and render the resulting Value tree.

    Raises:
        DecodeError: If data is not a valid encoding
    """
    return dump(decode(data), indent)


def _dump_into(lines: list[str], value: Value, depth: int, indent: int) -> None:
    pad = " " * (depth * indent)

    if isinstance(value, Null):
        lines.append(f"{pad}null")
    elif isinstance(value, Bool):
        lines.append(f"{pad}boolean ({'true' if value.value else 'false'})")
    elif isinstance(value, Int):
        lines.append(f"{pad}integer ({value.value})")
    elif isinstance(value, Float):
        lines.append(f"{pad}double ({value.value!r})")
    elif isinstance(value, Text):
        lines.append(f"{pad}string ({value.value!r})")
    elif isinstance(value, Array):
        lines.append(f"{pad}[")
        for item in value.items:
            _dump_into(lines, item, depth + 1, indent)
        lines.append(f"{pad}]")
    elif isinstance(value, Object):
        lines.append(f"{pad}{{")
        inner = " " * ((depth + 1) * indent)
        for key, item in value.entries:
            lines.append(f"{inner}key ({key!r})")
            _dump_into(lines, item, depth + 1, indent)
        lines.append(f"{pad}}}")
    else:
        raise TypeError(f"Expected a Value, got {type(value).__name__}")
