"""pybjson: Binary JSON Codec

A Python library for a compact, self-describing binary encoding of
JSON-equivalent values, in the BJSON family. Every value carries a one-byte
type tag; strings, arrays and objects carry 32-bit length prefixes, so a
buffer can be decoded without any external schema.

Key Features:
- Pydantic-based tagged-union value model (Null, Bool, Int, Float, Text, Array, Object)
- Deterministic little-endian wire format
- Bounds-checked, single-pass decoder with typed errors
- Pure Python implementation (no C dependencies)

Quick Start:
    >>> from pybjson import Array, Bool, Int, Null, Object, decode, encode
    >>>
    >>> doc = Object(entries=[("a", Int(value=1)), ("b", Array(items=[Bool(value=True), Null()]))])
    >>> data = encode(doc)
    >>> decode(data) == doc
    True

    >>> from pybjson import from_python, to_python
    >>> to_python(decode(encode(from_python({"depth": 12.5, "tags": ["a", "b"]}))))
    {'depth': 12.5, 'tags': ['a', 'b']}
"""

from __future__ import annotations

import logging

from .codec import (
    DEFAULT_MAX_DEPTH,
    FORMAT_VERSION,
    MAX_LENGTH,
    Decoder,
    Encoder,
    Tag,
    decode,
    decode_prefix,
    encode,
    iter_decode,
    tag_name,
)
from .exceptions import (
    BjsonError,
    ConversionError,
    DecodeError,
    DuplicateKeyError,
    EncodeError,
    InvalidBoolError,
    InvalidTextError,
    NestingTooDeepError,
    SizeOverflowError,
    TrailingBytesError,
    TruncatedError,
    UnknownTagError,
)
from .models import Array, BaseValue, Bool, Float, Int, Null, Object, Text, Value, from_python, to_python
from .utils import dump, dump_bytes, encoded_size, node_counts

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_prefix",
    "iter_decode",
    "Encoder",
    "Decoder",
    # Value model
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
    # Wire format
    "Tag",
    "tag_name",
    "MAX_LENGTH",
    "DEFAULT_MAX_DEPTH",
    "FORMAT_VERSION",
    # Exceptions
    "BjsonError",
    "EncodeError",
    "SizeOverflowError",
    "DecodeError",
    "UnknownTagError",
    "TruncatedError",
    "TrailingBytesError",
    "DuplicateKeyError",
    "InvalidTextError",
    "InvalidBoolError",
    "NestingTooDeepError",
    "ConversionError",
    # Utilities
    "encoded_size",
    "node_counts",
    "dump",
    "dump_bytes",
    # Version
    "__version__",
]
