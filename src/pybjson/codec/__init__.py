"""Binary codec for pybjson.

This module provides encoding and decoding between Value trees and the
self-describing BJSON-style wire format.
"""

from __future__ import annotations

from .decoder import Decoder, decode, decode_prefix, iter_decode
from .encoder import Encoder, encode
from .tags import DEFAULT_MAX_DEPTH, FORMAT_VERSION, MAX_LENGTH, Tag, tag_name

__all__ = [
    "encode",
    "decode",
    "decode_prefix",
    "iter_decode",
    "Encoder",
    "Decoder",
    "Tag",
    "tag_name",
    "MAX_LENGTH",
    "DEFAULT_MAX_DEPTH",
    "FORMAT_VERSION",
]
