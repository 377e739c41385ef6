#!/usr/bin/env python3
"""Basic usage example for pybjson.

This example demonstrates:
1. Building a Value tree
2. Encoding to compact binary format
3. Decoding back to a Value tree
4. Calculating sizes and rendering the tree
"""

from __future__ import annotations

import json

from pybjson import (
    Array,
    Bool,
    DecodeError,
    Float,
    Int,
    Null,
    Object,
    Text,
    decode,
    dump,
    encode,
    encoded_size,
    from_python,
    to_python,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("pybjson Basic Usage Example")
    print("=" * 60)
    print()

    # Build a value tree by hand
    print("1. Building a status document...")
    doc = Object(
        entries=[
            ("vehicle_id", Int(value=42)),
            ("depth_m", Float(value=25.5)),
            ("active", Bool(value=True)),
            ("callsign", Text(value="ALPHA123")),
            ("faults", Array(items=[])),
            ("operator", Null()),
        ]
    )
    print(f"   Keys: {', '.join(doc.keys())}")
    print()

    # Encode
    print("2. Encoding...")
    data = encode(doc)
    print(f"   Encoded size: {len(data)} bytes (predicted {encoded_size(doc)})")
    print(f"   Hex: {data.hex()}")
    print()

    # Compare with JSON text
    print("3. Comparing with JSON...")
    json_text = json.dumps(to_python(doc)).encode("utf-8")
    print(f"   JSON size: {len(json_text)} bytes")
    print()

    # Decode
    print("4. Decoding...")
    decoded = decode(data)
    print(f"   Round trip equal: {decoded == doc}")
    print()

    # Render
    print("5. Token dump:")
    for line in dump(decoded, indent=2).splitlines():
        print(f"   {line}")
    print()

    # From native Python objects
    print("6. Converting from json.loads output...")
    native = json.loads('{"samples": [1, 2.5, "three", null, true]}')
    value = from_python(native)
    print(f"   {to_python(decode(encode(value)))}")
    print()

    # Errors are typed
    print("7. Decoding a truncated buffer...")
    try:
        decode(data[:-1])
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")
    print()

    print("=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
