#!/usr/bin/env python3
"""Convert a directory of JSON fixtures to BJSON.

Each ``*.json`` file is parsed with the standard json module, converted to a
Value and written next to the source as ``*.bjson``. Files that cannot be
parsed or encoded are reported and skipped.

Usage:
    python examples/convert_fixtures.py ./cases
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from pybjson import BjsonError, encode, from_python

logger = logging.getLogger("convert_fixtures")


def convert_directory(directory: Path) -> int:
    """Convert every JSON file in directory; return the number of failures."""
    failures = 0
    for src in sorted(directory.glob("*.json")):
        dst = src.with_suffix(".bjson")
        try:
            value = from_python(json.loads(src.read_text(encoding="utf-8")))
            dst.write_bytes(encode(value))
        except (ValueError, BjsonError) as e:
            logger.error("Cannot encode %s: %s", src, e)
            failures += 1
            continue
        logger.info("%s -> %s", src.name, dst.name)
    return failures


def main() -> int:
    """Entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    directory = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("cases")
    if not directory.is_dir():
        print(f"Error: Directory not found: {directory}", file=sys.stderr)
        return 1
    return 1 if convert_directory(directory) else 0


if __name__ == "__main__":
    sys.exit(main())
