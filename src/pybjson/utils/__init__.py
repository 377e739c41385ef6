"""Utility functions for pybjson.

This module provides size calculation and tree rendering utilities.
"""

from __future__ import annotations

from .dump import dump, dump_bytes
from .sizing import encoded_size, node_counts

__all__ = [
    # Sizing functions
    "encoded_size",
    "node_counts",
    # Rendering
    "dump",
    "dump_bytes",
]
