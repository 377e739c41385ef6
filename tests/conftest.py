"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from pybjson import Array, Bool, Float, Int, Null, Object, Text, Value


@pytest.fixture
def sample_document() -> Value:
    """Nested document touching every value kind."""
    return Object(
        entries=[
            ("id", Int(value=42)),
            ("name", Text(value="glider-7")),
            ("depth", Float(value=12.5)),
            ("active", Bool(value=True)),
            ("note", Null()),
            ("readings", Array(items=[Int(value=-3), Float(value=0.25), Text(value="ok")])),
            ("meta", Object(entries=[("unit", Text(value="m"))])),
        ]
    )


@pytest.fixture
def sample_json() -> dict:
    """JSON-shaped Python object, as produced by json.loads."""
    return {
        "vehicle": "auv-3",
        "depth_m": 104.25,
        "battery_pct": 87,
        "emergency": False,
        "waypoints": [[1, 2], [3, 4]],
        "operator": None,
    }
