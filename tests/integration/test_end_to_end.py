"""End-to-end integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pybjson import (
    BjsonError,
    DecodeError,
    Object,
    decode,
    dump,
    encode,
    encoded_size,
    from_python,
    iter_decode,
    to_python,
)

FIXTURES = {
    "status.json": {
        "vehicle_id": 42,
        "mission_phase": "survey",
        "depth_m": 25.0,
        "battery_pct": 87,
        "emergency": False,
    },
    "track.json": [{"lat": 41.52, "lon": -70.67, "t": 1700000000}, {"lat": 41.53, "lon": -70.66, "t": 1700000060}],
    "empty.json": {},
    "scalar.json": None,
    "unicode.json": {"name": "Łódź", "emoji": "\U0001f420"},
}


@pytest.fixture
def fixture_dir(tmp_path: Path) -> Path:
    """Directory of JSON fixture files."""
    for name, content in FIXTURES.items():
        (tmp_path / name).write_text(json.dumps(content), encoding="utf-8")
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    return tmp_path


def _convert_directory(directory: Path) -> list[Path]:
    """Encode every *.json file next to itself as *.bjson, skipping bad files."""
    failed = []
    for src in sorted(directory.glob("*.json")):
        try:
            value = from_python(json.loads(src.read_text(encoding="utf-8")))
        except (ValueError, BjsonError):
            failed.append(src)
            continue
        src.with_suffix(".bjson").write_bytes(encode(value))
    return failed


class TestFixtureConversion:
    """Test converting a directory of JSON fixtures to BJSON and back."""

    def test_directory_roundtrip(self, fixture_dir: Path) -> None:
        """Test every fixture decodes back to the parsed JSON."""
        failed = _convert_directory(fixture_dir)

        assert [p.name for p in failed] == ["broken.json"]

        for name, content in FIXTURES.items():
            data = (fixture_dir / name).with_suffix(".bjson").read_bytes()
            assert to_python(decode(data)) == content

    def test_key_order_preserved(self, fixture_dir: Path) -> None:
        """Test object key order survives the file round trip."""
        _convert_directory(fixture_dir)

        value = decode((fixture_dir / "status.bjson").read_bytes())

        assert isinstance(value, Object)
        assert list(value.keys()) == list(FIXTURES["status.json"].keys())

    def test_corrupted_file(self, fixture_dir: Path) -> None:
        """Test a damaged file is reported, not half-decoded."""
        _convert_directory(fixture_dir)
        path = fixture_dir / "track.bjson"
        data = path.read_bytes()

        with pytest.raises(DecodeError):
            decode(data[:-3])

        with pytest.raises(DecodeError):
            decode(data + b"\x00")


class TestWorkflow:
    """Test complete in-memory workflows."""

    def test_size_and_dump(self) -> None:
        """Test sizing, encoding and rendering agree."""
        value = from_python({"ok": True, "ids": [1, 2]})

        data = encode(value)

        assert encoded_size(value) == len(data)
        assert dump(decode(data)).splitlines()[0] == "{"

    def test_record_log(self) -> None:
        """Test appending records to one buffer and reading them back."""
        records = [{"seq": i, "depth": i * 1.5} for i in range(10)]
        log = b"".join(encode(from_python(r)) for r in records)

        assert [to_python(v) for v in iter_decode(log)] == records

    def test_smaller_than_text_for_numbers(self) -> None:
        """Test a numeric-heavy document is not larger than its JSON text."""
        doc = {"samples": [123456789.123456 + i for i in range(50)]}

        assert len(encode(from_python(doc))) < len(json.dumps(doc).encode())
