"""Unit tests for the Value model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pybjson import Array, Bool, Float, Int, Null, Object, Text


class TestConstruction:
    """Test value construction and validation."""

    def test_scalars(self) -> None:
        """Test each scalar case holds its payload."""
        assert Bool(value=True).value is True
        assert Int(value=-7).value == -7
        assert Float(value=2.5).value == 2.5
        assert Text(value="héllo").value == "héllo"

    def test_int_range(self) -> None:
        """Test Int accepts exactly the signed 64-bit range."""
        Int(value=-(1 << 63))
        Int(value=(1 << 63) - 1)

        with pytest.raises(ValidationError):
            Int(value=1 << 63)

        with pytest.raises(ValidationError):
            Int(value=-(1 << 63) - 1)

    def test_no_numeric_coercion(self) -> None:
        """Test Int and Float do not accept each other's types."""
        with pytest.raises(ValidationError):
            Int(value=1.0)

        with pytest.raises(ValidationError):
            Float(value=1)

        with pytest.raises(ValidationError):
            Int(value=True)

        with pytest.raises(ValidationError):
            Bool(value=1)

    def test_float_requires_float(self) -> None:
        """Test Float rejects ints and bools instead of converting them."""
        with pytest.raises(ValidationError, match="expected float"):
            Float(value=0)

        with pytest.raises(ValidationError, match="expected float"):
            Float(value=False)

    def test_text_rejects_bytes(self) -> None:
        """Test Text requires str."""
        with pytest.raises(ValidationError):
            Text(value=b"abc")

    def test_text_rejects_lone_surrogates(self) -> None:
        """Test Text must have a UTF-8 form."""
        with pytest.raises(ValidationError, match="UTF-8"):
            Text(value="\ud800")

        with pytest.raises(ValidationError, match="UTF-8"):
            Text(value="ok \udfff")

    def test_key_rejects_lone_surrogates(self) -> None:
        """Test Object keys must have a UTF-8 form."""
        with pytest.raises(ValidationError, match="UTF-8"):
            Object(entries=[("\udfff", Null())])

    def test_containers_accept_lists(self) -> None:
        """Test lists are stored as tuples."""
        arr = Array(items=[Null(), Int(value=1)])
        obj = Object(entries=[["a", Null()]])

        assert arr.items == (Null(), Int(value=1))
        assert obj.entries == (("a", Null()),)

    def test_containers_require_values(self) -> None:
        """Test raw Python objects are not accepted as children."""
        with pytest.raises(ValidationError):
            Array(items=[1, 2])

        with pytest.raises(ValidationError):
            Object(entries=[("a", "b")])

    def test_duplicate_keys_rejected(self) -> None:
        """Test Object keys must be unique."""
        with pytest.raises(ValidationError, match="duplicate key"):
            Object(entries=[("a", Int(value=1)), ("a", Int(value=2))])

    def test_frozen(self) -> None:
        """Test values cannot be mutated."""
        value = Int(value=1)

        with pytest.raises(ValidationError):
            value.value = 2  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Null(value=None)  # type: ignore[call-arg]


class TestEquality:
    """Test structural equality."""

    def test_equal_trees(self) -> None:
        """Test independently built trees compare equal."""
        a = Object(entries=[("x", Array(items=[Int(value=1), Text(value="y")]))])
        b = Object(entries=[("x", Array(items=[Int(value=1), Text(value="y")]))])

        assert a == b
        assert hash(a) == hash(b)

    def test_int_float_distinct(self) -> None:
        """Test Int(1) and Float(1.0) are different values."""
        assert Int(value=1) != Float(value=1.0)
        assert Bool(value=True) != Int(value=1)

    def test_float_bit_pattern(self) -> None:
        """Test Float equality compares binary64 bits."""
        nan = float("nan")

        assert Float(value=nan) == Float(value=nan)
        assert hash(Float(value=nan)) == hash(Float(value=nan))
        assert Array(items=[Float(value=nan)]) == Array(items=[Float(value=nan)])
        assert Float(value=0.0) != Float(value=-0.0)
        assert Float(value=1.5) == Float(value=1.5)
        assert Float(value=1.5) != Float(value=2.5)

    def test_object_order_matters(self) -> None:
        """Test key order is part of equality."""
        a = Object(entries=[("a", Null()), ("b", Null())])
        b = Object(entries=[("b", Null()), ("a", Null())])

        assert a != b

    def test_array_order_matters(self) -> None:
        """Test item order is part of equality."""
        assert Array(items=[Int(value=1), Int(value=2)]) != Array(items=[Int(value=2), Int(value=1)])


class TestAccessors:
    """Test container helpers."""

    def test_object_helpers(self) -> None:
        """Test keys(), get(), len() and iteration on Object."""
        obj = Object(entries=[("a", Int(value=1)), ("b", Null())])

        assert obj.keys() == ("a", "b")
        assert obj.get("a") == Int(value=1)
        assert obj.get("missing") is None
        assert obj.get("missing", Null()) == Null()
        assert len(obj) == 2
        assert list(obj) == [("a", Int(value=1)), ("b", Null())]

    def test_array_helpers(self) -> None:
        """Test len() and iteration on Array."""
        arr = Array(items=[Bool(value=False), Null()])

        assert len(arr) == 2
        assert list(arr) == [Bool(value=False), Null()]

    def test_empty_containers(self) -> None:
        """Test default empty containers."""
        assert len(Array()) == 0
        assert Object().keys() == ()
