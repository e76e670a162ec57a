"""Tests for the uniform value model."""

import datetime
import pytest
from confview.values import (
    CyclicStructureError,
    Array,
    Bool,
    NULL,
    Null,
    Number,
    Object,
    String,
    ValueKind,
    from_native,
    key_to_text,
    kind_of,
)


class TestFromNative:
    """Tests for from_native conversion."""

    def test_scalars(self):
        """Test conversion of every scalar variant."""
        assert from_native(None) == Null()
        assert from_native(True) == Bool(True)
        assert from_native(3) == Number(3)
        assert from_native(2.5) == Number(2.5)
        assert from_native("text") == String("text")

    def test_bool_is_not_number(self):
        """Test that booleans are not converted to numbers."""
        value = from_native(False)
        assert isinstance(value, Bool)
        assert kind_of(value) == ValueKind.BOOL

    def test_int_and_float_kept_apart(self):
        """Test that integer vs float representation survives conversion."""
        assert isinstance(from_native(1).value, int)
        assert isinstance(from_native(1.0).value, float)

    def test_object_preserves_insertion_order(self):
        """Test that object keys keep their source order."""
        value = from_native({"zeta": 1, "alpha": 2, "mid": 3})

        assert isinstance(value, Object)
        assert list(value.entries) == ["zeta", "alpha", "mid"]

    def test_array_preserves_order(self):
        """Test that array elements keep their source order."""
        value = from_native([3, "b", None, True])

        assert isinstance(value, Array)
        assert value.items == [Number(3), String("b"), NULL, Bool(True)]

    def test_nested_structure(self):
        """Test conversion of nested objects and arrays."""
        value = from_native({"a": {"b": [1, {"c": []}]}})

        inner = value.entries["a"].entries["b"]
        assert isinstance(inner, Array)
        assert inner.items[0] == Number(1)
        assert inner.items[1].entries["c"] == Array()

    def test_non_string_keys(self):
        """Test that keys are stringified as they read in the source."""
        value = from_native({1: "a", False: "b", None: "c"})

        assert list(value.entries) == ["1", "false", "null"]

    def test_dates_become_strings(self):
        """Test that date and datetime values become ISO strings."""
        value = from_native({
            "day": datetime.date(2024, 1, 2),
            "at": datetime.datetime(2024, 1, 2, 3, 4, 5),
        })

        assert value.entries["day"] == String("2024-01-02")
        assert value.entries["at"] == String("2024-01-02T03:04:05")

    def test_self_containing_list_rejected(self):
        """Test that a list containing itself is rejected instead of expanded forever."""
        data = {"a": []}
        data["a"].append(data["a"])

        with pytest.raises(CyclicStructureError):
            from_native(data)

    def test_indirect_cycle_rejected(self):
        """Test that a cycle through several containers is rejected."""
        outer = {"inner": {"items": []}}
        outer["inner"]["items"].append(outer)

        with pytest.raises(CyclicStructureError):
            from_native(outer)

    def test_shared_container_copied(self):
        """Test that a container reused by siblings is not mistaken for a cycle."""
        shared = [1, 2]

        value = from_native({"a": shared, "b": [shared, shared]})

        assert value.entries["a"] == Array([Number(1), Number(2)])
        assert value.entries["b"].items == [value.entries["a"], value.entries["a"]]

    def test_tuple_becomes_array(self):
        """Test that tuples are treated as arrays."""
        assert from_native((1, 2)) == Array([Number(1), Number(2)])

    def test_deep_nesting_without_recursion_limit(self):
        """Test conversion of nesting far beyond the interpreter recursion limit."""
        data = []
        for _ in range(5000):
            data = [data]

        value = from_native(data)

        depth = 0
        while value.items:
            value = value.items[0]
            depth += 1
        assert depth == 5000


class TestValueHelpers:
    """Tests for value helpers."""

    def test_number_str(self):
        """Test natural decimal form of numbers."""
        assert str(Number(42)) == "42"
        assert str(Number(-7)) == "-7"
        assert str(Number(1.0)) == "1.0"
        assert str(Number(3.14)) == "3.14"

    def test_key_to_text(self):
        """Test key stringification."""
        assert key_to_text("k") == "k"
        assert key_to_text(False) == "false"
        assert key_to_text(2.5) == "2.5"

    def test_container_lengths(self):
        """Test len() of containers."""
        assert len(Array([NULL, NULL])) == 2
        assert len(Object({"a": NULL})) == 1
        assert len(Object()) == 0
