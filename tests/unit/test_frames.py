"""Unit tests for frame models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from respcodec import (
    INT64_MAX,
    INT64_MIN,
    Array,
    Boolean,
    BulkString,
    Double,
    Integer,
    Map,
    Null,
    NullArray,
    NullBulkString,
    Set,
    SimpleError,
    SimpleString,
    to_frame,
)


class TestConstruction:
    """Test building frames from host values."""

    def test_positional_construction(self) -> None:
        """Test each variant accepts its natural value positionally."""
        assert SimpleString("OK").value == "OK"
        assert SimpleError("ERR bad").value == "ERR bad"
        assert Integer(-5).value == -5
        assert BulkString(b"\x00\xff").value == b"\x00\xff"
        assert Boolean(True).value is True
        assert Double(1.5).value == 1.5
        assert Array([Integer(1)]).items == [Integer(1)]
        assert Set([Integer(1)]).items == [Integer(1)]

    def test_bulk_string_from_buffers(self) -> None:
        """Test bulk strings accept bytearray, memoryview and text."""
        assert BulkString(bytearray(b"abc")).value == b"abc"
        assert BulkString(memoryview(b"abc")).value == b"abc"
        assert BulkString("abc").value == b"abc"

    def test_empty_aggregates(self) -> None:
        """Test aggregates default to empty."""
        assert len(Array()) == 0
        assert len(Set()) == 0
        assert len(Map()) == 0

    def test_integer_bounds(self) -> None:
        """Test integers are limited to signed 64-bit."""
        assert Integer(INT64_MIN).value == INT64_MIN
        assert Integer(INT64_MAX).value == INT64_MAX

        with pytest.raises(ValidationError):
            Integer(INT64_MAX + 1)

        with pytest.raises(ValidationError):
            Integer(INT64_MIN - 1)

    def test_boolean_is_strict(self) -> None:
        """Test booleans reject integers."""
        with pytest.raises(ValidationError):
            Boolean(1)  # type: ignore[arg-type]

    def test_frames_are_frozen(self) -> None:
        """Test scalar frames cannot be modified."""
        frame = SimpleString("OK")

        with pytest.raises(ValidationError):
            frame.value = "NO"  # type: ignore[misc]


class TestLineValidation:
    """Test CR/LF rejection in line-oriented text."""

    @pytest.mark.parametrize("text", ["a\r\nb", "a\rb", "a\nb", "\r\n"])
    def test_simple_string_rejects_line_breaks(self, text: str) -> None:
        """Test simple strings reject CR and LF."""
        with pytest.raises(ValidationError, match="CR or LF"):
            SimpleString(text)

    def test_simple_error_rejects_line_breaks(self) -> None:
        """Test simple errors reject CR and LF."""
        with pytest.raises(ValidationError, match="CR or LF"):
            SimpleError("ERR\r\n")

    def test_map_constructor_rejects_line_break_keys(self) -> None:
        """Test map keys are validated at construction."""
        with pytest.raises(ValidationError, match="CR or LF"):
            Map({"bad\nkey": Null()})

    def test_map_insert_rejects_line_break_keys(self) -> None:
        """Test map keys are validated on insertion."""
        frame = Map()

        with pytest.raises(ValueError, match="CR or LF"):
            frame.insert("bad\rkey", Null())

        assert len(frame) == 0

    def test_bulk_string_allows_line_breaks(self) -> None:
        """Test bulk strings are binary safe."""
        assert BulkString(b"a\r\nb").value == b"a\r\nb"


class TestLengths:
    """Test the size accessors."""

    def test_bulk_string_length_is_byte_count(self) -> None:
        """Test len() counts bytes, not characters."""
        assert len(BulkString("é")) == 2

    def test_aggregate_lengths(self) -> None:
        """Test len() counts elements and pairs."""
        assert len(Array([Null(), Null(), Null()])) == 3
        assert len(Set([Integer(1), Integer(1)])) == 2
        assert len(Map({"a": Null(), "b": Null()})) == 2


class TestMap:
    """Test map construction and key ordering."""

    def test_keys_are_sorted(self) -> None:
        """Test iteration order ignores insertion order."""
        frame = Map()
        frame.insert("b", Integer(1))
        frame.insert("c", Integer(2))
        frame.insert("a", Integer(3))

        assert frame.keys() == ["a", "b", "c"]
        assert [key for key, _ in frame.items()] == ["a", "b", "c"]

    def test_insert_returns_previous(self) -> None:
        """Test insertion replaces and returns the old value."""
        frame = Map()
        assert frame.insert("a", Integer(1)) is None
        assert frame.insert("a", Integer(2)) == Integer(1)
        assert frame["a"] == Integer(2)
        assert len(frame) == 1

    def test_item_assignment(self) -> None:
        """Test dict-style access."""
        frame = Map()
        frame["key"] = SimpleString("value")

        assert "key" in frame
        assert "other" not in frame
        assert frame["key"] == SimpleString("value")
        assert frame.get("other") is None

    def test_insert_requires_frames(self) -> None:
        """Test values must be frames."""
        with pytest.raises(TypeError, match="frames"):
            Map().insert("a", 1)  # type: ignore[arg-type]

    def test_equality_ignores_insertion_order(self) -> None:
        """Test maps compare by content."""
        first = Map({"a": Integer(1), "b": Integer(2)})
        second = Map({"b": Integer(2), "a": Integer(1)})

        assert first == second


class TestComparison:
    """Test structural equality and ordering."""

    def test_equal_frames(self) -> None:
        """Test frames with the same variant and payload are equal."""
        assert SimpleString("OK") == SimpleString("OK")
        assert Array([Integer(1), Null()]) == Array([Integer(1), Null()])

    def test_variant_matters(self) -> None:
        """Test equal payloads of different variants are not equal."""
        assert SimpleString("OK") != SimpleError("OK")
        assert Array([Integer(1)]) != Set([Integer(1)])

    def test_null_forms_are_distinct(self) -> None:
        """Test the three null variants never compare equal."""
        assert Null() == Null()
        assert Null() != NullArray()
        assert Null() != NullBulkString()
        assert NullArray() != NullBulkString()

    def test_ordering_within_variant(self) -> None:
        """Test frames of one variant are ordered by payload."""
        assert Integer(1) < Integer(2)
        assert SimpleString("a") < SimpleString("b")
        assert BulkString(b"b") > BulkString(b"a")
        assert Double(2.5) >= Double(2.5)
        assert sorted([Integer(3), Integer(1), Integer(2)]) == [Integer(1), Integer(2), Integer(3)]

    def test_ordering_of_homogeneous_aggregates(self) -> None:
        """Test aggregates of comparable elements are ordered."""
        assert Array([Integer(1), Integer(2)]) < Array([Integer(1), Integer(3)])
        assert Map({"a": Integer(1)}) < Map({"b": Integer(1)})

    def test_ordering_across_variants_fails(self) -> None:
        """Test different variants cannot be ordered."""
        with pytest.raises(TypeError):
            Integer(1) < SimpleString("a")  # type: ignore[operator]

    def test_heterogeneous_arrays_cannot_be_ordered(self) -> None:
        """Test arrays mixing variants are only partially ordered."""
        with pytest.raises(TypeError):
            Array([Integer(1)]) < Array([SimpleString("a")])  # type: ignore[operator]


class TestToFrame:
    """Test conversion from plain Python values."""

    def test_scalars(self) -> None:
        """Test scalar conversions."""
        assert to_frame(None) == Null()
        assert to_frame(True) == Boolean(True)
        assert to_frame(7) == Integer(7)
        assert to_frame(0.5) == Double(0.5)
        assert to_frame("OK") == SimpleString("OK")
        assert to_frame(b"raw") == BulkString(b"raw")
        assert to_frame(bytearray(b"raw")) == BulkString(b"raw")

    def test_frames_pass_through(self) -> None:
        """Test frames are returned unchanged."""
        frame = NullArray()
        assert to_frame(frame) is frame

    def test_nested_containers(self) -> None:
        """Test containers convert recursively."""
        converted = to_frame({"name": "probe", "tags": [1, b"x"], "flags": {False}})

        assert converted == Map(
            {
                "name": SimpleString("probe"),
                "tags": Array([Integer(1), BulkString(b"x")]),
                "flags": Set([Boolean(False)]),
            }
        )

    def test_tuple_becomes_array(self) -> None:
        """Test tuples convert like lists."""
        assert to_frame((1, 2)) == Array([Integer(1), Integer(2)])

    def test_non_string_keys_rejected(self) -> None:
        """Test mappings need string keys."""
        with pytest.raises(TypeError, match="keys must be str"):
            to_frame({1: "one"})

    def test_unsupported_type(self) -> None:
        """Test values without a frame equivalent are rejected."""
        with pytest.raises(TypeError, match="Cannot convert"):
            to_frame(object())
