"""Tests for per-type coercion rules."""

from __future__ import annotations

import pytest

from configs.coercion import (
    format_number,
    parse_bool,
    to_bool,
    to_float,
    to_int,
    to_list,
    to_map,
    to_str,
)
from configs.errors import CoercionError, TypeMismatchError


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, text",
        [
            (3, "3"),
            (-12, "-12"),
            (42.0, "42"),
            (42.5, "42.5"),
            (0.1, "0.1"),
            (1e16, "1e+16"),
            (1.5e-07, "1.5e-07"),
        ],
    )
    def test_canonical_text(self, value, text):
        assert format_number(value) == text


class TestParseBool:
    @pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_literals(self, text):
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_literals(self, text):
        assert parse_bool(text) is False

    @pytest.mark.parametrize("text", ["", "yes", "tRUE", " true", "2"])
    def test_rejects_other_text(self, text):
        with pytest.raises(ValueError):
            parse_bool(text)


class TestToStr:
    def test_bool(self):
        assert to_str(True) == "true"
        assert to_str(False) == "false"

    def test_numbers(self):
        assert to_str(3) == "3"
        assert to_str(3.0) == "3"
        assert to_str(2.5) == "2.5"

    def test_string_passes_through(self):
        assert to_str("localhost") == "localhost"

    def test_number_beyond_digit_limit(self):
        with pytest.raises(CoercionError):
            to_str(10**5000)

    @pytest.mark.parametrize("value, kind", [([1], "list"), ({"a": 1}, "map")])
    def test_containers_mismatch(self, value, kind):
        with pytest.raises(TypeMismatchError) as exc_info:
            to_str(value, "some.path")
        err = exc_info.value
        assert err.expected == "string"
        assert err.actual == kind
        assert err.details["path"] == "some.path"
        assert str(err) == f"[TYPE_MISMATCH] Type mismatch: expected string; got {kind}"


class TestToBool:
    def test_bool(self):
        assert to_bool(True) is True

    def test_string(self):
        assert to_bool("false") is False
        assert to_bool("TRUE") is True

    def test_unparsable_string(self):
        with pytest.raises(CoercionError) as exc_info:
            to_bool("maybe")
        assert isinstance(exc_info.value.cause, ValueError)
        assert exc_info.value.details["target"] == "bool"

    @pytest.mark.parametrize("value", [1, 0.0, [], {}])
    def test_mismatch(self, value):
        with pytest.raises(TypeMismatchError):
            to_bool(value)


class TestToFloat:
    def test_numbers(self):
        assert to_float(2.5) == 2.5
        result = to_float(7)
        assert result == 7.0
        assert isinstance(result, float)

    @pytest.mark.parametrize("text, expected", [("2.5", 2.5), ("-1e3", -1000.0), ("10", 10.0)])
    def test_string(self, text, expected):
        assert to_float(text) == expected

    @pytest.mark.parametrize("text", ["abc", "", " 1.5", "1.5 "])
    def test_unparsable_string(self, text):
        with pytest.raises(CoercionError):
            to_float(text)

    def test_integer_beyond_float_range(self):
        with pytest.raises(CoercionError) as exc_info:
            to_float(10**400, "big")
        assert isinstance(exc_info.value.cause, OverflowError)
        assert exc_info.value.details["path"] == "big"

    @pytest.mark.parametrize("value", [True, [1.0], {"a": 1.0}])
    def test_mismatch(self, value):
        with pytest.raises(TypeMismatchError):
            to_float(value)


class TestToInt:
    def test_int(self):
        assert to_int(12345) == 12345

    def test_integral_float(self):
        result = to_int(42.0)
        assert result == 42
        assert isinstance(result, int)

    def test_fractional_float_fails(self):
        with pytest.raises(CoercionError, match="Value can't be converted to int: 42.5"):
            to_int(42.5)

    def test_large_float_fails_textual_round_trip(self):
        with pytest.raises(CoercionError):
            to_int(1e16)

    def test_negative_zero_fails_textual_round_trip(self):
        with pytest.raises(CoercionError):
            to_int(-0.0)

    @pytest.mark.parametrize("text, expected", [("42", 42), ("-7", -7), ("+3", 3), ("007", 7)])
    def test_string(self, text, expected):
        assert to_int(text) == expected

    @pytest.mark.parametrize("text", ["4.2", "1e3", "", " 1", "1_000", "x"])
    def test_unparsable_string(self, text):
        with pytest.raises(CoercionError):
            to_int(text)

    def test_digit_string_beyond_int_limit(self):
        with pytest.raises(CoercionError) as exc_info:
            to_int("9" * 5000)
        assert isinstance(exc_info.value.cause, ValueError)
        assert "5000 characters" in exc_info.value.message

    def test_float_below_exponent_threshold_converts(self):
        assert to_int(1e15) == 10**15
        assert to_int(1000000.0) == 1000000

    @pytest.mark.parametrize("value", [True, False, [1], {"a": 1}])
    def test_mismatch(self, value):
        with pytest.raises(TypeMismatchError) as exc_info:
            to_int(value)
        assert exc_info.value.expected == "int"


class TestToContainers:
    def test_list_passes_through(self):
        value = [1, 2]
        assert to_list(value) is value

    def test_map_passes_through(self):
        value = {"a": 1}
        assert to_map(value) is value

    @pytest.mark.parametrize("value", ["a", 1, True, {"a": 1}])
    def test_list_mismatch(self, value):
        with pytest.raises(TypeMismatchError):
            to_list(value)

    @pytest.mark.parametrize("value", ["a", 1, True, [1]])
    def test_map_mismatch(self, value):
        with pytest.raises(TypeMismatchError):
            to_map(value)
