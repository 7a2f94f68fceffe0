"""Tests for SameValueZero equality."""

from __future__ import annotations

from decimal import Decimal

from tinydash.domain.equality import contains_same_value_zero, same_value_zero

NAN = float("nan")


class TestSameValueZero:
    def test_nan_equals_nan(self) -> None:
        assert same_value_zero(NAN, float("nan")) is True

    def test_nan_not_equal_number(self) -> None:
        assert same_value_zero(NAN, 0) is False
        assert same_value_zero(0, NAN) is False

    def test_signed_zero(self) -> None:
        assert same_value_zero(0.0, -0.0) is True

    def test_int_and_float(self) -> None:
        assert same_value_zero(1, 1.0) is True

    def test_bool_never_equals_number(self) -> None:
        assert same_value_zero(True, 1) is False
        assert same_value_zero(0, False) is False

    def test_bools(self) -> None:
        assert same_value_zero(True, True) is True
        assert same_value_zero(True, False) is False

    def test_string_and_number(self) -> None:
        assert same_value_zero("1", 1) is False

    def test_containers_compare_by_value(self) -> None:
        assert same_value_zero({"a": 1}, {"a": 1}) is True
        assert same_value_zero([1, 2], [2, 1]) is False

    def test_none(self) -> None:
        assert same_value_zero(None, None) is True
        assert same_value_zero(None, 0) is False


class TestContainsSameValueZero:
    def test_found(self) -> None:
        assert contains_same_value_zero([1, NAN, 3], float("nan")) is True

    def test_not_found(self) -> None:
        assert contains_same_value_zero([1, 2, 3], True) is False

    def test_empty(self) -> None:
        assert contains_same_value_zero((), 1) is False


class TestDecimalNan:
    def test_signaling_nan_against_number(self) -> None:
        assert same_value_zero(1, Decimal("sNaN")) is False
        assert same_value_zero(Decimal("sNaN"), 1) is False

    def test_signaling_nan_against_nan(self) -> None:
        assert same_value_zero(Decimal("sNaN"), float("nan")) is True
