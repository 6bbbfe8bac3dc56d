"""Tests for Money value object."""

from decimal import Decimal

import pytest

from solicitudes.domain.common.exceptions import ErrorKind, ValidationError
from solicitudes.domain.common.value_objects import Money


class TestMoney:
    """Test suite for Money value object."""

    def test_create_with_two_decimals(self) -> None:
        money = Money(Decimal("5000000.00"))
        assert money.amount == Decimal("5000000.00")

    def test_negative_amount_fails(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Money(Decimal("-0.01"))
        assert exc_info.value.kind == ErrorKind.INVALID_INPUT

    def test_constructor_rejects_more_than_two_decimals(self) -> None:
        with pytest.raises(ValidationError):
            Money(Decimal("1.005"))

    def test_constructor_rejects_non_decimal(self) -> None:
        with pytest.raises(ValidationError):
            Money(100)  # type: ignore[arg-type]

    def test_constructor_rejects_nan(self) -> None:
        with pytest.raises(ValidationError):
            Money(Decimal("NaN"))

    def test_of_rounds_half_up(self) -> None:
        assert Money.of("1000.005").amount == Decimal("1000.01")
        assert Money.of("1000.004").amount == Decimal("1000.00")

    def test_of_accepts_int_float_and_string(self) -> None:
        assert Money.of(1500).amount == Decimal("1500.00")
        assert Money.of(0.1).amount == Decimal("0.10")
        assert Money.of(" 250.5 ").amount == Decimal("250.50")

    def test_of_rejects_garbage(self) -> None:
        with pytest.raises(ValidationError, match="Invalid money format"):
            Money.of("abc")

    def test_of_rejects_none_and_bool(self) -> None:
        with pytest.raises(ValidationError):
            Money.of(None)
        with pytest.raises(ValidationError):
            Money.of(True)  # type: ignore[arg-type]

    def test_rewrapping_is_a_no_op(self) -> None:
        for raw in ["0", "0.1", "1234.565", "10000000", 99.999]:
            normalized = Money.of(raw)
            assert Money.of(normalized.amount) == normalized
            assert Money.of(normalized) == normalized

    def test_zero(self) -> None:
        assert Money.zero().amount == Decimal("0.00")

    def test_comparisons(self) -> None:
        small = Money.of(100)
        large = Money.of(200)
        assert small < large
        assert large >= small
        assert large.is_greater_than(small)
        assert small.is_less_than(large)
        assert Money.of("100.00") == small

    def test_is_in_range_is_inclusive(self) -> None:
        minimum = Money.of(1000)
        maximum = Money.of(2000)
        assert minimum.is_in_range(minimum, maximum)
        assert maximum.is_in_range(minimum, maximum)
        assert not Money.of("999.99").is_in_range(minimum, maximum)
        assert not Money.of("2000.01").is_in_range(minimum, maximum)

    def test_formatted(self) -> None:
        assert Money.of(1000000).formatted() == "1,000,000.00"
        assert str(Money.of("1234.5")) == "1,234.50"

    def test_is_frozen(self) -> None:
        money = Money.of(1)
        with pytest.raises(AttributeError):
            money.amount = Decimal("2")  # type: ignore[misc]
