"""Money value object for requested and permitted loan amounts.

Amounts are non-negative decimals with at most two fractional digits.
``Money.of`` normalises any raw number to exactly two digits (half-up);
the constructor itself never rounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import TYPE_CHECKING

from ..value_object import ValueObject

if TYPE_CHECKING:
    from typing import Self

CENT = Decimal("0.01")
MAX_SCALE = 2


def to_decimal(raw: object) -> Decimal:
    """
    Convert a raw number or numeric string to Decimal.

    Floats go through repr() so 0.1 becomes Decimal("0.1") rather than its
    binary expansion.

    Raises:
        TypeError: For booleans and non-numeric types
        decimal.InvalidOperation: For unparseable strings
    """
    if isinstance(raw, bool):
        raise TypeError("booleans are not numbers here")
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, float):
        return Decimal(repr(raw))
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, str):
        return Decimal(raw.strip())
    raise TypeError(f"cannot convert {type(raw).__name__} to Decimal")


def decimal_scale(value: Decimal) -> int:
    """Number of fractional digits carried by a Decimal."""
    exponent = value.as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


@dataclass(frozen=True, order=True)
class Money(ValueObject):
    """A non-negative monetary amount, comparable by value."""

    amount: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, Decimal):
            raise self._invalid("Money amount must be a Decimal", self.amount)
        if not self.amount.is_finite():
            raise self._invalid("Money amount must be finite", str(self.amount))
        if self.amount < 0:
            raise self._invalid("Money amount cannot be negative", str(self.amount))
        if decimal_scale(self.amount) > MAX_SCALE:
            raise self._invalid(
                f"Money amount cannot have more than {MAX_SCALE} decimal places",
                str(self.amount),
            )

    @classmethod
    def of(cls, raw: Money | Decimal | int | float | str | None) -> Self:
        """Build an amount rounded half-up to two decimal places."""
        if isinstance(raw, Money):
            return cls(raw.amount)
        try:
            value = to_decimal(raw).quantize(CENT, rounding=ROUND_HALF_UP)
        except (InvalidOperation, TypeError, ValueError):
            raise cls._invalid("Invalid money format", raw) from None
        return cls(value)

    @classmethod
    def zero(cls) -> Self:
        return cls(Decimal("0.00"))

    def is_greater_than(self, other: Money) -> bool:
        return self.amount > other.amount

    def is_less_than(self, other: Money) -> bool:
        return self.amount < other.amount

    def is_in_range(self, minimum: Money, maximum: Money) -> bool:
        """Inclusive on both ends."""
        return minimum.amount <= self.amount <= maximum.amount

    def formatted(self) -> str:
        """Thousands-separated text, e.g. ``1,000,000.00``."""
        return f"{self.amount:,.2f}"

    def __str__(self) -> str:
        return self.formatted()
