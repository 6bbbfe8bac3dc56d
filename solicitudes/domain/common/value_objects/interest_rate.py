"""Annual interest rate expressed as a percentage (15.5 means 15.5%)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import TYPE_CHECKING

from ..value_object import ValueObject
from .money import CENT, MAX_SCALE, decimal_scale, to_decimal

if TYPE_CHECKING:
    from typing import Self

RATE_PRECISION = Decimal("0.000001")
MAX_RATE = Decimal(100)
MONTHS_PER_YEAR = Decimal(12)


@dataclass(frozen=True, order=True)
class InterestRate(ValueObject):
    """Annual rate, greater than 0 and at most 100."""

    rate: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.rate, bool) or not isinstance(self.rate, Decimal):
            raise self._invalid("Interest rate must be a Decimal", self.rate)
        if not self.rate.is_finite() or self.rate <= 0:
            raise self._invalid("Interest rate must be greater than zero", str(self.rate))
        if self.rate > MAX_RATE:
            raise self._invalid("Interest rate cannot exceed 100%", str(self.rate))
        if decimal_scale(self.rate) > MAX_SCALE:
            raise self._invalid(
                f"Interest rate cannot have more than {MAX_SCALE} decimal places",
                str(self.rate),
            )

    @classmethod
    def of(cls, raw: InterestRate | Decimal | int | float | str | None) -> Self:
        """Build a rate rounded half-up to two decimal places."""
        if isinstance(raw, InterestRate):
            return cls(raw.rate)
        try:
            value = to_decimal(raw).quantize(CENT, rounding=ROUND_HALF_UP)
        except (InvalidOperation, TypeError, ValueError):
            raise cls._invalid("Invalid interest rate format", raw) from None
        return cls(value)

    @property
    def monthly_rate(self) -> Decimal:
        """Annual percentage divided by 12, six decimals (still a percentage)."""
        return (self.rate / MONTHS_PER_YEAR).quantize(RATE_PRECISION, rounding=ROUND_HALF_UP)

    @property
    def as_fraction(self) -> Decimal:
        """15.5% -> 0.155000"""
        return (self.rate / 100).quantize(RATE_PRECISION, rounding=ROUND_HALF_UP)

    @property
    def monthly_fraction(self) -> Decimal:
        """Periodic rate for monthly amortization, 15.5% -> 0.012917"""
        return (self.rate / 100 / MONTHS_PER_YEAR).quantize(
            RATE_PRECISION, rounding=ROUND_HALF_UP
        )

    def is_greater_than(self, other: InterestRate) -> bool:
        return self.rate > other.rate

    def is_less_than(self, other: InterestRate) -> bool:
        return self.rate < other.rate

    def __str__(self) -> str:
        return f"{self.rate}%"
