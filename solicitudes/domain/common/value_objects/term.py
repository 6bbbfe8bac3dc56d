"""Loan term in whole months."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from ..value_object import ValueObject
from .money import to_decimal

if TYPE_CHECKING:
    from typing import Self

MIN_MONTHS = 1
MAX_MONTHS = 120  # 10 years
SHORT_TERM_MONTHS = 12
LONG_TERM_MONTHS = 60


@dataclass(frozen=True, order=True)
class Term(ValueObject):
    """Repayment term, 1 to 120 months."""

    months: int

    def __post_init__(self) -> None:
        if isinstance(self.months, bool) or not isinstance(self.months, int):
            raise self._invalid("Term months must be an integer", self.months)
        if self.months < MIN_MONTHS:
            raise self._invalid(f"Term must be at least {MIN_MONTHS} month", self.months)
        if self.months > MAX_MONTHS:
            raise self._invalid(f"Term cannot exceed {MAX_MONTHS} months", self.months)

    @classmethod
    def of(cls, raw: Term | int | float | Decimal | str | None) -> Self:
        """
        Build a term from an int, an integral float/Decimal or a numeric string.

        Fractional values are rejected rather than truncated.
        """
        if isinstance(raw, Term):
            return cls(raw.months)
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cls(raw)
        try:
            value = to_decimal(raw)
        except (InvalidOperation, TypeError, ValueError):
            raise cls._invalid("Invalid term format", raw) from None
        if not value.is_finite() or value != value.to_integral_value():
            raise cls._invalid("Term must be a whole number of months", raw)
        return cls(int(value))

    @property
    def years(self) -> float:
        return self.months / 12

    @property
    def is_short(self) -> bool:
        """Less than a year."""
        return self.months < SHORT_TERM_MONTHS

    @property
    def is_long(self) -> bool:
        """More than five years."""
        return self.months > LONG_TERM_MONTHS

    def __int__(self) -> int:
        return self.months
