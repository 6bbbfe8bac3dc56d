"""
LoanType aggregate: the product configuration an application is made against.
"""

from dataclasses import dataclass
from decimal import Decimal

from solicitudes.domain.common.aggregate_root import AggregateRoot
from solicitudes.domain.common.exceptions import (
    BusinessRuleViolationError,
    InvariantViolationError,
    ValidationError,
)
from solicitudes.domain.common.value_objects import (
    InterestRate,
    LoanTypeId,
    Money,
    Name,
    Term,
)

AMOUNT_IN_RANGE_RULE = "amount_in_loan_type_range"


def _range_bound(money: Money) -> str:
    if money.amount == money.amount.to_integral_value():
        return f"{int(money.amount):,}"
    return money.formatted()


@dataclass(frozen=True, eq=False)
class LoanType(AggregateRoot[LoanTypeId]):
    """
    A loan product with its permitted amount range and annual rate.

    Business Rules:
    - Minimum amount cannot exceed maximum amount
    - Requested amounts are valid only within [min_amount, max_amount]
    - Monthly installments follow the standard annuity formula
    """

    id: LoanTypeId
    name: Name
    min_amount: Money
    max_amount: Money
    interest_rate: InterestRate
    requires_auto_validation: bool
    version: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._require("id", self.id)
        self._require("name", self.name)
        self._require("min_amount", self.min_amount)
        self._require("max_amount", self.max_amount)
        self._require("interest_rate", self.interest_rate)
        self._require("requires_auto_validation", self.requires_auto_validation)
        if self.min_amount.is_greater_than(self.max_amount):
            raise InvariantViolationError(
                "LoanType", "minimum amount cannot be greater than maximum amount"
            )
        self._validate_version()

    @classmethod
    def create(
        cls,
        id: LoanTypeId,
        name: Name,
        min_amount: Money,
        max_amount: Money,
        interest_rate: InterestRate,
        requires_auto_validation: bool,
    ) -> "LoanType":
        """Create a new, never persisted loan type (version 0)."""
        return cls(
            id=id,
            name=name,
            min_amount=min_amount,
            max_amount=max_amount,
            interest_rate=interest_rate,
            requires_auto_validation=requires_auto_validation,
        )

    @classmethod
    def reconstruct(
        cls,
        id: LoanTypeId,
        name: Name,
        min_amount: Money,
        max_amount: Money,
        interest_rate: InterestRate,
        requires_auto_validation: bool,
        version: int,
    ) -> "LoanType":
        """Reconstitute a loan type from persistence."""
        return cls(
            id=id,
            name=name,
            min_amount=min_amount,
            max_amount=max_amount,
            interest_rate=interest_rate,
            requires_auto_validation=requires_auto_validation,
            version=version,
        )

    def is_amount_valid(self, amount: Money) -> bool:
        """Whether the amount lies within the permitted range (both ends inclusive)."""
        return amount.is_in_range(self.min_amount, self.max_amount)

    def amount_range_description(self) -> str:
        """Permitted range as text, e.g. ``1,000,000–10,000,000``; cents only when present."""
        return f"{_range_bound(self.min_amount)}–{_range_bound(self.max_amount)}"

    def out_of_range_error(self, amount: Money) -> BusinessRuleViolationError:
        """Error describing why ``amount`` is not accepted by this loan type."""
        return BusinessRuleViolationError(
            AMOUNT_IN_RANGE_RULE,
            f"Amount {amount.formatted()} is outside the permitted range for loan type "
            f"'{self.name}' ({self.amount_range_description()})",
            {
                "loan_type": str(self.name),
                "min_amount": str(self.min_amount.amount),
                "max_amount": str(self.max_amount.amount),
                "amount": str(amount.amount),
            },
        )

    def compute_monthly_installment(self, amount: Money, term_months: int | Term) -> Money:
        """
        Amortized monthly payment: P * r * (1 + r)^n / ((1 + r)^n - 1).

        Args:
            amount: Principal, must be within this loan type's range
            term_months: Number of monthly payments

        Returns:
            Installment rounded half-up to two decimals

        Raises:
            BusinessRuleViolationError: If the amount is out of range
            ValidationError: If the term is not positive
        """
        if not self.is_amount_valid(amount):
            raise self.out_of_range_error(amount)
        months = term_months.months if isinstance(term_months, Term) else term_months
        if isinstance(months, bool) or not isinstance(months, int) or months <= 0:
            raise ValidationError(
                "Term must be greater than 0 months", field="term_months", value=months
            )

        rate = self.interest_rate.monthly_fraction
        growth = (Decimal(1) + rate) ** months
        installment = amount.amount * rate * growth / (growth - Decimal(1))
        return Money.of(installment)
