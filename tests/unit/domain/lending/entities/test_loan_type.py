"""Tests for LoanType aggregate."""

from dataclasses import FrozenInstanceError
from decimal import Decimal
from uuid import uuid4

import pytest

from solicitudes.domain.common.exceptions import (
    BusinessRuleViolationError,
    ErrorKind,
    InvariantViolationError,
    ValidationError,
    VersionConflictError,
)
from solicitudes.domain.common.value_objects import InterestRate, LoanTypeId, Money, Name, Term
from solicitudes.domain.lending.entities import LoanType
from tests.conftest import create_test_loan_type


class TestLoanTypeCreation:
    """Test suite for LoanType factories and invariants."""

    def test_create_starts_unpersisted(self) -> None:
        loan_type = LoanType.create(
            id=LoanTypeId(uuid4()),
            name=Name("Vivienda"),
            min_amount=Money.of(1000),
            max_amount=Money.of(5000),
            interest_rate=InterestRate.of(12),
            requires_auto_validation=False,
        )

        assert loan_type.version == 0
        assert not loan_type.is_persisted
        assert loan_type.requires_auto_validation is False

    def test_min_greater_than_max_fails(self) -> None:
        with pytest.raises(InvariantViolationError):
            create_test_loan_type(min_amount="2000", max_amount="1000")

    def test_min_equal_to_max_is_allowed(self) -> None:
        loan_type = create_test_loan_type(min_amount="1000", max_amount="1000")
        assert loan_type.is_amount_valid(Money.of(1000))

    def test_missing_field_fails(self) -> None:
        with pytest.raises(InvariantViolationError, match="interest_rate is required"):
            LoanType.create(
                id=LoanTypeId(uuid4()),
                name=Name("Vivienda"),
                min_amount=Money.of(1000),
                max_amount=Money.of(5000),
                interest_rate=None,  # type: ignore[arg-type]
                requires_auto_validation=False,
            )

    def test_negative_version_fails(self) -> None:
        with pytest.raises(InvariantViolationError):
            create_test_loan_type(version=-1)

    def test_is_frozen(self) -> None:
        loan_type = create_test_loan_type()
        with pytest.raises(FrozenInstanceError):
            loan_type.name = Name("Otro")  # type: ignore[misc]

    def test_equality_is_by_id(self) -> None:
        original = create_test_loan_type()
        renamed = create_test_loan_type(name="Libre Inversión", version=3)
        assert original == renamed
        assert hash(original) == hash(renamed)
        assert original != create_test_loan_type(loan_type_id=uuid4())


class TestAmountRange:
    """Range checks are inclusive at both ends."""

    def test_bounds_are_valid(self, personal_loan: LoanType) -> None:
        assert personal_loan.is_amount_valid(personal_loan.min_amount)
        assert personal_loan.is_amount_valid(personal_loan.max_amount)

    def test_just_outside_bounds_is_invalid(self, personal_loan: LoanType) -> None:
        assert not personal_loan.is_amount_valid(Money.of("999999.99"))
        assert not personal_loan.is_amount_valid(Money.of("10000000.01"))

    def test_amount_range_description(self, personal_loan: LoanType) -> None:
        assert personal_loan.amount_range_description() == "1,000,000–10,000,000"

    def test_amount_range_description_keeps_cents(self) -> None:
        loan_type = create_test_loan_type(min_amount="500000.50", max_amount="750000")
        assert loan_type.amount_range_description() == "500,000.50–750,000"

    def test_out_of_range_error_names_loan_type_and_range(self, personal_loan: LoanType) -> None:
        error = personal_loan.out_of_range_error(Money.of(15000000))

        assert error.kind == ErrorKind.BUSINESS_RULE_VIOLATION
        assert "'Préstamo Personal'" in error.message
        assert "(1,000,000–10,000,000)" in error.message
        assert error.details["min_amount"] == "1000000.00"


class TestMonthlyInstallment:
    """Annuity installment computation."""

    def test_installment_exceeds_interest_free_split(self) -> None:
        loan_type = create_test_loan_type()
        amount = Money.of(10000000)

        installment = loan_type.compute_monthly_installment(amount, 24)

        assert installment.amount > amount.amount / 24
        assert installment.amount < amount.amount / 24 * Decimal("1.25")

    def test_installment_has_two_decimals(self, personal_loan: LoanType) -> None:
        installment = personal_loan.compute_monthly_installment(Money.of(5000000), 36)
        assert installment.amount == installment.amount.quantize(Decimal("0.01"))

    def test_accepts_term_value_object(self, personal_loan: LoanType) -> None:
        amount = Money.of(5000000)
        assert personal_loan.compute_monthly_installment(
            amount, Term(24)
        ) == personal_loan.compute_monthly_installment(amount, 24)

    def test_longer_term_lowers_installment(self, personal_loan: LoanType) -> None:
        amount = Money.of(5000000)
        short = personal_loan.compute_monthly_installment(amount, 12)
        long = personal_loan.compute_monthly_installment(amount, 60)
        assert long < short

    def test_out_of_range_amount_fails(self, personal_loan: LoanType) -> None:
        with pytest.raises(BusinessRuleViolationError):
            personal_loan.compute_monthly_installment(Money.of(15000000), 24)

    @pytest.mark.parametrize("months", [0, -12])
    def test_non_positive_term_fails(self, personal_loan: LoanType, months: int) -> None:
        with pytest.raises(ValidationError):
            personal_loan.compute_monthly_installment(Money.of(5000000), months)


class TestLoanTypeVersioning:
    def test_mark_persisted_moves_version_forward(self, personal_loan: LoanType) -> None:
        persisted = personal_loan.mark_persisted(1)
        assert persisted.version == 1
        assert persisted.is_persisted
        assert personal_loan.version == 0

    @pytest.mark.parametrize("new_version", [0, -1, -1000])
    def test_mark_persisted_rejects_non_increasing_version(
        self, personal_loan: LoanType, new_version: int
    ) -> None:
        with pytest.raises(VersionConflictError) as exc_info:
            personal_loan.mark_persisted(new_version)
        assert exc_info.value.kind == ErrorKind.VERSION_CONFLICT
