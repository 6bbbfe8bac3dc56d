"""Tests for CreateLoanApplicationUseCase."""

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from solicitudes.application.lending.use_cases import (
    CreateLoanApplicationCommand,
    CreateLoanApplicationUseCase,
)
from solicitudes.domain.common.exceptions import ConfigurationError, ErrorKind, PersistenceError
from solicitudes.domain.common.value_objects import ApplicationId, LoanTypeId, StatusId
from solicitudes.domain.lending.entities import LoanApplication, LoanType, Status
from tests.conftest import (
    PENDING_STATUS_ID,
    PERSONAL_LOAN_ID,
    create_test_loan_type,
    create_test_status,
)

GENERATED_ID = UUID("33333333-3333-4333-8333-333333333333")


def _command(**overrides: object) -> CreateLoanApplicationCommand:
    values: dict[str, object] = {
        "amount": Decimal("5000000.00"),
        "term_months": 24,
        "email": "cliente@test.com",
        "loan_type_id": PERSONAL_LOAN_ID,
    }
    values.update(overrides)
    return CreateLoanApplicationCommand(**values)


@pytest.fixture
def loan_type_repository(personal_loan: LoanType) -> AsyncMock:
    repository = AsyncMock()
    repository.find_by_id.return_value = personal_loan
    return repository


@pytest.fixture
def status_repository(pending_status: Status) -> AsyncMock:
    repository = AsyncMock()
    repository.find_by_name.return_value = pending_status
    return repository


@pytest.fixture
def application_repository() -> AsyncMock:
    repository = AsyncMock()
    repository.save.side_effect = lambda application: application
    return repository


@pytest.fixture
def use_case(
    loan_type_repository: AsyncMock,
    status_repository: AsyncMock,
    application_repository: AsyncMock,
) -> CreateLoanApplicationUseCase:
    return CreateLoanApplicationUseCase(
        loan_type_repository=loan_type_repository,
        status_repository=status_repository,
        application_repository=application_repository,
        id_generator=lambda: GENERATED_ID,
    )


class TestHappyPath:
    """A valid request produces exactly one save."""

    @pytest.mark.asyncio
    async def test_creates_pending_application(
        self,
        use_case: CreateLoanApplicationUseCase,
        status_repository: AsyncMock,
        application_repository: AsyncMock,
    ) -> None:
        result = await use_case.execute(_command())

        assert result.is_success
        application = result.unwrap()
        assert isinstance(application, LoanApplication)
        assert application.id == ApplicationId(GENERATED_ID)
        assert application.version == 0
        assert application.status_id == StatusId(PENDING_STATUS_ID)
        assert application.loan_type_id == LoanTypeId(PERSONAL_LOAN_ID)
        assert application.amount.amount == Decimal("5000000.00")
        assert application.term.months == 24
        assert application.applicant_email.value == "cliente@test.com"

        status_repository.find_by_name.assert_awaited_once_with("PENDIENTE")
        application_repository.save.assert_awaited_once_with(application)

    @pytest.mark.asyncio
    async def test_accepts_raw_strings(self, use_case: CreateLoanApplicationUseCase) -> None:
        result = await use_case.execute(
            _command(
                amount="1000000",
                term_months="12",
                email="  cliente@test.com ",
                loan_type_id=str(PERSONAL_LOAN_ID),
            )
        )

        assert result.is_success
        application = result.unwrap()
        assert application.amount.amount == Decimal("1000000.00")
        assert application.applicant_email.value == "cliente@test.com"

    @pytest.mark.asyncio
    async def test_returns_what_the_repository_stored(
        self, use_case: CreateLoanApplicationUseCase, application_repository: AsyncMock
    ) -> None:
        application_repository.save.side_effect = lambda application: application.mark_persisted(1)

        result = await use_case.execute(_command())

        assert result.unwrap().version == 1

    @pytest.mark.asyncio
    async def test_each_stage_uses_what_the_previous_one_resolved(
        self,
        use_case: CreateLoanApplicationUseCase,
        loan_type_repository: AsyncMock,
        status_repository: AsyncMock,
    ) -> None:
        review_status = create_test_status(uuid4(), "PENDIENTE", "En cola")
        loan_type_repository.find_by_id.return_value = create_test_loan_type(
            min_amount="100", max_amount="200"
        )
        status_repository.find_by_name.return_value = review_status

        accepted = await use_case.execute(_command(amount="150"))
        rejected = await use_case.execute(_command(amount="5000000"))

        assert accepted.unwrap().status_id == review_status.id
        assert rejected.unwrap_error().kind == ErrorKind.BUSINESS_RULE_VIOLATION
        assert "100–200" in rejected.unwrap_error().message

    @pytest.mark.asyncio
    async def test_uses_configured_initial_status_name(
        self,
        loan_type_repository: AsyncMock,
        status_repository: AsyncMock,
        application_repository: AsyncMock,
    ) -> None:
        use_case = CreateLoanApplicationUseCase(
            loan_type_repository,
            status_repository,
            application_repository,
            initial_status_name="  Pendiente de revisión ",
        )

        result = await use_case.execute(_command())

        assert result.is_success
        status_repository.find_by_name.assert_awaited_once_with("Pendiente de revisión")

    def test_blank_initial_status_name_is_a_configuration_error(
        self,
        loan_type_repository: AsyncMock,
        status_repository: AsyncMock,
        application_repository: AsyncMock,
    ) -> None:
        with pytest.raises(ConfigurationError):
            CreateLoanApplicationUseCase(
                loan_type_repository,
                status_repository,
                application_repository,
                initial_status_name="   ",
            )


class TestStructuralValidation:
    """Invalid input is rejected before any repository call."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"amount": None},
            {"amount": 0},
            {"amount": "0.001"},
            {"amount": -5},
            {"amount": "abc"},
            {"term_months": None},
            {"term_months": 0},
            {"term_months": 121},
            {"term_months": "12.5"},
            {"email": None},
            {"email": "   "},
            {"email": "cliente"},
            {"loan_type_id": None},
            {"loan_type_id": "not-a-uuid"},
            {"loan_type_id": StatusId(PENDING_STATUS_ID)},
        ],
    )
    async def test_invalid_input(
        self,
        use_case: CreateLoanApplicationUseCase,
        loan_type_repository: AsyncMock,
        status_repository: AsyncMock,
        application_repository: AsyncMock,
        overrides: dict[str, object],
    ) -> None:
        result = await use_case.execute(_command(**overrides))

        assert result.is_failure
        assert result.unwrap_error().kind == ErrorKind.INVALID_INPUT
        loan_type_repository.find_by_id.assert_not_awaited()
        status_repository.find_by_name.assert_not_awaited()
        application_repository.save.assert_not_awaited()


class TestPipelineFailures:
    """Each later stage fails with its own error kind and writes nothing."""

    @pytest.mark.asyncio
    async def test_amount_above_range_is_business_rule_violation(
        self,
        use_case: CreateLoanApplicationUseCase,
        status_repository: AsyncMock,
        application_repository: AsyncMock,
    ) -> None:
        result = await use_case.execute(_command(amount=Decimal("15000000.00")))

        assert result.is_failure
        error = result.unwrap_error()
        assert error.kind == ErrorKind.BUSINESS_RULE_VIOLATION
        assert "Préstamo Personal" in error.message
        assert "1,000,000–10,000,000" in error.message
        status_repository.find_by_name.assert_not_awaited()
        application_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_amount_below_range_is_business_rule_violation(
        self, use_case: CreateLoanApplicationUseCase
    ) -> None:
        result = await use_case.execute(_command(amount="999999.99"))
        assert result.unwrap_error().kind == ErrorKind.BUSINESS_RULE_VIOLATION

    @pytest.mark.asyncio
    async def test_range_bounds_are_accepted(self, use_case: CreateLoanApplicationUseCase) -> None:
        assert (await use_case.execute(_command(amount="1000000.00"))).is_success
        assert (await use_case.execute(_command(amount="10000000.00"))).is_success

    @pytest.mark.asyncio
    async def test_missing_loan_type_is_reference_not_found(
        self,
        use_case: CreateLoanApplicationUseCase,
        loan_type_repository: AsyncMock,
        status_repository: AsyncMock,
        application_repository: AsyncMock,
    ) -> None:
        loan_type_repository.find_by_id.return_value = None

        result = await use_case.execute(_command())

        assert result.is_failure
        error = result.unwrap_error()
        assert error.kind == ErrorKind.REFERENCE_NOT_FOUND
        assert str(PERSONAL_LOAN_ID) in error.message
        loan_type_repository.find_by_id.assert_awaited_once_with(LoanTypeId(PERSONAL_LOAN_ID))
        assert status_repository.find_by_name.await_count == 0
        assert application_repository.save.await_count == 0

    @pytest.mark.asyncio
    async def test_missing_initial_status_is_configuration_error(
        self,
        use_case: CreateLoanApplicationUseCase,
        status_repository: AsyncMock,
        application_repository: AsyncMock,
    ) -> None:
        status_repository.find_by_name.return_value = None

        result = await use_case.execute(_command())

        assert result.is_failure
        error = result.unwrap_error()
        assert isinstance(error, ConfigurationError)
        assert error.kind == ErrorKind.CONFIGURATION_ERROR
        assert "PENDIENTE" in error.message
        application_repository.save.assert_not_awaited()


class TestRepositoryFailures:
    """Exceptions from the ports become PersistenceError values."""

    @pytest.mark.asyncio
    async def test_loan_type_lookup_timeout(
        self,
        use_case: CreateLoanApplicationUseCase,
        loan_type_repository: AsyncMock,
        status_repository: AsyncMock,
    ) -> None:
        loan_type_repository.find_by_id.side_effect = TimeoutError()

        result = await use_case.execute(_command())

        error = result.unwrap_error()
        assert error.kind == ErrorKind.PERSISTENCE_ERROR
        assert error.details["step"] == "loan_type_lookup"
        status_repository.find_by_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_status_lookup_failure(
        self,
        use_case: CreateLoanApplicationUseCase,
        status_repository: AsyncMock,
        application_repository: AsyncMock,
    ) -> None:
        status_repository.find_by_name.side_effect = ConnectionError("database unreachable")

        result = await use_case.execute(_command())

        error = result.unwrap_error()
        assert error.kind == ErrorKind.PERSISTENCE_ERROR
        assert error.details["step"] == "initial_status_lookup"
        assert isinstance(error.__cause__, ConnectionError)
        application_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_adapter_persistence_error_passes_through(
        self, use_case: CreateLoanApplicationUseCase, application_repository: AsyncMock
    ) -> None:
        adapter_error = PersistenceError("save_loan_application")
        application_repository.save.side_effect = adapter_error

        result = await use_case.execute(_command())

        assert result.unwrap_error() is adapter_error

    @pytest.mark.asyncio
    async def test_unexpected_save_error_is_persistence_error(
        self, use_case: CreateLoanApplicationUseCase, application_repository: AsyncMock
    ) -> None:
        application_repository.save.side_effect = RuntimeError("disk full")

        result = await use_case.execute(_command())

        error = result.unwrap_error()
        assert error.kind == ErrorKind.PERSISTENCE_ERROR
        assert error.details["step"] == "application_save"
        assert "disk full" not in error.message

    @pytest.mark.asyncio
    async def test_cancellation_propagates(
        self,
        use_case: CreateLoanApplicationUseCase,
        loan_type_repository: AsyncMock,
        status_repository: AsyncMock,
    ) -> None:
        loan_type_repository.find_by_id.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await use_case.execute(_command())

        status_repository.find_by_name.assert_not_awaited()
