"""Use case for creating loan applications."""

from dataclasses import dataclass
from uuid import uuid4

import structlog

from solicitudes.application.common.command import Command
from solicitudes.application.common.result import Failure, Result, Success
from solicitudes.application.lending.protocols import (
    IdGenerator,
    LoanApplicationRepositoryProtocol,
    LoanTypeRepositoryProtocol,
    StatusRepositoryProtocol,
)
from solicitudes.domain.common.exceptions import (
    ConfigurationError,
    DomainError,
    EntityNotFoundError,
    ErrorKind,
    PersistenceError,
    ValidationError,
)
from solicitudes.domain.common.value_objects import (
    ApplicationId,
    Email,
    LoanTypeId,
    Money,
    Term,
)
from solicitudes.domain.lending.entities import LoanApplication, LoanType, Status

logger = structlog.get_logger(__name__)

DEFAULT_INITIAL_STATUS_NAME = "PENDIENTE"

LOAN_TYPE_LOOKUP = "loan_type_lookup"
INITIAL_STATUS_LOOKUP = "initial_status_lookup"
APPLICATION_SAVE = "application_save"


@dataclass(frozen=True)
class CreateLoanApplicationCommand(Command):
    """
    Raw applicant input.

    ``amount`` and ``term_months`` may be Decimal, int, float or numeric
    strings; ``loan_type_id`` may be a LoanTypeId, a UUID or a UUID string.
    """

    amount: object
    term_months: object
    email: object
    loan_type_id: object


@dataclass(frozen=True)
class _ApplicationDraft:
    """Structurally valid input."""

    amount: Money
    term: Term
    email: Email
    loan_type_id: LoanTypeId


@dataclass(frozen=True)
class _PricedDraft:
    """Input together with its resolved loan type."""

    draft: _ApplicationDraft
    loan_type: LoanType


@dataclass(frozen=True)
class _ReadyDraft:
    """Input with the loan type and initial status it will be stored under."""

    draft: _ApplicationDraft
    loan_type: LoanType
    status: Status


def _repository_failure(step: str, error: Exception) -> Failure[DomainError]:
    """Report a repository exception as a persistence failure of ``step``."""
    if isinstance(error, PersistenceError):
        error.details.setdefault("step", step)
        return Failure(error)
    failure = PersistenceError(step, f"Repository failure during {step}: {type(error).__name__}")
    failure.details["step"] = step
    failure.__cause__ = error
    return Failure(failure)


class CreateLoanApplicationUseCase:
    """
    Validate, resolve and persist a new loan application.

    The pipeline is strictly ordered and stops at the first failure:

    1. structural validation of the raw input (no I/O)
    2. loan type resolution
    3. amount range validation against the loan type
    4. initial status resolution
    5. aggregate construction
    6. persistence

    Nothing is written unless every earlier stage succeeded.
    """

    def __init__(
        self,
        loan_type_repository: LoanTypeRepositoryProtocol,
        status_repository: StatusRepositoryProtocol,
        application_repository: LoanApplicationRepositoryProtocol,
        id_generator: IdGenerator = uuid4,
        initial_status_name: str = DEFAULT_INITIAL_STATUS_NAME,
    ) -> None:
        """Initialize use case with repository protocols and the id generator."""
        if not initial_status_name or not initial_status_name.strip():
            raise ConfigurationError("Initial status name cannot be empty")
        self.loan_type_repository = loan_type_repository
        self.status_repository = status_repository
        self.application_repository = application_repository
        self.id_generator = id_generator
        self.initial_status_name = initial_status_name.strip()

    async def execute(
        self, command: CreateLoanApplicationCommand
    ) -> Result[LoanApplication, DomainError]:
        """
        Create a loan application from raw input.

        Args:
            command: Raw amount, term, email and loan type reference

        Returns:
            Success with the stored application, or Failure with a classified
            DomainError (see ErrorKind)
        """
        validated = self._validate(command)
        resolved = await validated.flat_map_async(self._resolve_loan_type)
        in_range = resolved.flat_map(self._check_amount_range)
        with_status = await in_range.flat_map_async(self._resolve_initial_status)
        built = with_status.flat_map(self._build_application)
        result = await built.flat_map_async(self._persist)

        if result.is_success:
            application = result.unwrap()
            logger.info(
                "loan_application_created",
                application_id=str(application.id),
                loan_type_id=str(application.loan_type_id),
                status_id=str(application.status_id),
                email_domain=application.applicant_email.domain,
                version=application.version,
            )
        else:
            self._log_rejection(result.unwrap_error())
        return result

    def _validate(self, command: CreateLoanApplicationCommand) -> Result[_ApplicationDraft, DomainError]:
        if command.amount is None:
            return Failure(ValidationError("Amount is required", field="amount"))
        if command.term_months is None:
            return Failure(ValidationError("Term is required", field="term_months"))
        if command.email is None or (isinstance(command.email, str) and not command.email.strip()):
            return Failure(ValidationError("Email is required", field="email"))
        if command.loan_type_id is None:
            return Failure(ValidationError("Loan type id is required", field="loan_type_id"))

        try:
            amount = Money.of(command.amount)  # type: ignore[arg-type]
            if amount.amount <= 0:
                raise ValidationError(
                    "Amount must be greater than 0", field="amount", value=str(amount.amount)
                )
            term = Term.of(command.term_months)  # type: ignore[arg-type]
            email = Email.of(command.email)  # type: ignore[arg-type]
            loan_type_id = LoanTypeId.coerce(command.loan_type_id)  # type: ignore[arg-type]
        except ValidationError as error:
            return Failure(error)

        return Success(
            _ApplicationDraft(amount=amount, term=term, email=email, loan_type_id=loan_type_id)
        )

    async def _resolve_loan_type(
        self, draft: _ApplicationDraft
    ) -> Result[_PricedDraft, DomainError]:
        try:
            loan_type = await self.loan_type_repository.find_by_id(draft.loan_type_id)
        except Exception as error:
            return _repository_failure(LOAN_TYPE_LOOKUP, error)

        if loan_type is None:
            return Failure(EntityNotFoundError("LoanType", draft.loan_type_id))
        return Success(_PricedDraft(draft=draft, loan_type=loan_type))

    def _check_amount_range(self, priced: _PricedDraft) -> Result[_PricedDraft, DomainError]:
        amount = priced.draft.amount
        if not priced.loan_type.is_amount_valid(amount):
            return Failure(priced.loan_type.out_of_range_error(amount))
        return Success(priced)

    async def _resolve_initial_status(
        self, priced: _PricedDraft
    ) -> Result[_ReadyDraft, DomainError]:
        try:
            status = await self.status_repository.find_by_name(self.initial_status_name)
        except Exception as error:
            return _repository_failure(INITIAL_STATUS_LOOKUP, error)

        if status is None:
            return Failure(
                ConfigurationError(
                    f"Initial status '{self.initial_status_name}' is not configured",
                    {"status_name": self.initial_status_name},
                )
            )
        return Success(_ReadyDraft(draft=priced.draft, loan_type=priced.loan_type, status=status))

    def _build_application(self, ready: _ReadyDraft) -> Result[LoanApplication, DomainError]:
        draft = ready.draft
        try:
            application = LoanApplication.create(
                id=ApplicationId.new(self.id_generator),
                amount=draft.amount,
                term=draft.term,
                applicant_email=draft.email,
                status_id=ready.status.id,
                loan_type_id=draft.loan_type_id,
            )
        except DomainError as error:
            return Failure(error)
        return Success(application)

    async def _persist(self, application: LoanApplication) -> Result[LoanApplication, DomainError]:
        try:
            stored = await self.application_repository.save(application)
        except PersistenceError as error:
            return Failure(error)
        except Exception as error:
            return _repository_failure(APPLICATION_SAVE, error)
        return Success(stored)

    def _log_rejection(self, error: DomainError) -> None:
        if error.kind in (ErrorKind.CONFIGURATION_ERROR, ErrorKind.PERSISTENCE_ERROR):
            logger.error(
                "loan_application_rejected",
                kind=str(error.kind),
                reason=error.message,
                details=error.details,
            )
        else:
            logger.info("loan_application_rejected", kind=str(error.kind), reason=error.message)
