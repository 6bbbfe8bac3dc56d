"""API routes for loan applications."""

from fastapi import APIRouter, Depends, status

from solicitudes.application.lending.use_cases import (
    CreateLoanApplicationCommand,
    CreateLoanApplicationUseCase,
    ListPendingApplicationsUseCase,
)
from solicitudes.core import container
from solicitudes.domain.lending.entities import LoanApplication
from solicitudes.infrastructure.common.di import inject_use_case
from solicitudes.infrastructure.lending.schemas import (
    LoanApplicationCreateRequest,
    LoanApplicationResponse,
)

router = APIRouter(prefix="/solicitud", tags=["solicitudes"])

get_create_loan_application_use_case = inject_use_case(
    container.create_loan_application_use_case
)
get_list_pending_applications_use_case = inject_use_case(
    container.list_pending_applications_use_case
)


def to_response(application: LoanApplication) -> LoanApplicationResponse:
    return LoanApplicationResponse(
        id=application.id.value,
        amount=application.amount.amount,
        term_months=application.term.months,
        email=application.applicant_email.value,
        status_id=application.status_id.value,
        loan_type_id=application.loan_type_id.value,
        version=application.version,
    )


@router.post(
    "",
    response_model=LoanApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_loan_application(
    request: LoanApplicationCreateRequest,
    use_case: CreateLoanApplicationUseCase = Depends(get_create_loan_application_use_case),
) -> LoanApplicationResponse:
    """
    Create a loan application in the pending review status.

    Args:
        request: Amount, term, email and loan type id
        use_case: CreateLoanApplicationUseCase injected via dependency container

    Returns:
        The stored application

    Raises:
        DomainError: Translated to 400/404/500 by the registered handler
    """
    result = await use_case.execute(
        CreateLoanApplicationCommand(
            amount=request.amount,
            term_months=request.term_months,
            email=request.email,
            loan_type_id=request.loan_type_id,
        )
    )
    if result.is_failure:
        raise result.unwrap_error()
    return to_response(result.unwrap())


@router.get(
    "",
    response_model=list[LoanApplicationResponse],
    status_code=status.HTTP_200_OK,
)
async def list_pending_applications(
    use_case: ListPendingApplicationsUseCase = Depends(get_list_pending_applications_use_case),
) -> list[LoanApplicationResponse]:
    """List applications waiting for review."""
    applications = await use_case.execute()
    return [to_response(application) for application in applications]
