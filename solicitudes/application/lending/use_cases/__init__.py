from .create_loan_application_use_case import (
    CreateLoanApplicationCommand,
    CreateLoanApplicationUseCase,
)
from .list_pending_applications_use_case import ListPendingApplicationsUseCase
from .status_administration_use_case import StatusAdministrationUseCase

__all__ = [
    "CreateLoanApplicationCommand",
    "CreateLoanApplicationUseCase",
    "ListPendingApplicationsUseCase",
    "StatusAdministrationUseCase",
]
