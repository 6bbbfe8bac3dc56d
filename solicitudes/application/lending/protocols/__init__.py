from solicitudes.domain.common.entity import IdGenerator

from .loan_application_repository import LoanApplicationRepositoryProtocol
from .loan_type_repository import LoanTypeRepositoryProtocol
from .status_repository import StatusRepositoryProtocol

__all__ = [
    "IdGenerator",
    "LoanApplicationRepositoryProtocol",
    "LoanTypeRepositoryProtocol",
    "StatusRepositoryProtocol",
]
