from .loan_application_repository import LoanApplicationRepository
from .loan_type_repository import LoanTypeRepository
from .status_repository import StatusRepository

__all__ = ["LoanApplicationRepository", "LoanTypeRepository", "StatusRepository"]
