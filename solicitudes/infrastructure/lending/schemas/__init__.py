from .loan_application_schemas import LoanApplicationCreateRequest, LoanApplicationResponse
from .status_schemas import StatusDescriptionUpdateRequest, StatusResponse

__all__ = [
    "LoanApplicationCreateRequest",
    "LoanApplicationResponse",
    "StatusDescriptionUpdateRequest",
    "StatusResponse",
]
