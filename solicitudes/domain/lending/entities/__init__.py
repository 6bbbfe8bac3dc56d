from .loan_application import LoanApplication
from .loan_type import LoanType
from .status import Status

__all__ = [
    "LoanApplication",
    "LoanType",
    "Status",
]
