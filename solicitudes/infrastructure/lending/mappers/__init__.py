from .loan_application_mapper import LoanApplicationMapper
from .loan_type_mapper import LoanTypeMapper
from .status_mapper import StatusMapper

__all__ = ["LoanApplicationMapper", "LoanTypeMapper", "StatusMapper"]
