"""Common value objects shared across all domain modules."""

from .email import Email
from .ids import ApplicationId, LoanTypeId, StatusId
from .interest_rate import InterestRate
from .money import Money
from .name import Name
from .term import Term

__all__ = [
    # IDs
    "ApplicationId",
    "LoanTypeId",
    "StatusId",
    # Values
    "Email",
    "InterestRate",
    "Money",
    "Name",
    "Term",
]
