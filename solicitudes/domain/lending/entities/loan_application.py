"""
LoanApplication aggregate ("solicitud"): a request for credit under a loan type.
"""

from dataclasses import dataclass

from solicitudes.domain.common.aggregate_root import AggregateRoot
from solicitudes.domain.common.value_objects import (
    ApplicationId,
    Email,
    LoanTypeId,
    Money,
    StatusId,
    Term,
)


@dataclass(frozen=True, eq=False)
class LoanApplication(AggregateRoot[ApplicationId]):
    """
    A loan application.

    Business Rules:
    - Id, amount, term, applicant email, status and loan type are required
    - A new application starts at version 0 (not yet stored)
    - The stored version only moves forward (see mark_persisted)
    """

    id: ApplicationId
    amount: Money
    term: Term
    applicant_email: Email
    status_id: StatusId
    loan_type_id: LoanTypeId
    version: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._require("id", self.id)
        self._require("amount", self.amount)
        self._require("term", self.term)
        self._require("applicant_email", self.applicant_email)
        self._require("status_id", self.status_id)
        self._require("loan_type_id", self.loan_type_id)
        self._validate_version()

    @classmethod
    def create(
        cls,
        id: ApplicationId,
        amount: Money,
        term: Term,
        applicant_email: Email,
        status_id: StatusId,
        loan_type_id: LoanTypeId,
    ) -> "LoanApplication":
        """Create a new application (version 0 until persisted)."""
        return cls(
            id=id,
            amount=amount,
            term=term,
            applicant_email=applicant_email,
            status_id=status_id,
            loan_type_id=loan_type_id,
        )

    @classmethod
    def reconstruct(
        cls,
        id: ApplicationId,
        amount: Money,
        term: Term,
        applicant_email: Email,
        status_id: StatusId,
        loan_type_id: LoanTypeId,
        version: int,
    ) -> "LoanApplication":
        """Reconstitute an application from persistence."""
        return cls(
            id=id,
            amount=amount,
            term=term,
            applicant_email=applicant_email,
            status_id=status_id,
            loan_type_id=loan_type_id,
            version=version,
        )
