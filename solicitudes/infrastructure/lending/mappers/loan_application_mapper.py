"""Mapper for LoanApplication ORM ↔ Domain conversion."""

from solicitudes.domain.common.value_objects import (
    ApplicationId,
    Email,
    LoanTypeId,
    Money,
    StatusId,
    Term,
)
from solicitudes.domain.lending.entities import LoanApplication
from solicitudes.infrastructure.lending.models import LoanApplication as LoanApplicationORM


class LoanApplicationMapper:
    """Mapper for LoanApplication ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LoanApplicationORM) -> LoanApplication:
        """Convert ORM model to domain entity."""
        return LoanApplication.reconstruct(
            id=ApplicationId(orm_model.id),
            amount=Money.of(orm_model.amount),
            term=Term(orm_model.term_months),
            applicant_email=Email(orm_model.applicant_email),
            status_id=StatusId(orm_model.status_id),
            loan_type_id=LoanTypeId(orm_model.loan_type_id),
            version=orm_model.version,
        )

    def to_orm(self, domain_entity: LoanApplication) -> LoanApplicationORM:
        """Convert a new domain entity to an ORM model."""
        return LoanApplicationORM(
            id=domain_entity.id.value,
            amount=domain_entity.amount.amount,
            term_months=domain_entity.term.months,
            applicant_email=domain_entity.applicant_email.value,
            status_id=domain_entity.status_id.value,
            loan_type_id=domain_entity.loan_type_id.value,
        )
