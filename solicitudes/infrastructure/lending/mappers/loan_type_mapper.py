"""Mapper for LoanType ORM ↔ Domain conversion."""

from solicitudes.domain.common.value_objects import InterestRate, LoanTypeId, Money, Name
from solicitudes.domain.lending.entities import LoanType
from solicitudes.infrastructure.lending.models import LoanType as LoanTypeORM


class LoanTypeMapper:
    """Mapper for LoanType ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LoanTypeORM) -> LoanType:
        """Convert ORM model to domain entity."""
        return LoanType.reconstruct(
            id=LoanTypeId(orm_model.id),
            name=Name(orm_model.name),
            min_amount=Money.of(orm_model.min_amount),
            max_amount=Money.of(orm_model.max_amount),
            interest_rate=InterestRate.of(orm_model.interest_rate),
            requires_auto_validation=orm_model.requires_auto_validation,
            version=orm_model.version,
        )

    def to_orm(
        self, domain_entity: LoanType, orm_model: LoanTypeORM | None = None
    ) -> LoanTypeORM:
        """Convert domain entity to ORM model. The version column is left to the mapper."""
        if orm_model:
            orm_model.name = domain_entity.name.value
            orm_model.min_amount = domain_entity.min_amount.amount
            orm_model.max_amount = domain_entity.max_amount.amount
            orm_model.interest_rate = domain_entity.interest_rate.rate
            orm_model.requires_auto_validation = domain_entity.requires_auto_validation
            return orm_model

        return LoanTypeORM(
            id=domain_entity.id.value,
            name=domain_entity.name.value,
            min_amount=domain_entity.min_amount.amount,
            max_amount=domain_entity.max_amount.amount,
            interest_rate=domain_entity.interest_rate.rate,
            requires_auto_validation=domain_entity.requires_auto_validation,
        )
