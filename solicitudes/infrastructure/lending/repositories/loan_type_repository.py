"""Repository for LoanType domain entities."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from solicitudes.domain.common.exceptions import EntityNotFoundError
from solicitudes.domain.common.value_objects import LoanTypeId, Money, Name
from solicitudes.domain.lending.entities import LoanType
from solicitudes.infrastructure.lending.mappers import LoanTypeMapper
from solicitudes.infrastructure.lending.models import LoanType as LoanTypeORM
from solicitudes.infrastructure.lending.repositories.base import (
    SqlAlchemyRepository,
    concurrent_modification,
)


class LoanTypeRepository(SqlAlchemyRepository):
    """Repository for LoanType domain entities."""

    aggregate_name = "LoanType"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db)
        self.mapper = LoanTypeMapper()

    async def find_by_id(self, loan_type_id: LoanTypeId) -> LoanType | None:
        async with self._storage_errors("find_loan_type_by_id"):
            orm_model = await self.db.get(LoanTypeORM, loan_type_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_by_name(self, name: Name) -> LoanType | None:
        stmt = select(LoanTypeORM).where(LoanTypeORM.name == name.value)
        async with self._storage_errors("find_loan_type_by_name"):
            orm_model = (await self.db.execute(stmt)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_all(self) -> list[LoanType]:
        stmt = select(LoanTypeORM).order_by(LoanTypeORM.name)
        async with self._storage_errors("find_all_loan_types"):
            orm_models = (await self.db.execute(stmt)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    async def find_by_allowed_amount(self, amount: Money) -> list[LoanType]:
        """
        Get loan types whose range contains the amount.

        Args:
            amount: Requested amount (range ends inclusive)

        Returns:
            List of loan types ordered by name
        """
        stmt = (
            select(LoanTypeORM)
            .where(
                LoanTypeORM.min_amount <= amount.amount,
                LoanTypeORM.max_amount >= amount.amount,
            )
            .order_by(LoanTypeORM.name)
        )
        async with self._storage_errors("find_loan_types_by_amount"):
            orm_models = (await self.db.execute(stmt)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    async def save(self, loan_type: LoanType) -> LoanType:
        """Insert a new loan type; the stored row starts at version 1."""
        orm_model = self.mapper.to_orm(loan_type)
        async with self._storage_errors("save_loan_type"):
            self.db.add(orm_model)
            await self.db.commit()
            await self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    async def update(self, loan_type: LoanType) -> LoanType:
        """
        Update a loan type under optimistic locking.

        Raises:
            EntityNotFoundError: If the loan type does not exist
            VersionConflictError: If loan_type.version is not the stored version,
                or the row changed between read and write
        """
        async with self._storage_errors("update_loan_type"):
            orm_model = await self.db.get(LoanTypeORM, loan_type.id.value, populate_existing=True)
            if orm_model is None:
                raise EntityNotFoundError("LoanType", loan_type.id)
            if orm_model.version != loan_type.version:
                raise concurrent_modification(
                    self.aggregate_name, loan_type.id, loan_type.version, orm_model.version
                )

            self.mapper.to_orm(loan_type, orm_model)
            await self._commit_versioned(orm_model, loan_type.id, loan_type.version)
            await self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
