"""Repository for LoanApplication domain entities."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from solicitudes.domain.common.value_objects import ApplicationId, StatusId
from solicitudes.domain.lending.entities import LoanApplication
from solicitudes.infrastructure.lending.mappers import LoanApplicationMapper
from solicitudes.infrastructure.lending.models import LoanApplication as LoanApplicationORM
from solicitudes.infrastructure.lending.repositories.base import SqlAlchemyRepository

logger = structlog.get_logger(__name__)


class LoanApplicationRepository(SqlAlchemyRepository):
    """Repository for LoanApplication domain entities."""

    aggregate_name = "LoanApplication"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db)
        self.mapper = LoanApplicationMapper()

    async def save(self, application: LoanApplication) -> LoanApplication:
        """
        Insert a new application.

        Args:
            application: Unpersisted application (version 0)

        Returns:
            The stored application at version 1

        Raises:
            PersistenceError: If the insert fails (including duplicate ids)
        """
        orm_model = self.mapper.to_orm(application)
        async with self._storage_errors("save_loan_application"):
            self.db.add(orm_model)
            await self.db.commit()
            await self.db.refresh(orm_model)

        logger.debug("loan_application_stored", application_id=str(application.id))
        return application.mark_persisted(orm_model.version)

    async def find_by_id(self, application_id: ApplicationId) -> LoanApplication | None:
        async with self._storage_errors("find_loan_application_by_id"):
            orm_model = await self.db.get(LoanApplicationORM, application_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_by_status(self, status_id: StatusId) -> list[LoanApplication]:
        """
        Get all applications in a status.

        Returns:
            List of applications ordered by creation time, oldest first
        """
        stmt = (
            select(LoanApplicationORM)
            .where(
                LoanApplicationORM.status_id == status_id.value,
                LoanApplicationORM.active.is_(True),
            )
            .order_by(LoanApplicationORM.created_at, LoanApplicationORM.id)
        )
        async with self._storage_errors("find_loan_applications_by_status"):
            orm_models = (await self.db.execute(stmt)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]
