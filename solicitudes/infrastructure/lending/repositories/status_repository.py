"""Repository for Status domain entities."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from solicitudes.domain.common.exceptions import EntityNotFoundError
from solicitudes.domain.common.value_objects import StatusId
from solicitudes.domain.lending.entities import Status
from solicitudes.infrastructure.lending.mappers import StatusMapper
from solicitudes.infrastructure.lending.models import Status as StatusORM
from solicitudes.infrastructure.lending.repositories.base import (
    SqlAlchemyRepository,
    concurrent_modification,
)


class StatusRepository(SqlAlchemyRepository):
    """Repository for Status domain entities."""

    aggregate_name = "Status"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db)
        self.mapper = StatusMapper()

    async def find_by_id(self, status_id: StatusId) -> Status | None:
        async with self._storage_errors("find_status_by_id"):
            orm_model = await self.db.get(StatusORM, status_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_by_name(self, name: str) -> Status | None:
        """Find a status by name, ignoring case."""
        stmt = select(StatusORM).where(func.lower(StatusORM.name) == name.strip().lower())
        async with self._storage_errors("find_status_by_name"):
            orm_model = (await self.db.execute(stmt)).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_all(self) -> list[Status]:
        stmt = select(StatusORM).order_by(StatusORM.name)
        async with self._storage_errors("find_all_statuses"):
            orm_models = (await self.db.execute(stmt)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    async def find_by_description_containing(self, text: str) -> list[Status]:
        stmt = (
            select(StatusORM)
            .where(StatusORM.description.icontains(text, autoescape=True))
            .order_by(StatusORM.name)
        )
        async with self._storage_errors("find_statuses_by_description"):
            orm_models = (await self.db.execute(stmt)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    async def save(self, status: Status) -> Status:
        orm_model = self.mapper.to_orm(status)
        async with self._storage_errors("save_status"):
            self.db.add(orm_model)
            await self.db.commit()
            await self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    async def update(self, status: Status) -> Status:
        """
        Update a status under optimistic locking.

        Returns:
            The stored status with version + 1

        Raises:
            EntityNotFoundError: If the status does not exist
            VersionConflictError: If status.version is not the stored version
        """
        async with self._storage_errors("update_status"):
            orm_model = await self.db.get(StatusORM, status.id.value, populate_existing=True)
            if orm_model is None:
                raise EntityNotFoundError("Status", status.id)
            if orm_model.version != status.version:
                raise concurrent_modification(
                    self.aggregate_name, status.id, status.version, orm_model.version
                )

            self.mapper.to_orm(status, orm_model)
            await self._commit_versioned(orm_model, status.id, status.version)
            await self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
