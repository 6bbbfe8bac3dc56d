"""Shared error handling for the SQLAlchemy repositories."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.orm.exc import StaleDataError

from solicitudes.domain.common.exceptions import PersistenceError, VersionConflictError

logger = structlog.get_logger(__name__)


def concurrent_modification(
    aggregate: str, entity_id: object, expected_version: int, stored_version: int | None = None
) -> VersionConflictError:
    """Error for an optimistic update whose expected version is no longer stored."""
    stored = f"stored version {stored_version}" if stored_version is not None else "row changed"
    return VersionConflictError(
        aggregate,
        stored_version,
        expected_version,
        message=(
            f"{aggregate} {entity_id} was modified concurrently "
            f"(expected version {expected_version}, {stored})"
        ),
    )


class SqlAlchemyRepository:
    """Base for repositories that commit their own writes."""

    aggregate_name = "Aggregate"

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncIterator[None]:
        """Roll back and report driver failures as PersistenceError."""
        try:
            yield
        except SQLAlchemyError as error:
            await self.db.rollback()
            logger.error(
                "repository_operation_failed",
                repository=self.__class__.__name__,
                operation=operation,
                error=str(error),
            )
            raise PersistenceError(operation) from error

    async def _commit_versioned(
        self, orm_model: DeclarativeBase, entity_id: object, expected_version: int
    ) -> None:
        """
        Commit an UPDATE guarded by the version column.

        The row is always marked modified, so the version moves forward even
        when every mapped value is unchanged.
        """
        orm_model.updated_at = func.now()  # type: ignore[attr-defined]
        try:
            await self.db.commit()
        except StaleDataError:
            await self.db.rollback()
            raise concurrent_modification(self.aggregate_name, entity_id, expected_version) from None
