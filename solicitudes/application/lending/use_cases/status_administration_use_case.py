"""Use case for administrative status operations."""

import structlog

from solicitudes.application.lending.protocols import StatusRepositoryProtocol
from solicitudes.domain.common.exceptions import EntityNotFoundError, VersionConflictError
from solicitudes.domain.common.value_objects import StatusId
from solicitudes.domain.lending.entities import Status

logger = structlog.get_logger(__name__)


class StatusAdministrationUseCase:
    """Search statuses and edit their descriptions under optimistic locking."""

    def __init__(self, status_repository: StatusRepositoryProtocol) -> None:
        """Initialize use case with the status repository protocol."""
        self.status_repository = status_repository

    async def search(self, name: str | None = None, description: str | None = None) -> list[Status]:
        """
        Find statuses by name and/or description text.

        Args:
            name: Exact name, compared case-insensitively
            description: Text the description must contain (case-insensitive)

        Returns:
            Matching statuses; all statuses when neither filter is given
        """
        name = name.strip() if name else None
        description = description.strip() if description else None

        if name:
            status = await self.status_repository.find_by_name(name)
            candidates = [status] if status is not None else []
        elif description:
            candidates = await self.status_repository.find_by_description_containing(description)
        else:
            return await self.status_repository.find_all()

        if description:
            candidates = [s for s in candidates if s.description_contains(description)]
        return candidates

    async def update_description(
        self, status_id: StatusId | str, description: str | None, expected_version: int
    ) -> Status:
        """
        Change a status description.

        Args:
            status_id: Status to update
            description: New description (may be empty, never None)
            expected_version: Version the caller last read

        Returns:
            The updated status with its new version

        Raises:
            ValidationError: If the id or the description is invalid
            EntityNotFoundError: If the status does not exist
            VersionConflictError: If the status changed since the caller read it
        """
        status_id = StatusId.coerce(status_id)
        status = await self.status_repository.find_by_id(status_id)
        if status is None:
            raise EntityNotFoundError("Status", status_id)

        if status.version != expected_version:
            raise VersionConflictError(
                "Status",
                status.version,
                expected_version,
                message=f"Status {status_id} changed since version {expected_version}",
            )

        updated = await self.status_repository.update(status.update_description(description))
        logger.info(
            "status_description_updated",
            status_id=str(updated.id),
            version=updated.version,
        )
        return updated
