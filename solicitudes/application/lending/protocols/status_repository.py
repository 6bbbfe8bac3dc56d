"""Protocol for Status repository in lending context."""

from typing import Protocol

from solicitudes.domain.common.value_objects import StatusId
from solicitudes.domain.lending.entities import Status


class StatusRepositoryProtocol(Protocol):
    """Protocol for Status repository operations."""

    async def find_by_id(self, status_id: StatusId) -> Status | None:
        """Find a status by ID, None when it does not exist."""
        ...

    async def find_by_name(self, name: str) -> Status | None:
        """
        Find a status by name, ignoring case.

        Args:
            name: Status name such as "PENDIENTE"

        Returns:
            Status entity if found, None otherwise
        """
        ...

    async def find_all(self) -> list[Status]:
        """Get all statuses ordered by name."""
        ...

    async def find_by_description_containing(self, text: str) -> list[Status]:
        """Get statuses whose description contains ``text`` (case-insensitive)."""
        ...

    async def save(self, status: Status) -> Status:
        """Insert a new status and return it with its stored version."""
        ...

    async def update(self, status: Status) -> Status:
        """
        Update an existing status under optimistic locking.

        Returns:
            The stored status with its version incremented

        Raises:
            VersionConflictError: If the stored version differs from status.version
            EntityNotFoundError: If the status no longer exists
        """
        ...
