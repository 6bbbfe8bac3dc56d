"""Protocol for LoanApplication repository in lending context."""

from typing import Protocol

from solicitudes.domain.common.value_objects import ApplicationId, StatusId
from solicitudes.domain.lending.entities import LoanApplication


class LoanApplicationRepositoryProtocol(Protocol):
    """Protocol for LoanApplication repository operations."""

    async def save(self, application: LoanApplication) -> LoanApplication:
        """
        Persist a new loan application.

        Args:
            application: Unpersisted application (version 0)

        Returns:
            The stored application carrying the version assigned by the store

        Raises:
            PersistenceError: If the store fails
        """
        ...

    async def find_by_id(self, application_id: ApplicationId) -> LoanApplication | None:
        """Find an application by ID, None when it does not exist."""
        ...

    async def find_by_status(self, status_id: StatusId) -> list[LoanApplication]:
        """Get all applications currently in the given status."""
        ...
