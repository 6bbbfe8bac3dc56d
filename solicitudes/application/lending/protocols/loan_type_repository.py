"""Protocol for LoanType repository in lending context."""

from typing import Protocol

from solicitudes.domain.common.value_objects import LoanTypeId, Money, Name
from solicitudes.domain.lending.entities import LoanType


class LoanTypeRepositoryProtocol(Protocol):
    """Protocol for LoanType repository operations."""

    async def find_by_id(self, loan_type_id: LoanTypeId) -> LoanType | None:
        """
        Find a loan type by ID.

        Args:
            loan_type_id: The loan type ID

        Returns:
            LoanType entity if found, None otherwise
        """
        ...

    async def find_by_name(self, name: Name) -> LoanType | None:
        """Find a loan type by its exact name."""
        ...

    async def find_all(self) -> list[LoanType]:
        """Get all loan types ordered by name."""
        ...

    async def find_by_allowed_amount(self, amount: Money) -> list[LoanType]:
        """
        Get the loan types whose permitted range contains ``amount``.

        Args:
            amount: Requested amount, both range ends inclusive

        Returns:
            List of matching loan types ordered by name
        """
        ...

    async def save(self, loan_type: LoanType) -> LoanType:
        """
        Insert a new loan type.

        Returns:
            The stored loan type carrying the version assigned by the store
        """
        ...

    async def update(self, loan_type: LoanType) -> LoanType:
        """
        Update an existing loan type under optimistic locking.

        Returns:
            The stored loan type with its version incremented

        Raises:
            VersionConflictError: If the stored version differs from loan_type.version
            EntityNotFoundError: If the loan type no longer exists
        """
        ...
