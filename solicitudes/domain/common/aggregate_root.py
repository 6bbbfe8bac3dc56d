"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to an aggregate - a cluster of domain
objects that are treated as a single unit. All external references should
go through the aggregate root, and all invariants are enforced here.

Every aggregate in this service carries an optimistic-concurrency version.
Aggregates are frozen dataclasses; transitions return new instances.

Example:
    @dataclass(frozen=True, eq=False)
    class Status(AggregateRoot[StatusId]):
        id: StatusId
        name: str
        version: int = 0

        def __post_init__(self) -> None:
            self._require("name", self.name)
            self._validate_version()
"""

from dataclasses import replace
from typing import Generic, Self

from .entity import Entity, IdType
from .exceptions import InvariantViolationError, VersionConflictError


class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related entities)
    - Responsible for maintaining invariants
    - The only entity referenced from outside the aggregate
    - Versioned: version 0 means "never persisted", and every persisted
      update must move the version strictly forward
    """

    version: int

    def _require(self, field_name: str, value: object) -> None:
        """Fail when a mandatory attribute is missing."""
        if value is None:
            raise InvariantViolationError(self.__class__.__name__, f"{field_name} is required")

    def _validate_version(self) -> None:
        if isinstance(self.version, bool) or not isinstance(self.version, int):
            raise InvariantViolationError(self.__class__.__name__, "version must be an integer")
        if self.version < 0:
            raise InvariantViolationError(self.__class__.__name__, "version cannot be negative")

    @property
    def is_persisted(self) -> bool:
        """Whether this instance tracks a stored row."""
        return self.version >= 1

    def mark_persisted(self, new_version: int) -> Self:
        """
        Return a copy carrying the version assigned by the store.

        This guard only prevents an in-memory instance from moving
        backwards; the storage adapter performs the real compare-and-swap.

        Raises:
            VersionConflictError: If new_version is not greater than the
                current version
        """
        if new_version <= self.version:
            raise VersionConflictError(self.__class__.__name__, self.version, new_version)
        return replace(self, version=new_version)  # type: ignore[type-var]
