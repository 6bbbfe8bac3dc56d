"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Entities in this service are immutable: a state change produces a new
instance with the same id.

Example:
    @dataclass(frozen=True, eq=False)
    class Status(Entity[StatusId]):
        id: StatusId
        name: str
"""

from abc import ABC
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .value_object import ValueObject

IdGenerator = Callable[[], UUID]


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a UUID (128-bit token).
    They provide type safety to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True)
        class StatusId(EntityId):
            pass

        status_id = StatusId(uuid4())
        StatusId(status_id.value) == LoanTypeId(status_id.value)  # False
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise self._invalid(f"{self.__class__.__name__} requires a UUID", self.value)

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def new(cls, generator: IdGenerator = uuid4) -> Self:
        """Create a fresh id from the given UUID generator."""
        return cls(generator())

    @classmethod
    def from_string(cls, raw: str | None) -> Self:
        """Parse an id from its canonical string form."""
        if raw is None or not str(raw).strip():
            raise cls._invalid(f"{cls.__name__} string is required", raw)
        try:
            return cls(UUID(str(raw).strip()))
        except ValueError:
            raise cls._invalid(f"Invalid UUID format for {cls.__name__}: {raw}", raw) from None

    @classmethod
    def coerce(cls, raw: "EntityId | UUID | str | None") -> Self:
        """Accept an id of this type, a UUID or a UUID string."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, EntityId):
            raise cls._invalid(f"Expected {cls.__name__}, got {raw.__class__.__name__}", str(raw))
        if isinstance(raw, UUID):
            return cls(raw)
        return cls.from_string(raw)

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Have lifecycle (created, persisted, replaced)

    Subclasses must have an 'id' attribute of type IdType and, when they
    are dataclasses, declare ``eq=False`` so identity equality is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
