"""
Status aggregate: a named workflow state an application can be in.
"""

from dataclasses import dataclass, replace

from solicitudes.domain.common.aggregate_root import AggregateRoot
from solicitudes.domain.common.exceptions import InvariantViolationError, ValidationError
from solicitudes.domain.common.value_objects import StatusId


@dataclass(frozen=True, eq=False)
class Status(AggregateRoot[StatusId]):
    """
    Workflow status such as PENDIENTE.

    Business Rules:
    - Name cannot be blank
    - Description may be empty but never missing
    - Changes produce a new instance with the same version; the store
      assigns the next version on update
    """

    id: StatusId
    name: str
    description: str
    version: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._require("id", self.id)
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvariantViolationError("Status", "name is required")
        if not isinstance(self.description, str):
            raise InvariantViolationError("Status", "description is required")
        self._validate_version()

    @classmethod
    def create(cls, id: StatusId, name: str, description: str) -> "Status":
        """Create a new, never persisted status (version 0)."""
        return cls(id=id, name=name, description=description)

    @classmethod
    def reconstruct(cls, id: StatusId, name: str, description: str, version: int) -> "Status":
        """Reconstitute a status from persistence."""
        return cls(id=id, name=name, description=description, version=version)

    def has_name(self, name: str | None) -> bool:
        """Case-insensitive name comparison."""
        if name is None:
            return False
        return self.name.casefold() == name.casefold()

    def description_contains(self, text: str | None) -> bool:
        """Case-insensitive substring search on the description."""
        if text is None:
            return False
        return text.casefold() in self.description.casefold()

    def update_description(self, description: str | None) -> "Status":
        """
        Return a copy with a new description.

        Raises:
            ValidationError: If description is None
        """
        if description is None:
            raise ValidationError("Description cannot be None", field="description")
        return replace(self, description=description)

    def rename(self, name: str | None) -> "Status":
        """
        Return a copy with a new name.

        Raises:
            ValidationError: If name is None or blank
        """
        if name is None or not name.strip():
            raise ValidationError("Name cannot be empty", field="name", value=name)
        return replace(self, name=name)
