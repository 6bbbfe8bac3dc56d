from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class ApplicationId(EntityId):
    """Strongly-typed loan application identifier."""


@dataclass(frozen=True)
class LoanTypeId(EntityId):
    """Strongly-typed loan type identifier."""


@dataclass(frozen=True)
class StatusId(EntityId):
    """Strongly-typed status identifier."""
