"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity
- AggregateRoot: Versioned consistency boundaries
- Error taxonomy shared by every layer
"""

from .aggregate_root import AggregateRoot
from .entity import Entity, EntityId, IdGenerator
from .exceptions import (
    BusinessRuleViolationError,
    ConfigurationError,
    DomainError,
    EntityNotFoundError,
    ErrorKind,
    InvariantViolationError,
    PersistenceError,
    ValidationError,
    VersionConflictError,
)
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "BusinessRuleViolationError",
    "ConfigurationError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ErrorKind",
    "IdGenerator",
    "InvariantViolationError",
    "PersistenceError",
    "ValidationError",
    "ValueObject",
    "VersionConflictError",
]
