"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
Every error carries an ErrorKind so callers (use cases, HTTP handlers)
can classify it without inspecting the concrete type.

Inside the creation pipeline errors are returned as values (see
application.common.result); value objects and aggregates raise them.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Classification of every failure the core can report."""

    INVALID_INPUT = "INVALID_INPUT"
    REFERENCE_NOT_FOUND = "REFERENCE_NOT_FOUND"
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    VERSION_CONFLICT = "VERSION_CONFLICT"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Invalid email format, negative amount, malformed UUID.
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when a referenced entity cannot be found.

    Example: Creating an application for a loan type id that doesn't exist.
    """

    kind = ErrorKind.REFERENCE_NOT_FOUND

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: Requested amount outside the loan type's permitted range.
    """

    kind = ErrorKind.BUSINESS_RULE_VIOLATION

    def __init__(
        self,
        rule: str,
        message: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule, **(details or {})})
        self.rule = rule


class InvariantViolationError(DomainError):
    """
    Raised when an aggregate invariant is violated.

    Invariants are rules that must always be true for an aggregate
    to be in a valid state.

    Example: A loan type whose minimum amount exceeds its maximum.
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, aggregate: str, invariant: str) -> None:
        message = f"Invariant violation in {aggregate}: {invariant}"
        super().__init__(message, {"aggregate": aggregate, "invariant": invariant})
        self.aggregate = aggregate
        self.invariant = invariant


class VersionConflictError(ValidationError):
    """
    Raised when a claimed version is not strictly greater than the current one,
    or when the stored version changed under an optimistic update.
    """

    kind = ErrorKind.VERSION_CONFLICT

    def __init__(
        self,
        aggregate: str,
        current_version: int | None,
        attempted_version: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message
            or f"{aggregate} version {attempted_version} must be greater than {current_version}",
            field="version",
            value=attempted_version,
        )
        self.details["aggregate"] = aggregate
        self.details["current_version"] = current_version
        self.aggregate = aggregate
        self.current_version = current_version
        self.attempted_version = attempted_version


class ConfigurationError(DomainError):
    """
    Raised when a required system-level setting is missing.

    Example: The initial "pending review" status does not exist.
    Not something a caller can fix by changing its input.
    """

    kind = ErrorKind.CONFIGURATION_ERROR


class PersistenceError(DomainError):
    """
    Raised when the underlying store fails for reasons opaque to the domain.

    Example: Lost connection, timeout, unexpected constraint violation.
    """

    kind = ErrorKind.PERSISTENCE_ERROR

    def __init__(self, operation: str, message: str | None = None) -> None:
        super().__init__(message or f"Persistence failure during {operation}", {"operation": operation})
        self.operation = operation
