"""
Base class for Value Objects.

Value Objects are immutable objects that are defined by their attributes
rather than by identity. Two value objects are equal if all their
attributes are equal.

Example:
    @dataclass(frozen=True)
    class Email(ValueObject):
        value: str

        def __post_init__(self) -> None:
            if "@" not in self.value:
                raise self._invalid("Invalid email format", self.value)
"""

from .exceptions import ValidationError


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (use frozen=True in dataclass, which also provides
      value-based __eq__ and __hash__)
    - Self-validating (validation in __post_init__)
    - Normalised only through explicit factories (``of``), never by
      the constructor itself
    """

    @classmethod
    def _invalid(cls, message: str, value: object = None) -> ValidationError:
        """Build the validation error reported for this value object."""
        return ValidationError(message, field=cls.__name__, value=value)

    def to_primitive(self) -> object:
        """
        Convert to primitive Python type for serialization.

        Override in subclasses if needed. Default returns
        the first attribute value for single-value VOs.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
