"""Human-readable name made of letters and spaces (accented letters allowed)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_object import ValueObject

if TYPE_CHECKING:
    from typing import Self

MAX_LENGTH = 100


@dataclass(frozen=True)
class Name(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise self._invalid("Name cannot be empty", self.value)
        if len(self.value) > MAX_LENGTH:
            raise self._invalid(f"Name cannot be longer than {MAX_LENGTH} characters")
        # str.isalpha is Unicode-aware, so "Préstamo" and "Ñandú" pass
        if not all(char.isalpha() or char.isspace() for char in self.value):
            raise self._invalid("Name can only contain letters and spaces", self.value)

    @classmethod
    def of(cls, raw: str | None) -> Self:
        if isinstance(raw, str):
            raw = raw.strip()
        return cls(raw)  # type: ignore[arg-type]

    def upper(self) -> str:
        return self.value.upper()

    def lower(self) -> str:
        return self.value.lower()

    def capitalized(self) -> str:
        """First letter upper case, the rest lower case."""
        return self.value[:1].upper() + self.value[1:].lower()

    def contains(self, text: str) -> bool:
        """Case-insensitive substring match."""
        return text.lower() in self.value.lower()

    def __str__(self) -> str:
        return self.value
