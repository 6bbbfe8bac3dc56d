"""Applicant email address."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_object import ValueObject

if TYPE_CHECKING:
    from typing import Self

EMAIL_PATTERN = re.compile(r"[^@]+@[^@]+\.[^@]+")
MAX_LENGTH = 254


@dataclass(frozen=True)
class Email(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise self._invalid("Email cannot be empty", self.value)
        if not EMAIL_PATTERN.fullmatch(self.value):
            raise self._invalid(f"Invalid email format: {self.value}", self.value)
        if len(self.value) > MAX_LENGTH:
            raise self._invalid(f"Email cannot be longer than {MAX_LENGTH} characters")

    @classmethod
    def of(cls, raw: str | None) -> Self:
        """Build an email, trimming surrounding whitespace."""
        if isinstance(raw, str):
            raw = raw.strip()
        return cls(raw)  # type: ignore[arg-type]

    @property
    def local_part(self) -> str:
        return self.value[: self.value.index("@")]

    @property
    def domain(self) -> str:
        return self.value[self.value.index("@") + 1 :]

    def belongs_to_domain(self, domain: str) -> bool:
        return self.domain.lower() == domain.lower()

    def __str__(self) -> str:
        return self.value
