"""
Result type for use case outcomes.

Pipeline stages return a Result instead of raising, so every failure path
is a plain value the caller can inspect. Stages are chained with
``flat_map`` (sync) or ``flat_map_async`` (awaits the next stage); the
first Failure short-circuits everything after it.

Example:
    def parse_term(raw: object) -> Result[Term, DomainError]:
        try:
            return Success(Term.of(raw))
        except ValidationError as error:
            return Failure(error)

    result = await parse_term(24).flat_map_async(resolve_loan_type)
    if result.is_success:
        application = result.unwrap()
    else:
        kind = result.unwrap_error().kind
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped value type


@dataclass(frozen=True)
class Success(Generic[T]):
    """A stage that produced a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        """Raises ValueError - Success has no error."""
        raise ValueError("Cannot get error from Success result")

    def value_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Run the next stage with this value."""
        return fn(self.value)

    async def flat_map_async(
        self, fn: Callable[[T], Awaitable["Result[U, E]"]]
    ) -> "Result[U, E]":
        """Await the next (I/O bound) stage with this value."""
        return await fn(self.value)

    def map_error(self, fn: Callable[[E], U]) -> "Success[T]":
        return self

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A stage that stopped the pipeline with an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raises ValueError - Failure has no value."""
        raise ValueError(f"Cannot get value from Failure result: {self.error}")

    def unwrap_error(self) -> E:
        return self.error

    def value_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U]) -> "Failure[E]":
        return self

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Failure[E]":
        """Short-circuit: the next stage is never called."""
        return self

    async def flat_map_async(
        self, fn: Callable[[T], Awaitable["Result[U, E]"]]
    ) -> "Failure[E]":
        """Short-circuit: the next stage is never awaited."""
        return self

    def map_error(self, fn: Callable[[E], U]) -> "Failure[U]":
        return Failure(fn(self.error))

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Success[T] | Failure[E]
