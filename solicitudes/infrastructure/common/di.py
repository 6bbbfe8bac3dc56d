from collections.abc import Awaitable, Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from solicitudes.core import container
from solicitudes.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], Awaitable[T]]:
    """
    Create a FastAPI dependency for a container provider.

    Automatically handles container.session override with the request-scoped
    AsyncSession. No await separates the override from the provider call.
    """

    async def dependency(db: DatabaseSession) -> T:
        try:
            container.session.override(db)
            return provider()
        finally:
            container.session.reset_override()

    return dependency
