"""UserRepository protocol (port) for domain layer."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """Protocol for user persistence operations.

    Returned users carry their roles (with permission codes) loaded.

    Implementations:
        - UserRepository: src/infrastructure/persistence/repositories/
    """

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Find a non-deleted user by ID."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Find a non-deleted user by normalized email (case-insensitive)."""
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check whether any user, deleted or not, already holds the email."""
        ...

    async def add(self, user: User) -> None:
        """Stage a new user (with its role assignments) for insert."""
        ...

    async def update(self, user: User) -> None:
        """Stage the user's changed state (including role set) for write."""
        ...
