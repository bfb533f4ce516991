"""RefreshTokenRepository protocol (port) for domain layer.

Repositories never commit. They run inside a unit of work that owns the
transaction and publishes the aggregates' domain events after commit.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.refresh_token import RefreshToken


class RefreshTokenRepository(Protocol):
    """Protocol for refresh token persistence operations.

    Implementations:
        - RefreshTokenRepository: src/infrastructure/persistence/repositories/
    """

    async def get_by_token_hash(
        self, token_hash: str, *, for_update: bool = False
    ) -> RefreshToken | None:
        """Find a token by hash, whatever its status.

        Args:
            token_hash: Hash of the presented raw token.
            for_update: Take a row lock held until the transaction ends, so
                concurrent refreshes of the same token serialize.
        """
        ...

    async def get_by_id(self, token_id: UUID) -> RefreshToken | None: ...

    async def get_active_by_user_id(self, user_id: UUID) -> list[RefreshToken]:
        """ACTIVE tokens of a user, including any past expiry (row-locked)."""
        ...

    async def add(self, token: RefreshToken) -> None:
        """Stage a new token for insert."""
        ...

    async def update(self, token: RefreshToken) -> None:
        """Stage the token's changed state for write."""
        ...

    async def delete_expired_by_user_id(self, user_id: UUID, now: datetime) -> int:
        """Delete every token of ``user_id`` whose expiry has passed.

        Returns:
            Number of rows deleted.
        """
        ...

    async def delete_expired(self, now: datetime) -> int:
        """Delete every token whose expiry has passed (bulk sweep)."""
        ...
