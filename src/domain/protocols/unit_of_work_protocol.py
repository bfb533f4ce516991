"""Unit of work protocol (port).

A unit of work owns one database transaction and the repositories that share
it. Domain events raised by aggregates handled through its repositories are
published only after ``commit()`` succeeds. Leaving the context without a
commit rolls back and drops the pending events.

Usage:
    async with uow_factory() as uow:
        token = await uow.refresh_tokens.get_by_token_hash(h, for_update=True)
        successor = token.rotate(new_token_hash=..., new_expires_at=..., now=now)
        await uow.refresh_tokens.update(token)
        await uow.refresh_tokens.add(successor)
        await uow.commit()
"""

from collections.abc import Callable
from types import TracebackType
from typing import Protocol, Self

from src.domain.protocols.refresh_token_repository import RefreshTokenRepository
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.user_repository import UserRepository


class UnitOfWorkProtocol(Protocol):
    """Transaction boundary with repositories and post-commit event dispatch."""

    users: UserRepository
    roles: RoleRepository
    refresh_tokens: RefreshTokenRepository

    async def __aenter__(self) -> Self: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    async def commit(self) -> None:
        """Commit the transaction, then publish collected domain events."""
        ...

    async def rollback(self) -> None:
        """Discard staged changes and pending domain events."""
        ...


UnitOfWorkFactory = Callable[[], UnitOfWorkProtocol]
"""Creates a fresh unit of work (one per command or background job)."""
