"""RefreshTokenRepository - SQLAlchemy implementation for refresh token persistence.

Runs inside a unit of work: stages inserts and updates on the shared session
and never commits. Every aggregate it hands out or receives is tracked so the
unit of work can publish the aggregate's events after commit.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.refresh_token import RefreshToken
from src.domain.enums.refresh_token_status import RefreshTokenStatus
from src.infrastructure.persistence.models.refresh_token import (
    RefreshToken as RefreshTokenModel,
)


def _to_domain(model: RefreshTokenModel) -> RefreshToken:
    """Convert database model to domain entity."""
    return RefreshToken(
        id=model.id,
        token_hash=model.token_hash,
        user_id=model.user_id,
        device_id=model.device_id,
        expires_at=model.expires_at,
        status=RefreshTokenStatus(model.status),
        revoked_at=model.revoked_at,
        replaced_by_id=model.replaced_by_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _to_model(token: RefreshToken) -> RefreshTokenModel:
    """Convert domain entity to a new database model (audit columns left to the database)."""
    return RefreshTokenModel(
        id=token.id,
        token_hash=token.token_hash,
        user_id=token.user_id,
        device_id=token.device_id,
        expires_at=token.expires_at,
        status=token.status.value,
        revoked_at=token.revoked_at,
        replaced_by_id=token.replaced_by_id,
    )


class RefreshTokenRepository:
    """SQLAlchemy implementation of the RefreshTokenRepository protocol.

    Attributes:
        session: Shared async session of the unit of work.
        seen: Aggregates loaded or staged through this repository.

    Example:
        >>> repo = RefreshTokenRepository(session)
        >>> token = await repo.get_by_token_hash(token_hash, for_update=True)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.seen: dict[UUID, RefreshToken] = {}

    def _track(self, token: RefreshToken) -> RefreshToken:
        self.seen[token.id] = token
        return token

    async def get_by_token_hash(
        self, token_hash: str, *, for_update: bool = False
    ) -> RefreshToken | None:
        """Find token by hash regardless of status.

        With ``for_update`` the row stays locked until the transaction ends,
        which serializes concurrent refreshes of the same token.
        """
        stmt = select(RefreshTokenModel).where(RefreshTokenModel.token_hash == token_hash)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._track(_to_domain(model))

    async def get_by_id(self, token_id: UUID) -> RefreshToken | None:
        model = await self.session.get(RefreshTokenModel, token_id)
        if model is None:
            return None
        return self._track(_to_domain(model))

    async def get_active_by_user_id(self, user_id: UUID) -> list[RefreshToken]:
        """Every ACTIVE token of a user, expired or not, locked for update."""
        stmt = (
            select(RefreshTokenModel)
            .where(RefreshTokenModel.user_id == user_id)
            .where(RefreshTokenModel.status == RefreshTokenStatus.ACTIVE.value)
            .order_by(RefreshTokenModel.created_at)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        return [self._track(_to_domain(model)) for model in result.scalars().all()]

    async def add(self, token: RefreshToken) -> None:
        self.session.add(_to_model(token))
        self._track(token)

    async def update(self, token: RefreshToken) -> None:
        """Copy the mutable lifecycle fields onto the persisted row.

        Raises:
            LookupError: If the token was never persisted.
        """
        model = await self.session.get(RefreshTokenModel, token.id)
        if model is None:
            raise LookupError(f"refresh token {token.id} does not exist")
        model.status = token.status.value
        model.revoked_at = token.revoked_at
        model.replaced_by_id = token.replaced_by_id
        self._track(token)

    async def delete_expired_by_user_id(self, user_id: UUID, now: datetime) -> int:
        stmt = (
            delete(RefreshTokenModel)
            .where(RefreshTokenModel.user_id == user_id)
            .where(RefreshTokenModel.expires_at <= now)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def delete_expired(self, now: datetime) -> int:
        stmt = delete(RefreshTokenModel).where(RefreshTokenModel.expires_at <= now)
        result = await self.session.execute(stmt)
        return result.rowcount or 0
