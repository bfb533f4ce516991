"""Unit tests for RevokeRefreshTokenHandler (logout).

Tests cover:
- Active token revoked with reason logout
- Unknown and already inactive tokens are a no-op
- Logout never triggers reuse detection
"""

from datetime import timedelta

import pytest

from src.application.commands.auth_commands import RevokeRefreshToken
from src.application.commands.handlers.revoke_refresh_token_handler import (
    RevokeRefreshTokenHandler,
)
from src.core.result import Success
from src.domain.entities.refresh_token import RefreshToken
from src.domain.enums import RefreshTokenStatus
from src.domain.events.refresh_token_events import RefreshTokenRevoked


@pytest.fixture
def handler(uow_factory, refresh_token_generator, clock) -> RevokeRefreshTokenHandler:
    return RevokeRefreshTokenHandler(
        uow_factory=uow_factory,
        refresh_token_generator=refresh_token_generator,
        clock=clock,
    )


@pytest.fixture
def active_token(store, user, clock) -> RefreshToken:
    token = RefreshToken.issue(
        token_hash="hash:mine",
        user_id=user.id,
        device_id="d1",
        expires_at=clock.utc_now() + timedelta(days=7),
    )
    token.pull_domain_events()
    store.tokens[token.id] = token
    return token


@pytest.mark.unit
class TestRevokeRefreshTokenHandler:
    """Test logout."""

    @pytest.mark.asyncio
    async def test_revokes_active_token(
        self, handler, active_token, store, clock, event_bus
    ):
        # Act
        result = await handler.handle(RevokeRefreshToken(refresh_token="mine"))

        # Assert
        assert result == Success(value=True)
        stored = store.tokens[active_token.id]
        assert stored.status == RefreshTokenStatus.REVOKED
        assert stored.revoked_at == clock.utc_now()
        revoked = event_bus.of_type(RefreshTokenRevoked)
        assert [e.reason for e in revoked] == ["logout"]

    @pytest.mark.asyncio
    async def test_unknown_token_is_noop(self, handler, store):
        result = await handler.handle(RevokeRefreshToken(refresh_token="unknown"))

        assert result == Success(value=False)
        assert store.commit_count == 0

    @pytest.mark.asyncio
    async def test_second_logout_is_noop_not_reuse(
        self, handler, active_token, store, event_bus
    ):
        await handler.handle(RevokeRefreshToken(refresh_token="mine"))
        event_bus.events.clear()

        result = await handler.handle(RevokeRefreshToken(refresh_token="mine"))

        assert result == Success(value=False)
        assert store.tokens[active_token.id].status == RefreshTokenStatus.REVOKED
        assert event_bus.events == []
