"""Unit tests for domain event subscribers.

Tests cover:
- SecurityLoggingHandler: one structured log per event at the right level
- RefreshTokenCleanupHandler: deletes the user's expired tokens, logs count,
  swallows database errors
- PermissionCacheInvalidationHandler: invalidates the user's cached set
"""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.application.event_handlers import (
    PermissionCacheInvalidationHandler,
    RefreshTokenCleanupHandler,
)
from src.domain.entities.refresh_token import RefreshToken
from src.domain.enums import RefreshTokenStatus, RoleChangeActor
from src.domain.events import (
    RefreshTokenChainCompromised,
    RefreshTokenCreated,
    RefreshTokenReuseDetected,
    RefreshTokenRevoked,
    RefreshTokenRotated,
    UserRolesChanged,
)
from src.infrastructure.events.handlers.security_logging_handler import (
    SecurityLoggingHandler,
)


@pytest.mark.unit
class TestSecurityLoggingHandler:
    """Test security log output."""

    @pytest.mark.asyncio
    async def test_rotation_logged_at_info(self, mock_logger):
        handler = SecurityLoggingHandler(logger=mock_logger)
        event = RefreshTokenRotated(
            old_refresh_token_id=uuid4(),
            new_refresh_token_id=uuid4(),
            user_id=uuid4(),
            device_id="d1",
        )

        await handler.handle_refresh_token_rotated(event)

        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        assert args[0] == "refresh_token_rotated"
        assert kwargs["device_id"] == "d1"
        assert kwargs["event_id"] == str(event.event_id)

    @pytest.mark.asyncio
    async def test_revocation_logs_reason(self, mock_logger):
        handler = SecurityLoggingHandler(logger=mock_logger)

        await handler.handle_refresh_token_revoked(
            RefreshTokenRevoked(
                refresh_token_id=uuid4(), user_id=uuid4(), reason="logout"
            )
        )

        assert mock_logger.info.call_args.kwargs["reason"] == "logout"

    @pytest.mark.asyncio
    async def test_reuse_logged_at_warning(self, mock_logger):
        handler = SecurityLoggingHandler(logger=mock_logger)

        await handler.handle_reuse_detected(
            RefreshTokenReuseDetected(
                refresh_token_id=uuid4(),
                user_id=uuid4(),
                device_id="d1",
                previous_status=RefreshTokenStatus.ROTATED,
            )
        )

        args, kwargs = mock_logger.warning.call_args
        assert args[0] == "refresh_token_reuse_detected"
        assert kwargs["previous_status"] == "rotated"

    @pytest.mark.asyncio
    async def test_chain_compromise_logged_at_critical(self, mock_logger):
        handler = SecurityLoggingHandler(logger=mock_logger)
        user_id = uuid4()

        await handler.handle_chain_compromised(
            RefreshTokenChainCompromised(user_id=user_id)
        )

        mock_logger.critical.assert_called_once()
        assert mock_logger.critical.call_args.kwargs["user_id"] == str(user_id)


@pytest.mark.unit
class TestRefreshTokenCleanupHandler:
    """Test per-user expired token cleanup."""

    @pytest.mark.asyncio
    async def test_deletes_only_expired_tokens_of_user(
        self, uow_factory, store, user, clock, mock_logger
    ):
        # Arrange
        now = clock.utc_now()
        expired = RefreshToken.issue(
            token_hash="h-expired",
            user_id=user.id,
            device_id="d1",
            expires_at=now - timedelta(seconds=1),
        )
        fresh = RefreshToken.issue(
            token_hash="h-fresh",
            user_id=user.id,
            device_id="d1",
            expires_at=now + timedelta(days=1),
        )
        other_user_expired = RefreshToken.issue(
            token_hash="h-other",
            user_id=uuid4(),
            device_id="d1",
            expires_at=now - timedelta(days=1),
        )
        for token in (expired, fresh, other_user_expired):
            store.tokens[token.id] = token
        handler = RefreshTokenCleanupHandler(
            uow_factory=uow_factory, clock=clock, logger=mock_logger
        )

        # Act
        await handler.handle_refresh_token_created(
            RefreshTokenCreated(refresh_token_id=fresh.id, user_id=user.id)
        )

        # Assert
        assert set(store.tokens) == {fresh.id, other_user_expired.id}
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.kwargs["deleted_count"] == 1

    @pytest.mark.asyncio
    async def test_nothing_to_delete_logs_nothing(
        self, uow_factory, user, clock, mock_logger
    ):
        handler = RefreshTokenCleanupHandler(
            uow_factory=uow_factory, clock=clock, logger=mock_logger
        )

        await handler.handle_refresh_token_created(
            RefreshTokenCreated(refresh_token_id=uuid4(), user_id=user.id)
        )

        mock_logger.info.assert_not_called()

    @pytest.mark.asyncio
    async def test_database_error_is_logged_not_raised(self, clock, mock_logger):
        # Arrange
        uow = MagicMock()
        uow.__aenter__ = AsyncMock(return_value=uow)
        uow.__aexit__ = AsyncMock(return_value=None)
        uow.refresh_tokens.delete_expired_by_user_id = AsyncMock(
            side_effect=OperationalError("DELETE", {}, Exception("down"))
        )
        handler = RefreshTokenCleanupHandler(
            uow_factory=lambda: uow, clock=clock, logger=mock_logger
        )

        # Act
        await handler.handle_refresh_token_created(
            RefreshTokenCreated(refresh_token_id=uuid4(), user_id=uuid4())
        )

        # Assert
        mock_logger.error.assert_called_once()
        args, kwargs = mock_logger.error.call_args
        assert args[0] == "expired_refresh_token_cleanup_failed"
        assert isinstance(kwargs["error"], OperationalError)


@pytest.mark.unit
class TestPermissionCacheInvalidationHandler:
    """Test cache invalidation on role change."""

    @pytest.mark.asyncio
    async def test_invalidates_user_permissions(self, mock_logger):
        authorization = AsyncMock()
        handler = PermissionCacheInvalidationHandler(
            authorization=authorization, logger=mock_logger
        )
        user_id = uuid4()

        await handler.handle_user_roles_changed(
            UserRolesChanged(
                user_id=user_id,
                old_role_ids=frozenset({1}),
                new_role_ids=frozenset({1, 2}),
                actor=RoleChangeActor.ADMINISTRATOR,
            )
        )

        authorization.invalidate_permissions_cache.assert_awaited_once_with(user_id)
        assert mock_logger.debug.call_args.kwargs["new_role_ids"] == [1, 2]
