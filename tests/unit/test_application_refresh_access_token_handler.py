"""Unit tests for RefreshAccessTokenHandler.

Tests cover:
- Successful rotation (new pair, old token Rotated and linked, events)
- Unknown token (no state change)
- Reuse of a non-Active token (token marked Reused, chain revoked, events)
- Expired token (marked Expired)
- Device mismatch (revoked with reason)
- Row lock requested on lookup
- Failure branches commit their state changes
"""

from datetime import timedelta

import pytest

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Success
from src.domain.entities.refresh_token import RefreshToken
from src.domain.enums import RefreshTokenStatus, RevocationReason
from src.domain.events.refresh_token_events import (
    RefreshTokenChainCompromised,
    RefreshTokenDeviceMismatchDetected,
    RefreshTokenExpiredUsage,
    RefreshTokenReuseDetected,
    RefreshTokenRevoked,
    RefreshTokenRotated,
)


@pytest.fixture
def handler(
    uow_factory, token_service, refresh_token_generator, clock
) -> RefreshAccessTokenHandler:
    return RefreshAccessTokenHandler(
        uow_factory=uow_factory,
        token_service=token_service,
        refresh_token_generator=refresh_token_generator,
        clock=clock,
    )


@pytest.fixture
def issue_token(store, user, clock):
    """Store an Active token for ``user`` whose raw value is ``raw``."""

    def _issue(raw: str, device_id: str = "d1", ttl=timedelta(days=7)):
        token = RefreshToken.issue(
            token_hash=f"hash:{raw}",
            user_id=user.id,
            device_id=device_id,
            expires_at=clock.utc_now() + ttl,
        )
        token.pull_domain_events()
        store.tokens[token.id] = token
        return token

    return _issue


@pytest.mark.unit
class TestRefreshAccessTokenRotation:
    """Test successful rotation."""

    @pytest.mark.asyncio
    async def test_refresh_returns_new_pair(self, handler, issue_token):
        issue_token("old")

        result = await handler.handle(
            RefreshAccessToken(refresh_token="old", device_id="d1")
        )

        assert isinstance(result, Success)
        assert result.value.access_token == "access-1"
        assert result.value.refresh_token == "raw-1"
        assert result.value.expires_in == 900

    @pytest.mark.asyncio
    async def test_refresh_rotates_old_and_links_successor(
        self, handler, issue_token, store, clock
    ):
        old = issue_token("old")

        await handler.handle(RefreshAccessToken(refresh_token="old", device_id="d1"))

        retired = store.tokens[old.id]
        successor = store.token_by_hash("hash:raw-1")
        assert retired.status == RefreshTokenStatus.ROTATED
        assert retired.revoked_at == clock.utc_now()
        assert retired.replaced_by_id == successor.id
        assert successor.status == RefreshTokenStatus.ACTIVE
        assert successor.device_id == "d1"
        assert successor.user_id == old.user_id

    @pytest.mark.asyncio
    async def test_refresh_publishes_rotated_event_only(
        self, handler, issue_token, event_bus
    ):
        issue_token("old")

        await handler.handle(RefreshAccessToken(refresh_token="old", device_id="d1"))

        assert event_bus.types() == [RefreshTokenRotated]

    @pytest.mark.asyncio
    async def test_refresh_locks_token_row(self, handler, issue_token, uow_factory):
        issue_token("old")

        await handler.handle(RefreshAccessToken(refresh_token="old", device_id="d1"))

        assert uow_factory.created[0].refresh_tokens.locked_hashes == ["hash:old"]

    @pytest.mark.asyncio
    async def test_successor_can_be_refreshed(self, handler, issue_token, store):
        issue_token("old")
        first = await handler.handle(
            RefreshAccessToken(refresh_token="old", device_id="d1")
        )

        second = await handler.handle(
            RefreshAccessToken(refresh_token=first.value.refresh_token, device_id="d1")
        )

        assert isinstance(second, Success)
        assert second.value.refresh_token == "raw-2"


@pytest.mark.unit
class TestRefreshAccessTokenRejections:
    """Test rejected refresh attempts."""

    @pytest.mark.asyncio
    async def test_unknown_token_is_invalid(self, handler, store, event_bus):
        result = await handler.handle(
            RefreshAccessToken(refresh_token="nope", device_id="d1")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.REFRESH_TOKEN_INVALID
        assert store.commit_count == 0
        assert event_bus.events == []

    @pytest.mark.asyncio
    async def test_reused_token_revokes_active_chain(
        self, handler, issue_token, store, event_bus
    ):
        # Arrange: one rotated chain plus an unrelated active device
        old = issue_token("old")
        other_device = issue_token("other", device_id="d2")
        await handler.handle(RefreshAccessToken(refresh_token="old", device_id="d1"))
        successor = store.token_by_hash("hash:raw-1")
        event_bus.events.clear()

        # Act: replay the rotated token
        result = await handler.handle(
            RefreshAccessToken(refresh_token="old", device_id="d1")
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.REFRESH_TOKEN_REUSED
        assert store.tokens[old.id].status == RefreshTokenStatus.REUSED
        assert store.tokens[successor.id].status == RefreshTokenStatus.REVOKED
        assert store.tokens[other_device.id].status == RefreshTokenStatus.REVOKED
        assert event_bus.types()[:2] == [
            RefreshTokenReuseDetected,
            RefreshTokenChainCompromised,
        ]
        revoked = event_bus.of_type(RefreshTokenRevoked)
        assert {e.refresh_token_id for e in revoked} == {successor.id, other_device.id}
        assert {e.reason for e in revoked} == {RevocationReason.CHAIN_COMPROMISED.value}

    @pytest.mark.asyncio
    async def test_revoked_token_replay_is_reuse(self, handler, issue_token, store):
        token = issue_token("old")
        stored = store.tokens[token.id]
        stored.revoke(stored.expires_at - timedelta(days=7), RevocationReason.LOGOUT)
        stored.pull_domain_events()

        result = await handler.handle(
            RefreshAccessToken(refresh_token="old", device_id="d1")
        )

        assert result.error.code == ErrorCode.REFRESH_TOKEN_REUSED
        assert store.tokens[token.id].status == RefreshTokenStatus.REUSED

    @pytest.mark.asyncio
    async def test_reuse_revokes_active_tokens_past_expiry(
        self, handler, issue_token, store, user, clock
    ):
        laptop = issue_token("laptop", device_id="laptop", ttl=timedelta(hours=1))
        issue_token("phone", device_id="phone", ttl=timedelta(days=7))
        clock.advance(timedelta(hours=2))
        rotated = await handler.handle(
            RefreshAccessToken(refresh_token="phone", device_id="phone")
        )
        assert isinstance(rotated, Success)

        result = await handler.handle(
            RefreshAccessToken(refresh_token="phone", device_id="phone")
        )

        assert result.error.code == ErrorCode.REFRESH_TOKEN_REUSED
        assert store.tokens[laptop.id].status == RefreshTokenStatus.REVOKED
        assert [t for t in store.tokens_of(user.id) if t.is_active] == []

    @pytest.mark.asyncio
    async def test_expired_token_is_marked_expired(
        self, handler, issue_token, store, clock, event_bus
    ):
        token = issue_token("old", ttl=timedelta(hours=1))
        clock.advance(timedelta(hours=1))

        result = await handler.handle(
            RefreshAccessToken(refresh_token="old", device_id="d1")
        )

        assert result.error.code == ErrorCode.REFRESH_TOKEN_EXPIRED
        assert store.tokens[token.id].status == RefreshTokenStatus.EXPIRED
        assert store.tokens[token.id].revoked_at == clock.utc_now()
        assert event_bus.types() == [RefreshTokenExpiredUsage]

    @pytest.mark.asyncio
    async def test_expired_token_on_other_device_reports_expired(
        self, handler, issue_token, clock
    ):
        issue_token("old", ttl=timedelta(minutes=5))
        clock.advance(timedelta(minutes=10))

        result = await handler.handle(
            RefreshAccessToken(refresh_token="old", device_id="d2")
        )

        assert result.error.code == ErrorCode.REFRESH_TOKEN_EXPIRED

    @pytest.mark.asyncio
    async def test_device_mismatch_revokes_token(
        self, handler, issue_token, store, event_bus
    ):
        token = issue_token("old")

        result = await handler.handle(
            RefreshAccessToken(refresh_token="old", device_id="d2")
        )

        assert result.error.code == ErrorCode.REFRESH_TOKEN_DEVICE_MISMATCH
        assert store.tokens[token.id].status == RefreshTokenStatus.REVOKED
        assert event_bus.types() == [
            RefreshTokenDeviceMismatchDetected,
            RefreshTokenRevoked,
        ]
        assert event_bus.events[1].reason == RevocationReason.DEVICE_MISMATCH.value

    @pytest.mark.asyncio
    async def test_device_mismatch_then_replay_is_reuse(
        self, handler, issue_token, store
    ):
        issue_token("old")
        await handler.handle(RefreshAccessToken(refresh_token="old", device_id="d2"))

        result = await handler.handle(
            RefreshAccessToken(refresh_token="old", device_id="d1")
        )

        assert result.error.code == ErrorCode.REFRESH_TOKEN_REUSED

    @pytest.mark.asyncio
    async def test_rejections_commit_state(self, handler, issue_token, store):
        issue_token("old")

        await handler.handle(RefreshAccessToken(refresh_token="old", device_id="d2"))

        assert store.commit_count == 1
