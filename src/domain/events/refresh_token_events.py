"""Refresh token lifecycle events.

Raised by the RefreshToken aggregate and published after commit.

Handlers:
- RefreshTokenCleanupHandler: RefreshTokenCreated (delete the user's expired tokens)
- SecurityLoggingHandler: every event below, at a level matching its severity
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums.refresh_token_status import RefreshTokenStatus
from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class RefreshTokenCreated(DomainEvent):
    """A refresh token was issued at login.

    Attributes:
        refresh_token_id: ID of the new token.
        user_id: Owner of the token.
    """

    refresh_token_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class RefreshTokenRotated(DomainEvent):
    """A refresh token was exchanged for a successor.

    Attributes:
        old_refresh_token_id: Token that became Rotated.
        new_refresh_token_id: Active successor.
        user_id: Owner of both tokens.
        device_id: Device both tokens are bound to.
    """

    old_refresh_token_id: UUID
    new_refresh_token_id: UUID
    user_id: UUID
    device_id: str


@dataclass(frozen=True, kw_only=True, slots=True)
class RefreshTokenReuseDetected(DomainEvent):
    """A token that was no longer Active was presented again.

    Attributes:
        refresh_token_id: The replayed token.
        user_id: Owner of the token.
        device_id: Device the token was bound to.
        previous_status: Status the token had when it was presented.
    """

    refresh_token_id: UUID
    user_id: UUID
    device_id: str
    previous_status: RefreshTokenStatus


@dataclass(frozen=True, kw_only=True, slots=True)
class RefreshTokenChainCompromised(DomainEvent):
    """Every Active refresh token of the user was revoked after a reuse.

    Attributes:
        user_id: User forced out of all devices.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class RefreshTokenExpiredUsage(DomainEvent):
    """A refresh attempt arrived after the token's expiry.

    Attributes:
        refresh_token_id: The expired token.
        user_id: Owner of the token.
        expires_at: Expiry instant of the token.
        attempted_at: When the refresh was attempted.
    """

    refresh_token_id: UUID
    user_id: UUID
    expires_at: datetime
    attempted_at: datetime


@dataclass(frozen=True, kw_only=True, slots=True)
class RefreshTokenDeviceMismatchDetected(DomainEvent):
    """A token was presented from a device other than the one it is bound to.

    Attributes:
        refresh_token_id: The presented token.
        user_id: Owner of the token.
        expected_device_id: Device bound at issuance.
        actual_device_id: Device claimed by the caller.
    """

    refresh_token_id: UUID
    user_id: UUID
    expected_device_id: str
    actual_device_id: str


@dataclass(frozen=True, kw_only=True, slots=True)
class RefreshTokenRevoked(DomainEvent):
    """An Active token was revoked.

    Attributes:
        refresh_token_id: The revoked token.
        user_id: Owner of the token.
        reason: Why it was revoked (see RevocationReason).
    """

    refresh_token_id: UUID
    user_id: UUID
    reason: str
