"""Refresh token lifecycle status.

State machine:
    ACTIVE -> ROTATED   successful refresh
    ACTIVE -> REVOKED   device mismatch, logout, chain-compromise cascade
    ACTIVE -> EXPIRED   refresh attempted after expiry (observed lazily)
    ACTIVE | ROTATED | REVOKED -> REUSED   a non-Active token was presented again

Nothing ever transitions back to ACTIVE. A rotation creates a new token.
"""

from enum import Enum


class RefreshTokenStatus(str, Enum):
    """Refresh token status (stored as its string value)."""

    ACTIVE = "active"
    ROTATED = "rotated"
    REVOKED = "revoked"
    REUSED = "reused"
    EXPIRED = "expired"

    @property
    def can_become_reused(self) -> bool:
        """Whether a reuse detection moves this status to REUSED."""
        return self in (
            RefreshTokenStatus.ACTIVE,
            RefreshTokenStatus.ROTATED,
            RefreshTokenStatus.REVOKED,
        )
