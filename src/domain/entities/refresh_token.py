"""RefreshToken aggregate: rotation, reuse detection and expiry transitions.

Pure business logic, no framework dependencies. Every method that depends on
time takes ``now`` from the caller (an injected clock), so the aggregate is
deterministic under test.

Invariants:
    - status != ACTIVE implies revoked_at is set
    - replaced_by_id is assigned once, by rotate(), and never changes
    - no transition ever targets ACTIVE
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.aggregate_root import AggregateRoot
from src.domain.enums.refresh_token_status import RefreshTokenStatus
from src.domain.enums.revocation_reason import RevocationReason
from src.domain.errors.refresh_token_error import InvalidTokenTransitionError
from src.domain.events.refresh_token_events import (
    RefreshTokenChainCompromised,
    RefreshTokenCreated,
    RefreshTokenDeviceMismatchDetected,
    RefreshTokenExpiredUsage,
    RefreshTokenReuseDetected,
    RefreshTokenRevoked,
    RefreshTokenRotated,
)


@dataclass(kw_only=True)
class RefreshToken(AggregateRoot):
    """Long-lived, device-bound, single-use refresh credential.

    Only the SHA-256 hash of the raw token is held; the raw value exists
    solely in the response returned to the client.

    Attributes:
        id: UUID v7 identifier.
        token_hash: Base64 SHA-256 of the raw token (lookup key, unique).
        user_id: Owning user.
        device_id: Opaque device identifier bound at issuance (immutable).
        expires_at: Absolute expiry (UTC).
        status: Lifecycle status.
        revoked_at: When the token left ACTIVE.
        replaced_by_id: Successor created by rotating this token.
        created_at: Set by the database on insert.
        updated_at: Set by the database on every update.
    """

    id: UUID
    token_hash: str
    user_id: UUID
    device_id: str
    expires_at: datetime
    status: RefreshTokenStatus = RefreshTokenStatus.ACTIVE
    revoked_at: datetime | None = None
    replaced_by_id: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def issue(
        cls,
        *,
        token_hash: str,
        user_id: UUID,
        device_id: str,
        expires_at: datetime,
        emit_created: bool = True,
    ) -> RefreshToken:
        """Create a new Active token.

        Args:
            token_hash: Hash of the freshly generated raw token.
            user_id: Owner.
            device_id: Device the token is bound to.
            expires_at: Absolute expiry.
            emit_created: Raise RefreshTokenCreated (login issues do,
                rotation successors do not).

        Raises:
            ValueError: If hash or device is blank, or expiry is naive.
        """
        if not token_hash or not token_hash.strip():
            raise ValueError("token_hash is required")
        if not device_id or not device_id.strip():
            raise ValueError("device_id is required")
        if expires_at.tzinfo is None:
            raise ValueError("expires_at must be timezone-aware")

        token = cls(
            id=uuid7(),
            token_hash=token_hash,
            user_id=user_id,
            device_id=device_id,
            expires_at=expires_at,
        )
        if emit_created:
            token._raise_event(
                RefreshTokenCreated(refresh_token_id=token.id, user_id=user_id)
            )
        return token

    @property
    def is_active(self) -> bool:
        return self.status == RefreshTokenStatus.ACTIVE

    def is_expired(self, now: datetime) -> bool:
        """Expired once ``now`` reaches ``expires_at`` (inclusive)."""
        return now >= self.expires_at

    def is_usable(self, now: datetime) -> bool:
        """Active and not yet expired."""
        return self.is_active and not self.is_expired(now)

    def rotate(
        self,
        *,
        new_token_hash: str,
        new_expires_at: datetime,
        now: datetime,
    ) -> RefreshToken:
        """Retire this token and return its Active successor.

        The successor keeps user and device. This token becomes ROTATED with
        ``revoked_at=now`` and ``replaced_by_id`` pointing at the successor.

        Raises:
            InvalidTokenTransitionError: If this token is not ACTIVE or was
                already rotated.
        """
        if not self.is_active or self.replaced_by_id is not None:
            raise InvalidTokenTransitionError(self.status, "rotate")

        successor = RefreshToken.issue(
            token_hash=new_token_hash,
            user_id=self.user_id,
            device_id=self.device_id,
            expires_at=new_expires_at,
            emit_created=False,
        )
        self.status = RefreshTokenStatus.ROTATED
        self.revoked_at = now
        self.replaced_by_id = successor.id
        self._raise_event(
            RefreshTokenRotated(
                old_refresh_token_id=self.id,
                new_refresh_token_id=successor.id,
                user_id=self.user_id,
                device_id=self.device_id,
                occurred_at=now,
            )
        )
        return successor

    def mark_expired_usage(self, now: datetime) -> None:
        """Record a refresh attempt that arrived after expiry.

        Raises:
            InvalidTokenTransitionError: If the token is not ACTIVE.
        """
        if not self.is_active:
            raise InvalidTokenTransitionError(self.status, "expire")
        self.status = RefreshTokenStatus.EXPIRED
        self.revoked_at = now
        self._raise_event(
            RefreshTokenExpiredUsage(
                refresh_token_id=self.id,
                user_id=self.user_id,
                expires_at=self.expires_at,
                attempted_at=now,
                occurred_at=now,
            )
        )

    def mark_device_mismatch(self, now: datetime, actual_device_id: str) -> None:
        """Revoke the token because another device presented it.

        Raises:
            InvalidTokenTransitionError: If the token is not ACTIVE.
        """
        if not self.is_active:
            raise InvalidTokenTransitionError(self.status, "revoke")
        self._raise_event(
            RefreshTokenDeviceMismatchDetected(
                refresh_token_id=self.id,
                user_id=self.user_id,
                expected_device_id=self.device_id,
                actual_device_id=actual_device_id,
                occurred_at=now,
            )
        )
        self.revoke(now, RevocationReason.DEVICE_MISMATCH)

    def revoke(self, now: datetime, reason: RevocationReason) -> None:
        """Move an Active token to REVOKED.

        Raises:
            InvalidTokenTransitionError: If the token is not ACTIVE.
        """
        if not self.is_active:
            raise InvalidTokenTransitionError(self.status, "revoke")
        self.status = RefreshTokenStatus.REVOKED
        self.revoked_at = now
        self._raise_event(
            RefreshTokenRevoked(
                refresh_token_id=self.id,
                user_id=self.user_id,
                reason=reason.value,
                occurred_at=now,
            )
        )

    def mark_reused(self, now: datetime, *, chain_affected: bool) -> None:
        """Flag a replayed token.

        ACTIVE, ROTATED and REVOKED tokens become REUSED. EXPIRED and REUSED
        are terminal and keep their status. In every case the first
        ``revoked_at`` is preserved and RefreshTokenReuseDetected is raised,
        followed by RefreshTokenChainCompromised when ``chain_affected``.
        """
        previous_status = self.status
        if previous_status.can_become_reused:
            self.status = RefreshTokenStatus.REUSED
        if self.revoked_at is None:
            self.revoked_at = now

        self._raise_event(
            RefreshTokenReuseDetected(
                refresh_token_id=self.id,
                user_id=self.user_id,
                device_id=self.device_id,
                previous_status=previous_status,
                occurred_at=now,
            )
        )
        if chain_affected:
            self._raise_event(
                RefreshTokenChainCompromised(user_id=self.user_id, occurred_at=now)
            )
