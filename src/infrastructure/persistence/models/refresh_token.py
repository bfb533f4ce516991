"""Refresh token database model.

Security:
    - token_hash: SHA-256 of the raw token (the raw value is never stored)
    - status + revoked_at + replaced_by_id record the rotation chain, so a
      replayed token is recognized instead of looking unknown
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class RefreshToken(BaseMutableModel):
    """Refresh token model.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        user_id: Owner (cascade delete with the user)
        token_hash: Base64 SHA-256 of the raw token (unique lookup key)
        device_id: Device the token is bound to
        status: active, rotated, revoked, reused or expired
        expires_at: Absolute expiry
        revoked_at: When the token left active
        replaced_by_id: Successor issued by rotation

    Indexes:
        - token_hash: unique, backs SELECT ... FOR UPDATE on refresh
        - idx_refresh_tokens_user_status: (user_id, status) for the reuse cascade
        - expires_at: for the expired-token sweep
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who owns this refresh token",
    )
    token_hash: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        unique=True,
        comment="Base64 SHA-256 of the refresh token (never plaintext)",
    )
    device_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Opaque device identifier bound at issuance",
    )
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        comment="Lifecycle status",
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    revoked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
    replaced_by_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        nullable=True,
        default=None,
        comment="Token issued when this one was rotated",
    )

    __table_args__ = (
        Index("idx_refresh_tokens_user_status", "user_id", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<RefreshToken("
            f"id={self.id}, "
            f"user_id={self.user_id}, "
            f"status={self.status}, "
            f"expires_at={self.expires_at}"
            f")>"
        )
