"""Base domain event class.

Domain events record facts that already happened inside an aggregate
(a refresh token was rotated, a user's roles changed). Aggregates collect
them while a command runs; the unit of work publishes them only after the
surrounding transaction has committed.

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class RefreshTokenCreated(DomainEvent):
    ...     refresh_token_id: UUID
    ...     user_id: UUID
    >>>
    >>> event = RefreshTokenCreated(refresh_token_id=token.id, user_id=user.id)
    >>> event.event_id  # auto-generated UUID v7
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (RefreshTokenRotated, NOT RotateRefreshToken)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True

    Attributes:
        event_id: Unique identifier for this event instance (UUID v7, time
            ordered). Used for log correlation and deduplication.
        occurred_at: When the fact happened (UTC). Aggregates pass the
            injected clock's time so tests can pin it.
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
