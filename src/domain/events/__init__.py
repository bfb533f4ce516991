"""Domain events package.

Usage:
    from src.domain.events import DomainEvent, RefreshTokenRotated
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.refresh_token_events import (
    RefreshTokenChainCompromised,
    RefreshTokenCreated,
    RefreshTokenDeviceMismatchDetected,
    RefreshTokenExpiredUsage,
    RefreshTokenReuseDetected,
    RefreshTokenRevoked,
    RefreshTokenRotated,
)
from src.domain.events.user_events import UserCreated, UserRolesChanged

__all__ = [
    "DomainEvent",
    "RefreshTokenChainCompromised",
    "RefreshTokenCreated",
    "RefreshTokenDeviceMismatchDetected",
    "RefreshTokenExpiredUsage",
    "RefreshTokenReuseDetected",
    "RefreshTokenRevoked",
    "RefreshTokenRotated",
    "UserCreated",
    "UserRolesChanged",
]
