"""Event bus dependency factory.

Application-scoped singleton for post-commit domain event dispatch. All
subscriptions are wired here, manually, at first use.

Subscriptions:
    Security logging (every refresh token lifecycle event)
    RefreshTokenCreated -> RefreshTokenCleanupHandler
    UserRolesChanged -> PermissionCacheInvalidationHandler
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Only the in-memory bus exists. Handlers run in-process after commit;
    a failing handler is logged and never affects the others or the caller.

    Returns:
        Event bus implementing EventBusProtocol.

    Usage:
        # Unit of work (after commit)
        await event_bus.publish(RefreshTokenRotated(...))
    """
    from src.application.event_handlers import (
        PermissionCacheInvalidationHandler,
        RefreshTokenCleanupHandler,
    )
    from src.core.container.authorization import get_permission_service
    from src.core.container.infrastructure import (
        get_clock,
        get_logger,
        get_uow_factory,
    )
    from src.domain.events import (
        RefreshTokenChainCompromised,
        RefreshTokenCreated,
        RefreshTokenDeviceMismatchDetected,
        RefreshTokenExpiredUsage,
        RefreshTokenReuseDetected,
        RefreshTokenRevoked,
        RefreshTokenRotated,
        UserRolesChanged,
    )
    from src.infrastructure.events.handlers.security_logging_handler import (
        SecurityLoggingHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)

    # Security audit trail
    security_handler = SecurityLoggingHandler(logger=logger)
    event_bus.subscribe(
        RefreshTokenCreated, security_handler.handle_refresh_token_created
    )
    event_bus.subscribe(
        RefreshTokenRotated, security_handler.handle_refresh_token_rotated
    )
    event_bus.subscribe(
        RefreshTokenRevoked, security_handler.handle_refresh_token_revoked
    )
    event_bus.subscribe(RefreshTokenExpiredUsage, security_handler.handle_expired_usage)
    event_bus.subscribe(
        RefreshTokenDeviceMismatchDetected, security_handler.handle_device_mismatch
    )
    event_bus.subscribe(
        RefreshTokenReuseDetected, security_handler.handle_reuse_detected
    )
    event_bus.subscribe(
        RefreshTokenChainCompromised, security_handler.handle_chain_compromised
    )

    # Housekeeping: expired tokens of a user are dropped on each login
    cleanup_handler = RefreshTokenCleanupHandler(
        uow_factory=get_uow_factory(),
        clock=get_clock(),
        logger=logger,
    )
    event_bus.subscribe(
        RefreshTokenCreated, cleanup_handler.handle_refresh_token_created
    )

    invalidation_handler = PermissionCacheInvalidationHandler(
        authorization=get_permission_service(),
        logger=logger,
    )
    event_bus.subscribe(
        UserRolesChanged, invalidation_handler.handle_user_roles_changed
    )

    return event_bus
