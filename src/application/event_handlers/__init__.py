"""Application event handlers.

These handlers react to domain events after the originating transaction
committed. They are app-scoped singletons wired manually in the container
(see src/core/container/events.py).
"""

from src.application.event_handlers.permission_cache_invalidation_handler import (
    PermissionCacheInvalidationHandler,
)
from src.application.event_handlers.refresh_token_cleanup_handler import (
    RefreshTokenCleanupHandler,
)

__all__ = ["PermissionCacheInvalidationHandler", "RefreshTokenCleanupHandler"]
