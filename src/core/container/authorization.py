"""Authorization dependency factories.

Permission resolution for protected routes. The service is an app-scoped
singleton; the cache behind it is shared by every request.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import (
    get_cache,
    get_cache_keys,
    get_logger,
    get_uow_factory,
)

if TYPE_CHECKING:
    from src.domain.protocols import AuthorizationProtocol


@lru_cache()
def get_permission_service() -> "AuthorizationProtocol":
    """Get permission service singleton (app-scoped).

    Returns:
        PermissionService (role store + permission cache, TTL from
        PERMISSIONS_CACHE_TTL_SECONDS).

    Usage:
        # Presentation Layer (FastAPI Depends)
        authz: AuthorizationProtocol = Depends(get_permission_service)
    """
    from src.infrastructure.authorization.permission_service import (
        PermissionService,
    )

    return PermissionService(
        uow_factory=get_uow_factory(),
        cache=get_cache(),
        cache_keys=get_cache_keys(),
        logger=get_logger(),
        ttl_seconds=get_settings().permissions_cache_ttl_seconds,
    )
