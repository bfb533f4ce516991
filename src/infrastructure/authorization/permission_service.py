"""Permission resolution with a read-through cache.

A user's effective permissions are the distinct permission codes across all
of their roles. They are resolved on every authenticated request, so the
result is cached per user:

    key:   {prefix}:permissions:{user_id}
    value: JSON list of permission codes (sorted)
    ttl:   settings.permissions_cache_ttl_seconds

Failure policy:
    - Cache read/write errors fall back to the database (fail-open)
    - Invalidation errors are logged, never retried and never raised; the
      TTL bounds how long a stale set can survive
"""

from uuid import UUID

from src.core.result import Failure, Success
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkFactory
from src.infrastructure.cache.cache_keys import CacheKeys


class PermissionService:
    """Cache-first permission lookup.

    Attributes:
        _uow_factory: Opens a read transaction on a cache miss.
        _cache: Cache adapter.
        _keys: Cache key builder.
        _ttl_seconds: Lifetime of a cached permission set.
        _logger: Structured logger.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        cache: CacheProtocol,
        cache_keys: CacheKeys,
        logger: LoggerProtocol,
        ttl_seconds: int = 1800,
    ) -> None:
        self._uow_factory = uow_factory
        self._cache = cache
        self._keys = cache_keys
        self._logger = logger
        self._ttl_seconds = ttl_seconds

    async def get_user_permissions(self, user_id: UUID) -> frozenset[str]:
        """Return the user's permission codes.

        Flow:
            1. Cache hit -> return it
            2. Miss or cache error -> load from the role repository
            3. Populate the cache with TTL (a write error is only logged)
        """
        key = self._keys.user_permissions(user_id)

        match await self._cache.get_json(key):
            case Success(value=list() as cached):
                self._logger.debug("permissions_cache_hit", user_id=str(user_id))
                return frozenset(str(code) for code in cached)
            case Success(value=_):
                pass
            case Failure(error=error):
                self._logger.warning(
                    "permissions_cache_read_failed",
                    user_id=str(user_id),
                    error_code=error.code.value,
                )

        async with self._uow_factory() as uow:
            permissions = await uow.roles.get_permissions_for_user(user_id)

        set_result = await self._cache.set_json(
            key, sorted(permissions), ttl=self._ttl_seconds
        )
        if isinstance(set_result, Failure):
            self._logger.warning(
                "permissions_cache_write_failed",
                user_id=str(user_id),
                error_code=set_result.error.code.value,
            )
        return permissions

    async def has_permission(self, user_id: UUID, permission: str) -> bool:
        return permission in await self.get_user_permissions(user_id)

    async def invalidate_permissions_cache(self, user_id: UUID) -> None:
        """Drop the cached permission set of a user (best effort)."""
        key = self._keys.user_permissions(user_id)
        match await self._cache.delete(key):
            case Success(value=deleted):
                self._logger.info(
                    "permissions_cache_invalidated",
                    user_id=str(user_id),
                    existed=deleted,
                )
            case Failure(error=error):
                self._logger.error(
                    "permissions_cache_invalidation_failed",
                    user_id=str(user_id),
                    error_code=error.code.value,
                    error_message=error.message,
                )
