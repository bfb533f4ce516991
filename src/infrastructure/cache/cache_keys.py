"""Cache key construction utilities.

All keys follow the pattern: {prefix}:{domain}:{id}

Usage:
    keys = CacheKeys(prefix=settings.cache_key_prefix)
    keys.user_permissions(user_id)  # "tokenwarden:permissions:{user_id}"
    keys.rate_limit_bucket("POST /api/v1/auth/login", "10.0.0.1")
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CacheKeys:
    """Centralized cache key construction.

    Attributes:
        prefix: Cache key prefix (typically "tokenwarden").
    """

    prefix: str

    def user_permissions(self, user_id: UUID) -> str:
        """Resolved permission codes of a user.

        Pattern: {prefix}:permissions:{user_id}
        """
        return f"{self.prefix}:permissions:{user_id}"

    def rate_limit_bucket(self, endpoint: str, identifier: str) -> str:
        """Token bucket of one client on one endpoint.

        Pattern: {prefix}:rate_limit:{endpoint}:{identifier}
        """
        return f"{self.prefix}:rate_limit:{endpoint}:{identifier}"
