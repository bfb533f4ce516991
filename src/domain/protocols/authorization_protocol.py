"""Authorization protocol (port) for permission resolution.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides the ADAPTER (PermissionService: role store + cache)
- Application and presentation layers depend on the protocol only

Usage:
    from src.domain.protocols import AuthorizationProtocol

    authz: AuthorizationProtocol = Depends(get_permission_service)
    if not await authz.has_permission(user_id, Permission.ROLES_READ):
        ...
"""

from typing import Protocol
from uuid import UUID


class AuthorizationProtocol(Protocol):
    """Per-request permission resolution with a cached permission set.

    Error Handling:
        Cache failures fall back to the role store (fail-open on the cache,
        never on the decision). Invalidation failures are logged, not raised.
    """

    async def get_user_permissions(self, user_id: UUID) -> frozenset[str]:
        """Distinct permission codes across all roles of the user."""
        ...

    async def has_permission(self, user_id: UUID, permission: str) -> bool:
        """True if the user's permission set contains ``permission``."""
        ...

    async def invalidate_permissions_cache(self, user_id: UUID) -> None:
        """Drop the cached permission set of the user."""
        ...
