"""Permission codes checked by protected routes.

Permissions are ``resource:action`` strings owned by roles. A user's
effective permissions are the union over all of their roles, resolved per
request by the PermissionService (never baked into the access token).

Usage:
    @router.put("/users/{user_id}/roles")
    async def set_user_roles(
        _: Principal = Depends(require_permission(Permission.USERS_ROLES_WRITE)),
    ):
        ...
"""

from enum import Enum


class Permission(str, Enum):
    """Permission codes known to the service."""

    USERS_READ = "users:read"
    USERS_ROLES_READ = "users:roles:read"
    USERS_ROLES_WRITE = "users:roles:write"
    ROLES_READ = "roles:read"
