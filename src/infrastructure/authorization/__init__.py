"""Authorization infrastructure: permission resolution and caching."""

from src.infrastructure.authorization.permission_service import PermissionService

__all__ = ["PermissionService"]
