"""Database models for persistence layer.

SQLAlchemy models mapping to tables. Infrastructure only: the domain layer
never imports these; repositories map them to domain entities.

Models Organization:
    - user.py: users
    - role.py: roles, role_permissions, user_roles
    - refresh_token.py: refresh_tokens
"""

from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.models.role import Role, RolePermission, user_roles
from src.infrastructure.persistence.models.user import User

__all__ = [
    "RefreshToken",
    "Role",
    "RolePermission",
    "User",
    "user_roles",
]
