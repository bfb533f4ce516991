"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.aggregate_root import AggregateRoot
from src.domain.entities.refresh_token import RefreshToken
from src.domain.entities.role import Role
from src.domain.entities.user import User

__all__ = [
    "AggregateRoot",
    "RefreshToken",
    "Role",
    "User",
]
