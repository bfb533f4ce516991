"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of the repository protocols defined in the domain
layer. They share the session of a unit of work and never commit.
"""

from src.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from src.infrastructure.persistence.repositories.role_repository import RoleRepository
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "RefreshTokenRepository",
    "RoleRepository",
    "UserRepository",
]
