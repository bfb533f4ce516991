"""RoleRepository protocol (port) for domain layer.

Roles are read-only reference data seeded by migration.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.role import Role


class RoleRepository(Protocol):
    """Protocol for role lookups.

    Implementations:
        - RoleRepository: src/infrastructure/persistence/repositories/
    """

    async def get_by_id(self, role_id: int) -> Role | None: ...

    async def get_by_ids(self, role_ids: set[int]) -> list[Role]:
        """Return the roles that exist among ``role_ids`` (missing ones skipped)."""
        ...

    async def list_all(self) -> list[Role]:
        """All roles ordered by ID."""
        ...

    async def get_permissions_for_user(self, user_id: UUID) -> frozenset[str]:
        """Distinct permission codes across every role assigned to the user."""
        ...
