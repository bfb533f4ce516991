"""User and role queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetUserRoles:
    """Roles currently assigned to a user.

    Attributes:
        user_id: User to inspect.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListRoles:
    """All roles defined in the system."""

    pass
