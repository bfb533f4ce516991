"""User domain entity.

Pure business logic, no framework dependencies.

Role Management:
    - roles: Full role set (each role carries its permission codes)
    - set_roles(): Replace the whole set, raising UserRolesChanged when it
      actually differs
    - permissions: Union of the permission codes of all roles
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.aggregate_root import AggregateRoot
from src.domain.entities.role import Role
from src.domain.enums.role_change_actor import RoleChangeActor
from src.domain.events.user_events import UserCreated, UserRolesChanged


@dataclass(kw_only=True)
class User(AggregateRoot):
    """User account with its role assignments.

    Business Rules:
        - A registered user starts with the Member role
        - Role changes replace the full set (no partial add/remove)
        - Soft-deleted users cannot authenticate

    Attributes:
        id: UUID v7 identifier.
        email: Normalized email address (unique).
        username: Display username.
        password_hash: Bcrypt hash (never plaintext).
        roles: Assigned roles.
        is_deleted: Soft-delete flag.
        deleted_at: Soft-delete timestamp.
        created_at: Set by the database on insert.
        updated_at: Set by the database on every update.

    Example:
        >>> user = User.create(
        ...     email="user@example.com",
        ...     username="user_1",
        ...     password_hash="$2b$12$...",
        ...     member_role=member,
        ... )
        >>> user.role_ids
        frozenset({1})
    """

    id: UUID
    email: str
    username: str
    password_hash: str
    roles: list[Role] = field(default_factory=list)
    is_deleted: bool = False
    deleted_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        *,
        email: str,
        username: str,
        password_hash: str,
        member_role: Role,
    ) -> User:
        """Register a new user holding the Member role.

        Raises UserCreated. Role assignment at registration is not a role
        change and raises no UserRolesChanged.
        """
        user = cls(
            id=uuid7(),
            email=email,
            username=username,
            password_hash=password_hash,
            roles=[member_role],
        )
        user._raise_event(UserCreated(user_id=user.id))
        return user

    @property
    def role_ids(self) -> frozenset[int]:
        return frozenset(role.id for role in self.roles)

    @property
    def permissions(self) -> frozenset[str]:
        """Union of permission codes across all roles."""
        codes: set[str] = set()
        for role in self.roles:
            codes.update(role.permissions)
        return frozenset(codes)

    @property
    def can_authenticate(self) -> bool:
        return not self.is_deleted

    def set_roles(self, roles: list[Role], actor: RoleChangeActor) -> bool:
        """Replace the role set.

        Args:
            roles: New full role set (duplicates by ID collapse).
            actor: Who requested the change (recorded on the event).

        Returns:
            True if the set changed, False if it was identical (no event).
        """
        unique: dict[int, Role] = {}
        for role in roles:
            unique.setdefault(role.id, role)

        old_ids = self.role_ids
        new_ids = frozenset(unique)
        if old_ids == new_ids:
            return False

        self.roles = sorted(unique.values(), key=lambda r: r.id)
        self._raise_event(
            UserRolesChanged(
                user_id=self.id,
                old_role_ids=old_ids,
                new_role_ids=new_ids,
                actor=actor,
            )
        )
        return True
