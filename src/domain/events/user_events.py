"""User aggregate events."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums.role_change_actor import RoleChangeActor
from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class UserCreated(DomainEvent):
    """A user account was registered.

    Attributes:
        user_id: ID of the new user.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class UserRolesChanged(DomainEvent):
    """The full role set of a user was replaced with a different one.

    Triggers:
    - PermissionCacheInvalidationHandler: drop the cached permission set

    Attributes:
        user_id: User whose roles changed.
        old_role_ids: Role IDs before the change.
        new_role_ids: Role IDs after the change.
        actor: Who requested the change.
    """

    user_id: UUID
    old_role_ids: frozenset[int]
    new_role_ids: frozenset[int]
    actor: RoleChangeActor
