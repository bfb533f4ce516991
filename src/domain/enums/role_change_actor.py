"""Who requested a role change.

The actor is recorded on UserRolesChanged. Deciding which callers may submit
which actor value belongs to the authorization layer in front of the command.
"""

from enum import Enum


class RoleChangeActor(str, Enum):
    """Origin of a role change request."""

    SELF = "self"
    ADMINISTRATOR = "administrator"
    SYSTEM = "system"

    @classmethod
    def values(cls) -> list[str]:
        """All actor values as strings (for error messages)."""
        return [actor.value for actor in cls]
