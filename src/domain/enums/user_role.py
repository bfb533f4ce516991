"""Seeded system roles.

Roles are reference data created by the database seeder, never through the
API. Their integer IDs are stable and referenced by role assignment requests.

Usage:
    from src.domain.enums import SystemRole

    new_user.set_roles([member_role], actor=RoleChangeActor.SYSTEM)
    assert member_role.id == SystemRole.MEMBER
"""

from enum import IntEnum


class SystemRole(IntEnum):
    """Roles present in every deployment.

    Permissions by Role:
        MEMBER:
            - users:read

        ADMINISTRATOR:
            - users:read
            - users:roles:read, users:roles:write
            - roles:read
    """

    MEMBER = 1
    ADMINISTRATOR = 2

    @property
    def display_name(self) -> str:
        """Role name as stored in the roles table."""
        return self.name.capitalize()
