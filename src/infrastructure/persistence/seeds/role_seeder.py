"""System role seeder.

Inserts the system roles and the permission codes each grants. Rows that
already exist are left alone (ON CONFLICT DO NOTHING), so the seeder runs
after every ``alembic upgrade`` without side effects.

Roles are reference data: the API assigns them to users but never creates,
renames or deletes them.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.enums import Permission, SystemRole

logger = structlog.get_logger(__name__)

ROLE_PERMISSIONS: dict[SystemRole, tuple[Permission, ...]] = {
    SystemRole.MEMBER: (Permission.USERS_READ,),
    SystemRole.ADMINISTRATOR: (
        Permission.USERS_READ,
        Permission.USERS_ROLES_READ,
        Permission.USERS_ROLES_WRITE,
        Permission.ROLES_READ,
    ),
}

_INSERT_ROLE = text(
    "INSERT INTO roles (id, name) VALUES (:id, :name) ON CONFLICT (id) DO NOTHING"
)
_INSERT_PERMISSION = text(
    "INSERT INTO role_permissions (role_id, permission) "
    "VALUES (:role_id, :permission) ON CONFLICT (role_id, permission) DO NOTHING"
)


async def seed_roles(session: AsyncSession) -> int:
    """Insert missing system roles and role permissions.

    The caller commits.

    Args:
        session: Async database session.

    Returns:
        Number of rows inserted (roles plus permission grants).
    """
    inserted = 0
    for role, permissions in ROLE_PERMISSIONS.items():
        result = await session.execute(
            _INSERT_ROLE, {"id": int(role), "name": role.display_name}
        )
        inserted += result.rowcount or 0
        for permission in permissions:
            result = await session.execute(
                _INSERT_PERMISSION,
                {"role_id": int(role), "permission": permission.value},
            )
            inserted += result.rowcount or 0

    logger.info("roles_seeded", inserted_rows=inserted, roles=len(ROLE_PERMISSIONS))
    return inserted
