"""RoleRepository - SQLAlchemy implementation for role lookups."""

from uuid import UUID

from sqlalchemy import distinct, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.role import Role
from src.infrastructure.persistence.models.role import Role as RoleModel
from src.infrastructure.persistence.models.role import RolePermission, user_roles


def _to_domain(model: RoleModel) -> Role:
    """Convert database model to domain entity."""
    return Role(
        id=model.id,
        name=model.name,
        permissions=frozenset(p.permission for p in model.permissions),
    )


class RoleRepository:
    """SQLAlchemy implementation of the RoleRepository protocol.

    Roles are reference data and never raise domain events, so nothing is
    tracked here.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, role_id: int) -> Role | None:
        model = await self.session.get(RoleModel, role_id)
        return _to_domain(model) if model is not None else None

    async def get_by_ids(self, role_ids: set[int]) -> list[Role]:
        if not role_ids:
            return []
        stmt = select(RoleModel).where(RoleModel.id.in_(role_ids)).order_by(RoleModel.id)
        result = await self.session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def list_all(self) -> list[Role]:
        result = await self.session.execute(select(RoleModel).order_by(RoleModel.id))
        return [_to_domain(model) for model in result.scalars().all()]

    async def get_permissions_for_user(self, user_id: UUID) -> frozenset[str]:
        """Distinct permission codes across the user's roles (one query)."""
        stmt = (
            select(distinct(RolePermission.permission))
            .join(user_roles, user_roles.c.role_id == RolePermission.role_id)
            .where(user_roles.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return frozenset(result.scalars().all())
