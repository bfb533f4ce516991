"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Maps between domain User entities (with roles) and the users table plus the
user_roles association.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.role import Role
from src.domain.entities.user import User
from src.infrastructure.persistence.models.role import Role as RoleModel
from src.infrastructure.persistence.models.user import User as UserModel


def _role_to_domain(model: RoleModel) -> Role:
    return Role(
        id=model.id,
        name=model.name,
        permissions=frozenset(p.permission for p in model.permissions),
    )


def _to_domain(model: UserModel) -> User:
    """Convert database model to domain entity."""
    return User(
        id=model.id,
        email=model.email,
        username=model.username,
        password_hash=model.password_hash,
        roles=[_role_to_domain(role) for role in model.roles],
        is_deleted=model.is_deleted,
        deleted_at=model.deleted_at,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class UserRepository:
    """SQLAlchemy implementation of the UserRepository protocol.

    Attributes:
        session: Shared async session of the unit of work.
        seen: Aggregates loaded or staged through this repository.

    Example:
        >>> repo = UserRepository(session)
        >>> user = await repo.get_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.seen: dict[UUID, User] = {}

    def _track(self, user: User) -> User:
        self.seen[user.id] = user
        return user

    async def _load_role_models(self, role_ids: frozenset[int]) -> list[RoleModel]:
        if not role_ids:
            return []
        stmt = select(RoleModel).where(RoleModel.id.in_(role_ids)).order_by(RoleModel.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, user_id: UUID) -> User | None:
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .where(UserModel.is_deleted.is_(False))
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._track(_to_domain(model))

    async def get_by_email(self, email: str) -> User | None:
        """Find a non-deleted user by email (case-insensitive)."""
        stmt = (
            select(UserModel)
            .where(func.lower(UserModel.email) == email.lower())
            .where(UserModel.is_deleted.is_(False))
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._track(_to_domain(model))

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add(self, user: User) -> None:
        model = UserModel(
            id=user.id,
            email=user.email,
            username=user.username,
            password_hash=user.password_hash,
            is_deleted=user.is_deleted,
            deleted_at=user.deleted_at,
            roles=await self._load_role_models(user.role_ids),
        )
        self.session.add(model)
        self._track(user)

    async def update(self, user: User) -> None:
        """Copy scalar fields and the role set onto the persisted row.

        Raises:
            LookupError: If the user was never persisted.
        """
        model = await self.session.get(UserModel, user.id)
        if model is None:
            raise LookupError(f"user {user.id} does not exist")
        model.email = user.email
        model.username = user.username
        model.password_hash = user.password_hash
        model.is_deleted = user.is_deleted
        model.deleted_at = user.deleted_at
        if {role.id for role in model.roles} != set(user.role_ids):
            model.roles = await self._load_role_models(user.role_ids)
        self._track(user)
