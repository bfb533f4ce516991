"""Role reference data models.

Tables:
    - roles: seeded roles with stable integer IDs
    - role_permissions: permission codes granted by each role
    - user_roles: user <-> role association

Roles and their permissions are written only by the seeder; the API reads
them.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import Base

user_roles = Table(
    "user_roles",
    Base.metadata,
    Column(
        "user_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="RESTRICT"),
        primary_key=True,
        index=True,
    ),
)


class Role(Base):
    """Role model.

    Fields:
        id: Stable integer ID (1 = Member, 2 = Administrator)
        name: Unique display name
        permissions: Permission rows (loaded eagerly with selectin)
    """

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        comment="Role display name",
    )

    permissions: Mapped[list["RolePermission"]] = relationship(
        back_populates="role",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name})>"


class RolePermission(Base):
    """Permission code granted by a role (composite primary key)."""

    __tablename__ = "role_permissions"

    role_id: Mapped[int] = mapped_column(
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    permission: Mapped[str] = mapped_column(
        String(128),
        primary_key=True,
        comment="Permission code, e.g. users:roles:write",
    )

    role: Mapped[Role] = relationship(back_populates="permissions")
