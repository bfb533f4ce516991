"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email: unique case-insensitively (functional unique index on lower(email))
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel
from src.infrastructure.persistence.models.role import Role, user_roles


class User(BaseMutableModel):
    """User model for authentication and role assignment.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        email: Normalized email address
        username: Display username
        password_hash: Bcrypt hash
        is_deleted / deleted_at: Soft delete
        roles: Assigned roles (many-to-many via user_roles, loaded eagerly)

    Indexes:
        - uq_users_email_lower: unique on lower(email)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(256),
        nullable=False,
        comment="User email address (normalized)",
    )
    username: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Display username",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )
    is_deleted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="false",
        comment="Soft delete flag (deleted users cannot authenticate)",
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    roles: Mapped[list[Role]] = relationship(
        secondary=user_roles,
        lazy="selectin",
        order_by=Role.id,
    )

    __table_args__ = (
        Index("uq_users_email_lower", func.lower(email), unique=True),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
