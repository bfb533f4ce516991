"""Base model and mixins for all database entities.

This module provides:
- Base: Declarative base owning the shared metadata (used directly by
  reference-data tables with integer keys: roles, role_permissions,
  user_roles)
- BaseModel: Base class for entity tables (UUID id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for mutable entity tables (combines the above)

Domain entities never inherit from these; repositories map between them.

Architecture:
    Base (metadata)
        ├── RoleModel, RolePermissionModel, user_roles
        └── BaseModel (id, created_at)
                └── BaseMutableModel (+ updated_at)
                        ├── UserModel
                        └── RefreshTokenModel
"""

from datetime import datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class Base(DeclarativeBase):
    """Declarative base shared by every table (single metadata)."""

    pass


class BaseModel(Base):
    """Base class for entity tables.

    Provides:
    - id: UUID primary key (UUID v7 default; domain entities usually
      assign it themselves)
    - created_at: Set by the database on INSERT
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Use via BaseMutableModel rather than directly.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable entity tables (id, created_at, updated_at)."""

    __abstract__ = True
