"""Database persistence infrastructure.

- Base / BaseModel / BaseMutableModel: declarative bases
- Database: engine and session factory
- SqlAlchemyUnitOfWork: transaction boundary with post-commit event dispatch
"""

from src.infrastructure.persistence.base import Base, BaseModel, BaseMutableModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "Base",
    "BaseModel",
    "BaseMutableModel",
    "Database",
    "SqlAlchemyUnitOfWork",
]
