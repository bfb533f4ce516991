"""Fixtures for integration tests against a real PostgreSQL database.

The schema is created from the ORM metadata for every test and dropped
afterwards, so tests never see each other's rows. Tests are skipped when
DATABASE_URL does not point at a reachable server.
"""

import pytest
import pytest_asyncio

from src.core.config import settings
from src.domain.entities.role import Role
from src.domain.enums import Permission, SystemRole
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.seeds import seed_roles
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from tests.utils.fakes import RecordingEventBus


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database with a fresh schema and the system roles seeded."""
    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    if not await db.check_connection():
        await db.close()
        pytest.skip("PostgreSQL is not reachable at DATABASE_URL")

    await db.drop_all()
    await db.create_all()
    async with db.get_session() as session:
        await seed_roles(session)

    yield db

    await db.drop_all()
    await db.close()


@pytest.fixture
def recording_bus() -> RecordingEventBus:
    return RecordingEventBus()


@pytest.fixture
def sql_uow_factory(test_database, recording_bus):
    """Factory opening a SqlAlchemyUnitOfWork on a fresh session."""

    def create() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(
            session=test_database.session(), event_bus=recording_bus
        )

    return create


@pytest.fixture
def member() -> Role:
    return Role(
        id=int(SystemRole.MEMBER),
        name=SystemRole.MEMBER.display_name,
        permissions=frozenset({Permission.USERS_READ.value}),
    )


@pytest.fixture
def administrator() -> Role:
    return Role(
        id=int(SystemRole.ADMINISTRATOR),
        name=SystemRole.ADMINISTRATOR.display_name,
        permissions=frozenset(p.value for p in Permission),
    )
