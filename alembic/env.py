"""Alembic environment for the async PostgreSQL engine.

The database URL comes from Settings, never from alembic.ini. After an
online upgrade the system roles are seeded in their own transaction; pass
``-x seed=false`` to skip that step.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_engine_from_config,
    async_sessionmaker,
)

from alembic import context
from src.core.config import settings
from src.infrastructure.persistence.base import Base
from src.infrastructure.persistence.models import (  # noqa: F401  (register tables)
    RefreshToken,
    Role,
    RolePermission,
    User,
)
from src.infrastructure.persistence.seeds import seed_roles

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)

target_metadata = Base.metadata


def _seeding_enabled() -> bool:
    """Seed unless disabled with ``-x seed=false`` (or 0/no)."""
    flag = context.get_x_argument(as_dictionary=True).get("seed", "true")
    return flag.strip().lower() not in {"0", "false", "no"}


def _is_upgrade() -> bool:
    cmd_opts = getattr(config, "cmd_opts", None)
    return getattr(cmd_opts, "cmd", None) is not None and (
        getattr(cmd_opts.cmd[0], "__name__", "") == "upgrade"
    )


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def _run_sync_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def _seed(engine: AsyncEngine) -> None:
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await seed_roles(session)
        await session.commit()


async def run_async_migrations() -> None:
    """Apply migrations over an async connection, then seed reference data."""
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_sync_migrations)

        if _is_upgrade() and _seeding_enabled():
            await _seed(engine)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
