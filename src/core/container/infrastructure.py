"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console/JSON)
- Clock (system UTC time)
- Database (PostgreSQL via SQLAlchemy asyncio)
- Cache (Redis or in-process memory)
- Password hashing (bcrypt)
- Token generation (JWT access tokens, opaque refresh tokens)
- Rate limiting (token buckets in Redis or memory)
- Unit of work factory (one transaction per command)

Settings are read here, once, and handed to constructors as plain values.
Services never read configuration at call time.
"""

from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.enums import Environment

if TYPE_CHECKING:
    from src.domain.protocols import (
        CacheProtocol,
        ClockProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        RateLimitProtocol,
        RefreshTokenGeneratorProtocol,
        TokenGenerationProtocol,
        UnitOfWorkFactory,
    )
    from src.infrastructure.cache.cache_keys import CacheKeys
    from src.infrastructure.persistence.database import Database


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Human-readable console output in development, JSON lines everywhere else
    (log shippers parse one object per line).

    Returns:
        Logger implementing LoggerProtocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.environment != Environment.DEVELOPMENT,
        level=settings.log_level,
    )


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Get the system clock singleton (app-scoped)."""
    from src.infrastructure.clock.system_clock import SystemClock

    return SystemClock()


@lru_cache()
def get_database() -> "Database":
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool. Sessions are created per
    unit of work (see get_uow_factory).
    """
    from src.infrastructure.persistence.database import Database

    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Container owns factory logic - decides which adapter based on CACHE_BACKEND:
        - 'memory': InMemoryCacheAdapter (single process: dev, tests)
        - 'redis': RedisAdapter (shared across instances, required in production)

    Returns:
        Cache client implementing CacheProtocol.
    """
    settings = get_settings()

    if settings.cache_backend == "redis":
        from redis.asyncio import Redis

        from src.infrastructure.cache.redis_adapter import RedisAdapter

        redis_client = Redis.from_url(
            settings.redis_url,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        return RedisAdapter(redis_client=redis_client)

    from src.infrastructure.cache.in_memory_adapter import InMemoryCacheAdapter

    return InMemoryCacheAdapter()


@lru_cache()
def get_cache_keys() -> "CacheKeys":
    """Get cache key builder singleton (app-scoped)."""
    from src.infrastructure.cache.cache_keys import CacheKeys

    return CacheKeys(prefix=get_settings().cache_key_prefix)


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns:
        BcryptPasswordService configured with BCRYPT_ROUNDS.
    """
    from src.infrastructure.security.bcrypt_password_service import (
        BcryptPasswordService,
    )

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT access token service singleton (app-scoped).

    Returns:
        JWTService signing with SECRET_KEY (HS256).
    """
    from src.infrastructure.security.jwt_service import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.secret_key,
        clock=get_clock(),
        expiration_minutes=settings.access_token_expire_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )


@lru_cache()
def get_refresh_token_generator() -> "RefreshTokenGeneratorProtocol":
    """Get opaque refresh token generator singleton (app-scoped)."""
    from src.infrastructure.security.refresh_token_generator import (
        RefreshTokenGenerator,
    )

    return RefreshTokenGenerator(
        ttl=timedelta(days=get_settings().refresh_token_expire_days)
    )


@lru_cache()
def get_uow_factory() -> "UnitOfWorkFactory":
    """Get the unit of work factory (app-scoped).

    Each call of the returned factory opens a fresh AsyncSession and wires
    the repositories and post-commit event dispatch around it.

    Usage:
        async with get_uow_factory()() as uow:
            ...
            await uow.commit()
    """
    from src.core.container.events import get_event_bus
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    database = get_database()

    # Bus resolved per call: its subscribers are built from this factory
    def create_unit_of_work() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(
            session=database.session(), event_bus=get_event_bus()
        )

    return create_unit_of_work


@lru_cache()
def get_rate_limiter() -> "RateLimitProtocol":
    """Get rate limiter singleton (app-scoped).

    Buckets live in Redis when CACHE_BACKEND is 'redis' (shared by every
    instance) and in process memory otherwise. With RATE_LIMIT_ENABLED off
    the adapter has no rules and allows everything.

    Returns:
        TokenBucketAdapter implementing RateLimitProtocol.
    """
    from src.infrastructure.rate_limit import (
        InMemoryTokenBucketStorage,
        RedisTokenBucketStorage,
        TokenBucketAdapter,
        build_rate_limit_rules,
    )

    settings = get_settings()

    storage: InMemoryTokenBucketStorage | RedisTokenBucketStorage
    if settings.cache_backend == "redis":
        from redis.asyncio import Redis

        storage = RedisTokenBucketStorage(
            Redis.from_url(
                settings.redis_url,
                decode_responses=False,
                socket_connect_timeout=5,
                socket_timeout=5,
            )
        )
    else:
        storage = InMemoryTokenBucketStorage()

    rules = (
        build_rate_limit_rules(
            api_prefix=settings.api_v1_prefix,
            login_per_minute=settings.rate_limit_login_per_minute,
            refresh_per_minute=settings.rate_limit_refresh_per_minute,
            register_per_minute=settings.rate_limit_register_per_minute,
        )
        if settings.rate_limit_enabled
        else {}
    )

    return TokenBucketAdapter(
        storage=storage,
        rules=rules,
        cache_keys=get_cache_keys(),
        logger=get_logger(),
    )
