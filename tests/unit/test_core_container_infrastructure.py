"""Unit tests for the dependency container.

Tests cover:
- get_logger() renderer selection per environment
- get_cache() backend selection (memory vs redis)
- get_event_bus() subscriptions for every refresh token lifecycle event
- get_expired_token_sweeper() disabled when the interval is 0
- get_rate_limiter() storage selection and the RATE_LIMIT_ENABLED switch
- Singleton behavior of app-scoped factories

Note:
    Factories import their adapters inside the function body, so adapters
    are patched at their own module, settings at the container module.
"""

from unittest.mock import MagicMock, patch

import pytest

from src.core.container import (
    get_cache,
    get_cache_keys,
    get_clock,
    get_database,
    get_event_bus,
    get_expired_token_sweeper,
    get_logger,
    get_password_service,
    get_permission_service,
    get_refresh_token_generator,
    get_rate_limiter,
    get_token_service,
    get_uow_factory,
)
from src.core.enums import Environment
from src.domain.events import (
    RefreshTokenChainCompromised,
    RefreshTokenCreated,
    RefreshTokenDeviceMismatchDetected,
    RefreshTokenExpiredUsage,
    RefreshTokenReuseDetected,
    RefreshTokenRevoked,
    RefreshTokenRotated,
    UserRolesChanged,
)
from src.infrastructure.cache.in_memory_adapter import InMemoryCacheAdapter
from src.infrastructure.rate_limit import (
    InMemoryTokenBucketStorage,
    RedisTokenBucketStorage,
)

CACHED_FACTORIES = (
    get_cache,
    get_cache_keys,
    get_clock,
    get_database,
    get_event_bus,
    get_expired_token_sweeper,
    get_logger,
    get_password_service,
    get_permission_service,
    get_refresh_token_generator,
    get_rate_limiter,
    get_token_service,
    get_uow_factory,
)


@pytest.fixture(autouse=True)
def clear_container_caches():
    for factory in CACHED_FACTORIES:
        factory.cache_clear()
    yield
    for factory in CACHED_FACTORIES:
        factory.cache_clear()


def make_settings(**overrides) -> MagicMock:
    settings = MagicMock()
    settings.environment = Environment.TESTING
    settings.log_level = "INFO"
    settings.cache_backend = "memory"
    settings.cache_key_prefix = "tokenwarden"
    settings.redis_url = "redis://localhost:6379/0"
    settings.permissions_cache_ttl_seconds = 1800
    settings.expired_token_sweep_interval_seconds = 3600
    settings.api_v1_prefix = "/api/v1"
    settings.rate_limit_enabled = True
    settings.rate_limit_login_per_minute = 5
    settings.rate_limit_refresh_per_minute = 10
    settings.rate_limit_register_per_minute = 3
    for name, value in overrides.items():
        setattr(settings, name, value)
    return settings


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() renderer selection."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_json_everywhere_but_development(self, environment, use_json):
        settings = make_settings(environment=environment, log_level="DEBUG")
        with (
            patch("src.core.container.infrastructure.get_settings", return_value=settings),
            patch("src.infrastructure.logging.console_adapter.ConsoleAdapter") as adapter,
        ):
            logger = get_logger()

        adapter.assert_called_once_with(use_json=use_json, level="DEBUG")
        assert logger is adapter.return_value

    def test_logger_is_singleton(self):
        with patch("src.infrastructure.logging.console_adapter.ConsoleAdapter"):
            assert get_logger() is get_logger()


@pytest.mark.unit
class TestGetCache:
    """Test get_cache() backend selection."""

    def test_memory_backend(self):
        settings = make_settings(cache_backend="memory")
        with patch("src.core.container.infrastructure.get_settings", return_value=settings):
            cache = get_cache()

        assert isinstance(cache, InMemoryCacheAdapter)

    def test_redis_backend(self):
        settings = make_settings(cache_backend="redis", redis_url="redis://cache:6379/1")
        with (
            patch("src.core.container.infrastructure.get_settings", return_value=settings),
            patch("redis.asyncio.Redis.from_url") as from_url,
            patch("src.infrastructure.cache.redis_adapter.RedisAdapter") as adapter,
        ):
            cache = get_cache()

        from_url.assert_called_once()
        assert from_url.call_args.args == ("redis://cache:6379/1",)
        adapter.assert_called_once_with(redis_client=from_url.return_value)
        assert cache is adapter.return_value

    def test_cache_is_singleton(self):
        settings = make_settings()
        with patch("src.core.container.infrastructure.get_settings", return_value=settings):
            assert get_cache() is get_cache()

    def test_cache_keys_use_configured_prefix(self):
        settings = make_settings(cache_key_prefix="tw-test")
        with patch("src.core.container.infrastructure.get_settings", return_value=settings):
            keys = get_cache_keys()

        assert keys.prefix == "tw-test"


@pytest.mark.unit
class TestGetEventBus:
    """Test get_event_bus() wiring."""

    @pytest.fixture
    def event_bus(self):
        with patch("src.core.container.infrastructure.get_database"):
            yield get_event_bus()

    @pytest.mark.parametrize(
        "event_type",
        [
            RefreshTokenRotated,
            RefreshTokenRevoked,
            RefreshTokenExpiredUsage,
            RefreshTokenDeviceMismatchDetected,
            RefreshTokenReuseDetected,
            RefreshTokenChainCompromised,
        ],
    )
    def test_lifecycle_events_are_logged(self, event_bus, event_type):
        assert event_bus.handler_count(event_type) == 1

    def test_created_event_is_logged_and_triggers_cleanup(self, event_bus):
        assert event_bus.handler_count(RefreshTokenCreated) == 2

    def test_roles_changed_invalidates_permission_cache(self, event_bus):
        assert event_bus.handler_count(UserRolesChanged) == 1

    def test_event_bus_is_singleton(self, event_bus):
        assert get_event_bus() is event_bus


@pytest.mark.unit
class TestGetExpiredTokenSweeper:
    """Test get_expired_token_sweeper()."""

    def test_disabled_when_interval_is_zero(self):
        settings = make_settings(expired_token_sweep_interval_seconds=0)
        with patch("src.core.container.jobs.get_settings", return_value=settings):
            assert get_expired_token_sweeper() is None

    def test_built_with_configured_interval(self):
        settings = make_settings(expired_token_sweep_interval_seconds=120)
        with (
            patch("src.core.container.jobs.get_settings", return_value=settings),
            patch("src.core.container.infrastructure.get_database"),
        ):
            sweeper = get_expired_token_sweeper()

        assert sweeper is not None
        assert sweeper._interval_seconds == 120


@pytest.mark.unit
class TestGetRateLimiter:
    """Test get_rate_limiter() wiring."""

    def test_memory_backend_uses_in_process_buckets(self):
        settings = make_settings(cache_backend="memory")
        with patch("src.core.container.infrastructure.get_settings", return_value=settings):
            limiter = get_rate_limiter()

        assert isinstance(limiter._storage, InMemoryTokenBucketStorage)
        assert limiter._rules["POST /api/v1/auth/login"].max_tokens == 5
        assert limiter._rules["POST /api/v1/auth/refresh-token"].max_tokens == 10
        assert limiter._rules["POST /api/v1/users"].max_tokens == 3

    def test_redis_backend_uses_shared_buckets(self):
        settings = make_settings(cache_backend="redis", redis_url="redis://cache:6379/1")
        with (
            patch("src.core.container.infrastructure.get_settings", return_value=settings),
            patch("redis.asyncio.Redis.from_url") as from_url,
        ):
            limiter = get_rate_limiter()

        assert from_url.call_args.args == ("redis://cache:6379/1",)
        assert isinstance(limiter._storage, RedisTokenBucketStorage)
        from_url.return_value.register_script.assert_called_once()

    @pytest.mark.asyncio
    async def test_disabled_limiter_allows_everything(self):
        settings = make_settings(rate_limit_enabled=False)
        with patch("src.core.container.infrastructure.get_settings", return_value=settings):
            limiter = get_rate_limiter()

        assert limiter._rules == {}
        decision = await limiter.is_allowed(
            endpoint="POST /api/v1/auth/login", identifier="10.0.0.1"
        )
        assert decision.allowed is True
