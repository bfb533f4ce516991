"""Redis adapter implementing CacheProtocol.

Wraps an async Redis client (redis.asyncio) and maps client exceptions to
CacheError values.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Maps RedisError to CacheError(code=CACHE_UNAVAILABLE)
- Returns Result types for all operations, so callers can fail open
"""

import json
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


def _cache_error(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    **details: Any,
) -> Failure[CacheError]:
    return Failure(
        error=CacheError(
            code=ErrorCode.CACHE_UNAVAILABLE,
            infrastructure_code=infrastructure_code,
            message=message,
            details=details,
        )
    )


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        self._redis = redis_client

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get key '{key}' from cache",
                key=key,
                error=str(e),
            )
        if value is None:
            return Success(value=None)
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def get_json(self, key: str) -> Result[Any | None, CacheError]:
        """Get JSON value from Redis.

        A payload that is not valid JSON is reported as CacheError so the
        caller recomputes instead of trusting it.
        """
        result = await self.get(key)

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                try:
                    return Success(value=json.loads(raw))
                except json.JSONDecodeError as e:
                    return _cache_error(
                        InfrastructureErrorCode.CACHE_DECODE_ERROR,
                        f"Failed to parse JSON for key '{key}'",
                        key=key,
                        error=str(e),
                    )
            case Failure(error=err):
                return Failure(error=err)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis, with SETEX when a TTL is given."""
        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to set key '{key}' in cache",
                key=key,
                ttl=ttl,
                error=str(e),
            )
        return Success(value=None)

    async def set_json(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        return await self.set(key, json.dumps(value), ttl=ttl)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        try:
            deleted_count = await self._redis.delete(key)
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete key '{key}' from cache",
                key=key,
                error=str(e),
            )
        return Success(value=deleted_count > 0)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check)."""
        try:
            await self._redis.ping()  # type: ignore[misc]
        except RedisError as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                "Redis health check failed",
                error=str(e),
            )
        return Success(value=True)
