"""Redis-backed token bucket storage using an atomic Lua script.

The bucket lives in two keys, ``{key}:tokens`` and ``{key}:time``, both
written with the rule's TTL so idle buckets disappear on their own. The
script is registered once and run with EVALSHA (redis-py reloads it after a
server restart).
"""

import time
from collections.abc import Callable

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.value_objects.rate_limit_rule import RateLimitRule
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError

# KEYS[1] bucket key; ARGV: max_tokens, seconds_per_token, cost, now, ttl.
# retry_after is returned as a string: Lua numbers become integer replies.
TOKEN_BUCKET_SCRIPT = """
local tokens_key = KEYS[1] .. ":tokens"
local time_key = KEYS[1] .. ":time"
local max_tokens = tonumber(ARGV[1])
local seconds_per_token = tonumber(ARGV[2])
local cost = tonumber(ARGV[3])
local now = tonumber(ARGV[4])
local ttl = tonumber(ARGV[5])

local tokens = tonumber(redis.call("GET", tokens_key))
local updated_at = tonumber(redis.call("GET", time_key))
if tokens == nil or updated_at == nil then
    tokens = max_tokens
else
    local elapsed = math.max(0, now - updated_at)
    tokens = math.min(max_tokens, tokens + elapsed / seconds_per_token)
end

local allowed = 0
local retry_after = 0
if tokens >= cost then
    tokens = tokens - cost
    allowed = 1
else
    retry_after = (cost - tokens) * seconds_per_token
end

redis.call("SETEX", tokens_key, ttl, tostring(tokens))
redis.call("SETEX", time_key, ttl, tostring(now))
return {allowed, tostring(retry_after), math.floor(tokens)}
"""


class RedisTokenBucketStorage:
    """Token buckets shared by every instance through Redis.

    Args:
        redis_client: Async Redis client (redis.asyncio).
        time_source: Wall-clock seconds; all instances must agree on it.
    """

    def __init__(
        self,
        redis_client: Redis,
        time_source: Callable[[], float] = time.time,
    ) -> None:
        self._script = redis_client.register_script(TOKEN_BUCKET_SCRIPT)
        self._now = time_source

    async def take(
        self, *, key: str, rule: RateLimitRule
    ) -> Result[tuple[bool, float, int], CacheError]:
        try:
            allowed, retry_after, remaining = await self._script(
                keys=[key],
                args=[
                    rule.max_tokens,
                    rule.seconds_per_token,
                    rule.cost,
                    self._now(),
                    rule.ttl_seconds,
                ],
            )
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_UNAVAILABLE,
                    infrastructure_code=InfrastructureErrorCode.RATE_LIMIT_STORAGE_ERROR,
                    message=f"Failed to update rate limit bucket '{key}'",
                    details={"key": key, "error": str(e)},
                )
            )

        if isinstance(retry_after, bytes):
            retry_after = retry_after.decode("utf-8")
        return Success(value=(bool(allowed), float(retry_after), int(remaining)))
