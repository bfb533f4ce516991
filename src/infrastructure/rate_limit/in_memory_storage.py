"""In-process token bucket storage (single instance: development, tests)."""

import asyncio
import time
from collections.abc import Callable

from src.core.result import Result, Success
from src.domain.value_objects.rate_limit_rule import RateLimitRule
from src.infrastructure.errors import CacheError
from src.infrastructure.rate_limit.token_bucket import BucketState, take_tokens


class InMemoryTokenBucketStorage:
    """Dictionary of buckets guarded by one asyncio lock.

    Buckets idle for longer than the rule's TTL are dropped on the next
    take for the same key, which resets them to full as Redis expiry would.

    Args:
        time_source: Monotonic seconds source (injectable for tests).
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._buckets: dict[str, BucketState] = {}
        self._now = time_source
        self._lock = asyncio.Lock()

    async def take(
        self, *, key: str, rule: RateLimitRule
    ) -> Result[tuple[bool, float, int], CacheError]:
        async with self._lock:
            now = self._now()
            state = self._buckets.get(key)
            if state is not None and now - state.updated_at > rule.ttl_seconds:
                state = None

            outcome = take_tokens(state, rule, now)
            self._buckets[key] = outcome.state

        return Success(value=(outcome.allowed, outcome.retry_after, outcome.remaining))
