"""Rate limiting infrastructure package.

- TokenBucketAdapter: RateLimitProtocol implementation
- RedisTokenBucketStorage: shared buckets (atomic Lua script)
- InMemoryTokenBucketStorage: single-process buckets (development, tests)
- build_rate_limit_rules: endpoint -> rule mapping

Use src.core.container.get_rate_limiter() for dependency injection.
"""

from src.infrastructure.rate_limit.in_memory_storage import InMemoryTokenBucketStorage
from src.infrastructure.rate_limit.redis_storage import RedisTokenBucketStorage
from src.infrastructure.rate_limit.rules import build_rate_limit_rules
from src.infrastructure.rate_limit.token_bucket_adapter import TokenBucketAdapter

__all__ = [
    "InMemoryTokenBucketStorage",
    "RedisTokenBucketStorage",
    "TokenBucketAdapter",
    "build_rate_limit_rules",
]
