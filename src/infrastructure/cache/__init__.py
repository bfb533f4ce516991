"""Cache infrastructure package.

- RedisAdapter: shared cache for multi-instance deployments
- InMemoryCacheAdapter: single-process cache (development, tests)
- CacheKeys: key construction

Use src.core.container.get_cache() for dependency injection.
"""

from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.in_memory_adapter import InMemoryCacheAdapter
from src.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = [
    "CacheKeys",
    "InMemoryCacheAdapter",
    "RedisAdapter",
]
