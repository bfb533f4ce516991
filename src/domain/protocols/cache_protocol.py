"""Cache protocol for domain layer.

Architecture:
- Protocol-based (structural typing)
- All operations return Result types
- Fail-open strategy: callers treat a Failure like a miss and fall back to
  the store, so a cache outage never breaks authentication
"""

from typing import Any, Protocol

from src.core.errors import DomainError
from src.core.result import Result


class CacheProtocol(Protocol):
    """What the application needs from a key/value cache with TTL.

    Implementations:
        - RedisAdapter: src/infrastructure/cache/redis_adapter.py
        - InMemoryCacheAdapter: src/infrastructure/cache/in_memory_adapter.py
    """

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get a value.

        Returns:
            Success(value), Success(None) on a miss, or Failure(CacheError).
        """
        ...

    async def get_json(self, key: str) -> Result[Any | None, DomainError]:
        """Get and JSON-decode a value (lists and dicts alike)."""
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Set a value, expiring after ``ttl`` seconds (None keeps it forever)."""
        ...

    async def set_json(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """JSON-encode and set a value."""
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete a key.

        Returns:
            Success(True) if the key existed, Success(False) otherwise.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Health check."""
        ...
