"""In-memory adapter implementing CacheProtocol.

Single-process cache used when ``cache_backend`` is ``memory`` (development
and tests). Expiry is tracked against ``time.monotonic`` and applied lazily
on read. An asyncio lock keeps read-modify-write sequences consistent.
"""

import asyncio
import json
import time
from collections.abc import Callable
from typing import Any

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


class InMemoryCacheAdapter:
    """Dictionary-backed cache with per-key TTL.

    Args:
        time_source: Monotonic seconds source (injectable for tests).
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[str, tuple[str, float | None]] = {}
        self._now = time_source
        self._lock = asyncio.Lock()

    def _is_live(self, expires_at: float | None) -> bool:
        return expires_at is None or self._now() < expires_at

    async def get(self, key: str) -> Result[str | None, CacheError]:
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return Success(value=None)
            value, expires_at = entry
            if not self._is_live(expires_at):
                del self._entries[key]
                return Success(value=None)
            return Success(value=value)

    async def get_json(self, key: str) -> Result[Any | None, CacheError]:
        result = await self.get(key)
        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                try:
                    return Success(value=json.loads(raw))
                except json.JSONDecodeError as e:
                    return Failure(
                        error=CacheError(
                            code=ErrorCode.CACHE_UNAVAILABLE,
                            infrastructure_code=InfrastructureErrorCode.CACHE_DECODE_ERROR,
                            message=f"Failed to parse JSON for key '{key}'",
                            details={"key": key, "error": str(e)},
                        )
                    )
            case Failure(error=err):
                return Failure(error=err)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        expires_at = self._now() + ttl if ttl is not None else None
        async with self._lock:
            self._entries[key] = (value, expires_at)
        return Success(value=None)

    async def set_json(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        return await self.set(key, json.dumps(value), ttl=ttl)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        async with self._lock:
            entry = self._entries.pop(key, None)
        return Success(value=entry is not None and self._is_live(entry[1]))

    async def ping(self) -> Result[bool, CacheError]:
        return Success(value=True)
