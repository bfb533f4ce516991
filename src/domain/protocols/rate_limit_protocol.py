"""Rate limit protocol (port) for token bucket rate limiting.

Infrastructure provides the adapter (TokenBucketAdapter over Redis or
in-process storage); the presentation layer consumes this port only.

Usage:
    rate_limiter: RateLimitProtocol = Depends(get_rate_limiter)

    decision = await rate_limiter.is_allowed(
        endpoint="POST /api/v1/auth/login",
        identifier="192.168.1.1",
    )
    if not decision.allowed:
        raise HTTPException(429, headers={"Retry-After": ...})
"""

from typing import Protocol

from src.domain.value_objects.rate_limit_rule import RateLimitResult


class RateLimitProtocol(Protocol):
    """Per-endpoint, per-identifier request budget.

    Fail-Open Design:
        ``is_allowed`` never raises and returns ``allowed=True`` when the
        backing store is unavailable. A broken limiter must not lock every
        client out of login.
    """

    async def is_allowed(self, *, endpoint: str, identifier: str) -> RateLimitResult:
        """Consume tokens for one request and report the decision.

        Args:
            endpoint: ``"METHOD /path"`` of the route being called.
            identifier: Who is being limited (client IP address).

        Returns:
            RateLimitResult. Endpoints without a rule are always allowed.
        """
        ...
