"""Rate limit dependency for the credential endpoints.

Applied per route (login, refresh, registration) rather than as global
middleware so the limiter comes from the container through ``Depends`` and
can be overridden in tests. The bucket is keyed by ``"METHOD /path"`` and
the client IP.

Usage:
    @router.post("/login", dependencies=[Depends(enforce_rate_limit)])
    async def login(...): ...

Response Headers on 429:
    - Retry-After: Whole seconds until a token is available
    - X-RateLimit-Limit: Bucket capacity
    - X-RateLimit-Remaining: Tokens left (0)
"""

import math
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from src.core.container import get_rate_limiter
from src.domain.protocols import RateLimitProtocol


def client_ip(request: Request) -> str:
    """Client address, preferring the first X-Forwarded-For hop.

    The service runs behind a reverse proxy that sets X-Forwarded-For;
    without one the socket peer address is used.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    if request.client:
        return request.client.host
    return "unknown"


async def enforce_rate_limit(
    request: Request,
    rate_limiter: Annotated[RateLimitProtocol, Depends(get_rate_limiter)],
) -> None:
    """Consume one request from the caller's bucket.

    Raises:
        HTTPException 429: Bucket empty.
    """
    decision = await rate_limiter.is_allowed(
        endpoint=f"{request.method} {request.url.path}",
        identifier=client_ip(request),
    )
    if decision.allowed:
        return

    retry_after = max(1, math.ceil(decision.retry_after))
    raise HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail=f"Too many requests. Try again in {retry_after} seconds.",
        headers={
            "Retry-After": str(retry_after),
            "X-RateLimit-Limit": str(decision.limit),
            "X-RateLimit-Remaining": str(decision.remaining),
        },
    )
