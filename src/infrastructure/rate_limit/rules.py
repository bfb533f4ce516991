"""Rate limit rules for the unauthenticated credential endpoints.

Each client IP gets a bucket per endpoint whose capacity equals its
per-minute budget, so a client can burst the whole minute's budget at once
and then gets one request back every ``60 / per_minute`` seconds.
"""

from src.domain.value_objects.rate_limit_rule import RateLimitRule

LOGIN_PATH = "/auth/login"
REFRESH_TOKEN_PATH = "/auth/refresh-token"
REGISTER_PATH = "/users"


def _per_minute(limit: int) -> RateLimitRule:
    return RateLimitRule(max_tokens=limit, refill_rate=float(limit))


def build_rate_limit_rules(
    *,
    api_prefix: str,
    login_per_minute: int,
    refresh_per_minute: int,
    register_per_minute: int,
) -> dict[str, RateLimitRule]:
    """Map ``"POST {api_prefix}{path}"`` to its rule.

    Example:
        >>> rules = build_rate_limit_rules(
        ...     api_prefix="/api/v1",
        ...     login_per_minute=5,
        ...     refresh_per_minute=10,
        ...     register_per_minute=3,
        ... )
        >>> rules["POST /api/v1/auth/login"].max_tokens
        5
    """
    return {
        f"POST {api_prefix}{LOGIN_PATH}": _per_minute(login_per_minute),
        f"POST {api_prefix}{REFRESH_TOKEN_PATH}": _per_minute(refresh_per_minute),
        f"POST {api_prefix}{REGISTER_PATH}": _per_minute(register_per_minute),
    }
