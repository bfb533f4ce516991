"""Rate limit rule value object.

Immutable token bucket parameters for one endpoint, plus the decision
returned by a rate limit check.

Usage:
    from src.domain.value_objects.rate_limit_rule import RateLimitRule

    login_rule = RateLimitRule(max_tokens=5, refill_rate=5.0)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitRule:
    """Token bucket configuration (value object).

    Token Bucket Algorithm:
        - Bucket starts full (max_tokens)
        - Each request consumes ``cost`` tokens
        - Tokens refill continuously at ``refill_rate`` per minute
        - If not enough tokens are left, the request is denied with retry_after

    Attributes:
        max_tokens: Bucket capacity (burst size).
        refill_rate: Tokens added per minute.
        cost: Tokens consumed per request.

    Raises:
        ValueError: If any numeric field is not positive.
    """

    max_tokens: int
    refill_rate: float
    cost: int = 1

    def __post_init__(self) -> None:
        if self.max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")
        if self.refill_rate <= 0:
            raise ValueError(f"refill_rate must be positive, got {self.refill_rate}")
        if self.cost <= 0:
            raise ValueError(f"cost must be positive, got {self.cost}")

    @property
    def seconds_per_token(self) -> float:
        """Seconds between two refilled tokens (5/min -> 12.0)."""
        return 60.0 / self.refill_rate

    @property
    def ttl_seconds(self) -> int:
        """Storage TTL for a bucket: time to refill completely plus one minute."""
        return int((self.max_tokens / self.refill_rate) * 60) + 60


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitResult:
    """Outcome of a rate limit check.

    Attributes:
        allowed: Whether the request may proceed.
        retry_after: Seconds until enough tokens are available (0 if allowed).
        remaining: Whole tokens left in the bucket.
        limit: Bucket capacity (0 when no rule applies).
    """

    allowed: bool
    retry_after: float = 0.0
    remaining: int = 0
    limit: int = 0
