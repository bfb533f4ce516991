"""Token bucket arithmetic and the storage port behind TokenBucketAdapter.

The in-process storage runs ``take_tokens`` directly; the Redis storage runs
the same arithmetic inside a Lua script so the check and the consume are one
atomic step across instances.
"""

import math
from dataclasses import dataclass
from typing import Protocol

from src.core.result import Result
from src.domain.value_objects.rate_limit_rule import RateLimitRule
from src.infrastructure.errors import CacheError


@dataclass(frozen=True, slots=True)
class BucketState:
    """Tokens left and when they were last counted (seconds)."""

    tokens: float
    updated_at: float


@dataclass(frozen=True, slots=True)
class TakeOutcome:
    """Result of one take: decision plus the bucket to store back."""

    allowed: bool
    retry_after: float
    remaining: int
    state: BucketState


def take_tokens(
    state: BucketState | None, rule: RateLimitRule, now: float
) -> TakeOutcome:
    """Refill ``state`` up to ``now`` and try to take ``rule.cost`` tokens.

    A missing state is a full bucket. A clock that went backwards refills
    nothing.
    """
    if state is None:
        tokens = float(rule.max_tokens)
    else:
        elapsed = max(0.0, now - state.updated_at)
        tokens = min(
            float(rule.max_tokens), state.tokens + elapsed / rule.seconds_per_token
        )

    if tokens >= rule.cost:
        tokens -= rule.cost
        return TakeOutcome(
            allowed=True,
            retry_after=0.0,
            remaining=math.floor(tokens),
            state=BucketState(tokens=tokens, updated_at=now),
        )

    return TakeOutcome(
        allowed=False,
        retry_after=(rule.cost - tokens) * rule.seconds_per_token,
        remaining=math.floor(tokens),
        state=BucketState(tokens=tokens, updated_at=now),
    )


class TokenBucketStorage(Protocol):
    """Atomic check-and-consume on a keyed bucket."""

    async def take(
        self, *, key: str, rule: RateLimitRule
    ) -> Result[tuple[bool, float, int], CacheError]:
        """Take ``rule.cost`` tokens from the bucket at ``key``.

        Returns:
            Success((allowed, retry_after_seconds, remaining_tokens)), or
            Failure(CacheError) when the store is unreachable.
        """
        ...
