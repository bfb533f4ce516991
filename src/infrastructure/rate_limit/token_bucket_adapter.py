"""Token bucket adapter implementing RateLimitProtocol.

Looks up the rule for an endpoint, builds the bucket key and delegates the
atomic take to a TokenBucketStorage (Redis or in-process).

Architecture:
    RateLimitProtocol <- TokenBucketAdapter -> TokenBucketStorage

Fail-open: a storage failure is logged and the request is allowed.
"""

from collections.abc import Mapping

from src.core.result import Failure, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.rate_limit_rule import RateLimitResult, RateLimitRule
from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.rate_limit.token_bucket import TokenBucketStorage


class TokenBucketAdapter:
    """Token bucket rate limiter.

    Args:
        storage: Atomic bucket storage.
        rules: ``"METHOD /path"`` -> RateLimitRule. Other endpoints are
            not limited.
        cache_keys: Builds the bucket key.
        logger: Structured logger.
    """

    def __init__(
        self,
        *,
        storage: TokenBucketStorage,
        rules: Mapping[str, RateLimitRule],
        cache_keys: CacheKeys,
        logger: LoggerProtocol,
    ) -> None:
        self._storage = storage
        self._rules = dict(rules)
        self._cache_keys = cache_keys
        self._logger = logger

    async def is_allowed(self, *, endpoint: str, identifier: str) -> RateLimitResult:
        rule = self._rules.get(endpoint)
        if rule is None:
            return RateLimitResult(allowed=True)

        key = self._cache_keys.rate_limit_bucket(endpoint, identifier)
        result = await self._storage.take(key=key, rule=rule)

        match result:
            case Success(value=(allowed, retry_after, remaining)):
                if not allowed:
                    self._logger.warning(
                        "rate_limit_exceeded",
                        endpoint=endpoint,
                        identifier=identifier,
                        retry_after=round(retry_after, 2),
                    )
                return RateLimitResult(
                    allowed=allowed,
                    retry_after=retry_after,
                    remaining=remaining,
                    limit=rule.max_tokens,
                )
            case Failure(error=error):
                self._logger.warning(
                    "rate_limit_fail_open",
                    endpoint=endpoint,
                    identifier=identifier,
                    error_message=error.message,
                )
                return RateLimitResult(
                    allowed=True,
                    remaining=rule.max_tokens,
                    limit=rule.max_tokens,
                )
