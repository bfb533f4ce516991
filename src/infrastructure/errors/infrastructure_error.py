"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (cache, broker).
Adapters catch client exceptions and return these as Failure values.

Architecture:
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode is kept for internal tracking
- The domain ErrorCode is what callers branch on
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        infrastructure_code: Original infrastructure error code.
        details: Additional context (key, original error). Never values.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache-specific errors (connection, timeout, bad payload).

    Always carries ErrorCode.CACHE_UNAVAILABLE as its domain code.
    """

    pass
