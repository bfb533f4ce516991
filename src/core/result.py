"""Result types for railway-oriented programming.

Command and query handlers report expected outcomes (bad credentials, a
reused refresh token, an unknown role) as values instead of raising. Callers
pattern-match on the two variants.

Usage:
    result = await handler.handle(RefreshAccessToken(refresh_token=raw, device_id=device))
    match result:
        case Success(value=tokens):
            return tokens.access_token
        case Failure(error=error):
            log_rejection(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying the produced value.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying a typed error.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
