"""Base domain error for Result-based error flow.

DomainError is the root of every error value returned by handlers. It is a
plain frozen dataclass, never raised: handlers wrap it in ``Failure`` and the
presentation layer maps it to an HTTP problem response.

Usage:
    from src.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class RefreshRejected(DomainError):
        token_id: UUID | None = None
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging. Never holds secrets.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
