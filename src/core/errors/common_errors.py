"""Error categories shared by every layer.

Each category maps to one HTTP status family in the presentation layer:

- ValidationError: malformed input (bad email, empty role list) -> 400
- NotFoundError: referenced user or roles do not exist -> 404 / 400
- ConflictError: unique constraint on email -> 409
- AuthenticationError: bad credentials, any refresh rejection -> 401
- AuthorizationError: caller lacks a permission code -> 403

Usage:
    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Email format is invalid",
        field="email",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the offending input field, when there is one.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """A referenced resource does not exist.

    Attributes:
        resource_type: Kind of resource ("User", "Role").
        resource_id: Identifier(s) that failed to resolve.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Uniqueness conflict.

    Attributes:
        resource_type: Kind of resource in conflict.
        conflicting_field: Field that collided (e.g. "email").
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Credential or refresh-token rejection."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Caller is authenticated but lacks a permission.

    Attributes:
        required_permission: Permission code the route demanded.
    """

    required_permission: str | None = None
