"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, *_REQUIRED)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, REFRESH_TOKEN_*)
- Authorization errors (PERMISSION_DENIED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_USERNAME = "invalid_username"
    PASSWORD_TOO_WEAK = "password_too_weak"
    INVALID_DEVICE_ID = "invalid_device_id"
    ROLE_IDS_REQUIRED = "role_ids_required"
    INVALID_ROLE_CHANGE_ACTOR = "invalid_role_change_actor"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    ROLES_NOT_FOUND = "roles_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    REFRESH_TOKEN_INVALID = "refresh_token_invalid"
    REFRESH_TOKEN_EXPIRED = "refresh_token_expired"
    REFRESH_TOKEN_REUSED = "refresh_token_reused"
    REFRESH_TOKEN_DEVICE_MISMATCH = "refresh_token_device_mismatch"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"

    # Infrastructure-facing (cache/database failures surfaced as data)
    CACHE_UNAVAILABLE = "cache_unavailable"
