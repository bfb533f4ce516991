"""Infrastructure-specific error codes.

Internal codes for tracking infrastructure failures. They ride along on
InfrastructureError next to the domain ErrorCode.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Cache errors
    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
    CACHE_DECODE_ERROR = "cache_decode_error"

    # Rate limit storage errors
    RATE_LIMIT_STORAGE_ERROR = "rate_limit_storage_error"
