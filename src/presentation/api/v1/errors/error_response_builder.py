"""Error response builder for RFC 9457 Problem Details.

Converts DomainError values returned by handlers into JSON problem
responses. The HTTP status is chosen by error category (the DomainError
subclass); the problem ``type`` URI carries the machine-readable code.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.presentation.api.v1.errors.problem_details import ErrorDetail, ProblemDetails

# Category -> (status, title). Categories are disjoint DomainError subclasses.
_CATEGORY_STATUS: dict[type[DomainError], tuple[int, str]] = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ConflictError: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    AuthenticationError: (status.HTTP_401_UNAUTHORIZED, "Authentication Failed"),
    AuthorizationError: (status.HTTP_403_FORBIDDEN, "Access Denied"),
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=NotFoundError(
        ...         code=ErrorCode.USER_NOT_FOUND,
        ...         message="User not found",
        ...         resource_type="User",
        ...         resource_id=str(user_id),
        ...     ),
        ...     request=request,
        ... )
        >>> response.status_code
        404
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        *,
        status_code: int | None = None,
        code: ErrorCode | None = None,
        detail: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 9457 JSON response.

        Args:
            error: Error returned by a handler.
            request: Current request (instance path, trace ID).
            status_code: Override for the category status (unknown role IDs
                in a request body are a 400, not a 404).
            code: Override for the code in the problem ``type`` URI (refresh
                failures all report REFRESH_TOKEN_INVALID).
            detail: Override for the client-facing message (refresh failures
                all share one generic message).
            headers: Extra response headers (e.g. WWW-Authenticate).

        Returns:
            JSONResponse with ProblemDetails content.
        """
        default_status, title = ErrorResponseBuilder.get_status(error)
        final_status = status_code or default_status

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{(code or error.code).value}",
            title=title,
            status=final_status,
            detail=detail or error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=getattr(request.state, "trace_id", None),
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=final_status,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def get_status(error: DomainError) -> tuple[int, str]:
        """Map an error category to (HTTP status, title).

        Unknown categories map to 500.
        """
        for category, status_and_title in _CATEGORY_STATUS.items():
            if isinstance(error, category):
                return status_and_title
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
