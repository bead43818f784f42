"""Error response builder for RFC 9457 Problem Details.

Builds RFC 9457 compliant error responses from application layer errors.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.errors import ValidationError
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# ApplicationErrorCode -> (HTTP status, title)
_STATUS_INFO: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Command Execution Failed",
    ),
    ApplicationErrorCode.QUERY_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Query Failed",
    ),
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> error = ApplicationError.from_domain_error(domain_error, is_command=True)
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id=get_trace_id() or "",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance path)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        # Field-level detail for validation failures
        if isinstance(error.domain_error, ValidationError):
            problem.errors = [
                ErrorDetail(
                    field=error.domain_error.field or "unknown",
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code (500 if unmapped)."""
        return _STATUS_INFO.get(code, (status.HTTP_500_INTERNAL_SERVER_ERROR, ""))[0]

    @staticmethod
    def get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        return _STATUS_INFO.get(code, (0, "Internal Server Error"))[1]
