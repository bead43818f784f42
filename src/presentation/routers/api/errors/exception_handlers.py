"""Global exception handlers for FastAPI application.

Convert exceptions that escape route functions into RFC 9457 Problem
Details responses.

Handlers:
    http_exception_handler: HTTPException (404 unknown route, 405, ...)
    validation_exception_handler: RequestValidationError (422 with field errors)
    generic_exception_handler: Anything else (logged, 500 without internals)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)
from src.presentation.routers.api.middleware.trace_middleware import TRACE_ID_HEADER

# HTTP status code to (title, slug) mapping for RFC 9457
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}

_UNPROCESSABLE = 422


def _status_info(status_code: int) -> tuple[str, str]:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


def _trace_id(request: Request) -> str | None:
    # Set by TraceMiddleware on the shared request state
    return getattr(request.state, "trace_id", None)


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 9457 Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by routing or a dependency.

    Returns:
        JSONResponse with RFC 9457 ProblemDetails.
    """
    assert isinstance(exc, StarletteHTTPException)

    title, slug = _status_info(exc.status_code)
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to RFC 9457 Problem Details response.

    Example:
        >>> # GET /api/v3.1/orders?limit=0
        >>> # {
        >>> #   "type": "http://localhost:8000/errors/validation-failed",
        >>> #   "title": "Validation Failed",
        >>> #   "status": 422,
        >>> #   "errors": [
        >>> #     {"field": "query.limit", "code": "greater_than_equal", "message": "..."}
        >>> #   ],
        >>> #   ...
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "name"] -> "name"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title="Validation Failed",
        status=_UNPROCESSABLE,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors or None,
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=_UNPROCESSABLE,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and answer 500 without internal details.

    Persistence failures (SQLAlchemyError and friends) end up here as well.
    """
    trace_id = _trace_id(request)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    # Runs outside TraceMiddleware, so the header is added here.
    headers = {TRACE_ID_HEADER: trace_id} if trace_id else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
