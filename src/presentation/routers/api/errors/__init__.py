"""API error handling (RFC 9457 Problem Details).

Exports:
    ErrorResponseBuilder: ApplicationError -> Problem Details response
    ErrorDetail, ProblemDetails: Response schemas
    register_exception_handlers: Global exception handler registration
"""

from src.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
