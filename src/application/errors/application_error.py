"""Application layer error types.

Application errors wrap the DomainError returned by a handler with the
information the presentation layer needs to pick an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    ErrorResponseBuilder maps each code to one HTTP status.
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error, if any
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError.from_domain_error(
        ...     ValidationError(
        ...         code=ErrorCode.INVALID_MEMBER_NAME,
        ...         message="Member name cannot be empty",
        ...         field="name",
        ...     ),
        ...     is_command=True,
        ... )
        >>> error.code
        <ApplicationErrorCode.COMMAND_VALIDATION_FAILED: 'command_validation_failed'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(
        cls, error: DomainError, *, is_command: bool
    ) -> "ApplicationError":
        """Wrap a handler's DomainError.

        Args:
            error: Error carried by the handler's Failure.
            is_command: True for command handlers, False for queries.

        Returns:
            ApplicationError keeping the domain error for field details.
        """
        match error:
            case ValidationError():
                code = (
                    ApplicationErrorCode.COMMAND_VALIDATION_FAILED
                    if is_command
                    else ApplicationErrorCode.QUERY_VALIDATION_FAILED
                )
            case NotFoundError():
                code = ApplicationErrorCode.NOT_FOUND
            case ConflictError():
                code = ApplicationErrorCode.CONFLICT
            case _:
                code = (
                    ApplicationErrorCode.COMMAND_EXECUTION_FAILED
                    if is_command
                    else ApplicationErrorCode.QUERY_FAILED
                )
        return cls(
            code=code,
            message=error.message,
            domain_error=error,
            details=error.details,
        )
