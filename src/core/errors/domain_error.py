"""Base error returned by shop handlers.

Member commands and order listing queries never raise for expected
failures. They return Failure(error=...) carrying a DomainError subclass
and the presentation layer turns it into a Problem Details response:
ValidationError for a blank member name or an unsupported paging/search
request, NotFoundError for an unknown member id, ConflictError for a
member name already taken.

Persistence failures are not DomainErrors. They propagate as exceptions
to the global 500 handler.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Handler failure carried inside a Failure result.

    Not an Exception subclass: it is returned, never raised.

    Attributes:
        code: Machine-readable ErrorCode (errors[] code for validation).
        message: Text used as the Problem Details detail.
        details: Optional extra context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
