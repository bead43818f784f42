"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> ErrorDetail(
        ...     field="name",
        ...     code="invalid_member_name",
        ...     message="Member name cannot be empty",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Request path of this occurrence
        errors: Optional list of field-specific errors (validation failures)
        trace_id: Request trace ID (same value as the X-Trace-Id header)

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/conflict",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="A member with this name already exists",
        ...     instance="/api/v2/members",
        ...     trace_id="01890a5d-ac96-774b-bcce-b302099a8057",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/command_validation_failed"],
    )
    title: str = Field(..., description="Short, human-readable summary", examples=["Validation Failed"])
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Member name cannot be empty"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v2/members"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
