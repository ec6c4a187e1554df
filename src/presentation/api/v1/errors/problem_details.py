"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> error = ErrorDetail(
        ...     field="assignor.document",
        ...     code="string_too_long",
        ...     message="String should have at most 30 characters",
        ... )
    """

    field: str = Field(..., description="Field name (dotted path for nested bodies)")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        code: Optional machine-readable domain error code
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Assignor not found",
        ...     instance="/integrations/assignor/0190f5c2-6a39-7c4e-9d7a-1f3b5c7d9e21",
        ...     code="assignor_not_found",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/validation-error"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/integrations/payable"],
    )
    code: str | None = Field(None, description="Machine-readable domain error code")
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
