"""Common error classes shared across domains.

Usage:
    from src.core.enums import ErrorCode
    from src.core.errors import ValidationError
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_DOCUMENT,
        message="Document must be at most 30 characters",
        field="document",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Assignor, Payable, User).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str
