"""Application layer error types.

Handlers return plain error strings inside Failure; routers wrap them in an
ApplicationError so the presentation layer can pick the HTTP status and build
an RFC 7807 response.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="An assignor with this document already exists",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Payable not found",
        ...     details={"payable_id": "0190f5c2-6a39-7c4e-9d7a-1f3b5c7d9e21"},
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
