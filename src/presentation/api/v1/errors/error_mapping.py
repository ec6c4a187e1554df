"""Map handler failure messages to ApplicationError.

Handlers fail with the constant strings of AssignorError, PayableError and
AuthenticationError. Each known message maps to an ApplicationErrorCode
(which decides the HTTP status) plus a typed domain error carrying the
machine-readable ErrorCode.
"""

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.domain.errors import AssignorError, AuthenticationError, PayableError

# message -> (application code, domain code, offending field)
_KNOWN_ERRORS: dict[str, tuple[ApplicationErrorCode, ErrorCode, str | None]] = {
    AssignorError.INVALID_DOCUMENT: (
        ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ErrorCode.INVALID_DOCUMENT,
        "document",
    ),
    AssignorError.INVALID_EMAIL: (
        ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ErrorCode.INVALID_EMAIL,
        "email",
    ),
    AssignorError.INVALID_PHONE: (
        ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ErrorCode.INVALID_PHONE_NUMBER,
        "phone",
    ),
    AssignorError.INVALID_NAME: (
        ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ErrorCode.VALIDATION_FAILED,
        "name",
    ),
    AssignorError.ASSIGNOR_NOT_FOUND: (
        ApplicationErrorCode.NOT_FOUND,
        ErrorCode.ASSIGNOR_NOT_FOUND,
        None,
    ),
    AssignorError.DOCUMENT_ALREADY_REGISTERED: (
        ApplicationErrorCode.CONFLICT,
        ErrorCode.ASSIGNOR_ALREADY_EXISTS,
        None,
    ),
    AssignorError.ASSIGNOR_HAS_PAYABLES: (
        ApplicationErrorCode.CONFLICT,
        ErrorCode.ASSIGNOR_HAS_PAYABLES,
        None,
    ),
    PayableError.INVALID_VALUE: (
        ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ErrorCode.INVALID_AMOUNT,
        "value",
    ),
    PayableError.PAYABLE_NOT_FOUND: (
        ApplicationErrorCode.NOT_FOUND,
        ErrorCode.PAYABLE_NOT_FOUND,
        None,
    ),
    PayableError.ASSIGNOR_NOT_FOUND: (
        ApplicationErrorCode.NOT_FOUND,
        ErrorCode.ASSIGNOR_NOT_FOUND,
        None,
    ),
    PayableError.ASSIGNOR_REFERENCE_MISSING: (
        ApplicationErrorCode.QUERY_FAILED,
        ErrorCode.ASSIGNOR_REFERENCE_MISSING,
        None,
    ),
    AuthenticationError.INVALID_CREDENTIALS: (
        ApplicationErrorCode.UNAUTHORIZED,
        ErrorCode.INVALID_CREDENTIALS,
        None,
    ),
    AuthenticationError.LOGIN_ALREADY_REGISTERED: (
        ApplicationErrorCode.CONFLICT,
        ErrorCode.USER_ALREADY_EXISTS,
        None,
    ),
}

_RESOURCE_TYPES: dict[ErrorCode, str] = {
    ErrorCode.ASSIGNOR_NOT_FOUND: "Assignor",
    ErrorCode.PAYABLE_NOT_FOUND: "Payable",
}


def map_handler_error(
    error: str,
    *,
    resource_id: str | None = None,
    override_code: ApplicationErrorCode | None = None,
) -> ApplicationError:
    """Wrap a handler failure message in an ApplicationError.

    Args:
        error: Failure message returned by a handler.
        resource_id: Id from the request path, recorded on not-found errors.
        override_code: Force the application code (the integration flow
            answers every assignor failure with 400).

    Returns:
        ApplicationError. Unknown messages become COMMAND_VALIDATION_FAILED
        with no domain error attached.
    """
    known = _KNOWN_ERRORS.get(error)
    if known is None:
        return ApplicationError(
            code=override_code or ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message=error,
        )

    app_code, domain_code, field = known
    domain_error: DomainError
    if field is not None:
        domain_error = ValidationError(code=domain_code, message=error, field=field)
    elif domain_code in _RESOURCE_TYPES and resource_id is not None:
        domain_error = NotFoundError(
            code=domain_code,
            message=error,
            resource_type=_RESOURCE_TYPES[domain_code],
            resource_id=resource_id,
        )
    else:
        domain_error = DomainError(code=domain_code, message=error)

    return ApplicationError(
        code=override_code or app_code,
        message=error,
        domain_error=domain_error,
        details={"resource_id": resource_id} if resource_id is not None else None,
    )
