"""Error response builder for RFC 7807 Problem Details.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.errors import ValidationError
from src.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_CODES: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLES: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.UNAUTHORIZED: "Authentication Required",
    ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
    ApplicationErrorCode.CONFLICT: "Resource Conflict",
    ApplicationErrorCode.QUERY_FAILED: "Query Failed",
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="An assignor with this document already exists",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 7807 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=_TITLES.get(error.code, "Internal Server Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            trace_id=trace_id or None,
        )

        domain_error = error.domain_error
        if domain_error is not None:
            problem.code = domain_error.code.value
            if isinstance(domain_error, ValidationError) and domain_error.field:
                problem.errors = [
                    ErrorDetail(
                        field=domain_error.field,
                        code=domain_error.code.value,
                        message=domain_error.message,
                    )
                ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.NOT_FOUND)
            404
        """
        return _STATUS_CODES.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
