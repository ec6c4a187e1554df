"""RFC 7807 error responses for API v1.

Exports:
    ErrorDetail, ProblemDetails: Response schemas
    ErrorResponseBuilder: ApplicationError -> JSONResponse
    map_handler_error: Handler failure message -> ApplicationError
    register_exception_handlers: Global exception handlers
"""

from src.presentation.api.v1.errors.error_mapping import map_handler_error
from src.presentation.api.v1.errors.error_response_builder import ErrorResponseBuilder
from src.presentation.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.api.v1.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "map_handler_error",
    "register_exception_handlers",
]
