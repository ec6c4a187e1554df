"""Global exception handlers for FastAPI application.

Converts exceptions that escape the routers into RFC 7807 Problem Details.

- HTTPException: same status, detail passed through
- RequestValidationError: 400 with one ErrorDetail per violated field
- Anything else: 500, logged, no internals exposed

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors.problem_details import ErrorDetail, ProblemDetails

_HTTP_TITLES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_401_UNAUTHORIZED: "Authentication Required",
    status.HTTP_403_FORBIDDEN: "Access Denied",
    status.HTTP_404_NOT_FOUND: "Resource Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
}


def _field_path(loc: tuple[int | str, ...]) -> str:
    # Drop the leading "body"/"path"/"query" segment
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTPException (raised by routes or dependencies) as Problem Details."""
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/http-{exc.status_code}",
        title=_HTTP_TITLES.get(exc.status_code, "HTTP Error"),
        status=exc.status_code,
        detail=str(exc.detail),
        instance=str(request.url.path),
        trace_id=get_trace_id(),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request schema violations as 400 Problem Details.

    Example body:
        {
            "title": "Validation Failed",
            "status": 400,
            "errors": [
                {"field": "assignor.document", "code": "string_too_long", ...}
            ]
        }
    """
    errors = [
        ErrorDetail(
            field=_field_path(tuple(error.get("loc", ()))),
            code=str(error.get("type", "invalid")),
            message=str(error.get("msg", "Invalid value")),
        )
        for error in exc.errors()
    ]

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-error",
        title="Validation Failed",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Request body or parameters failed validation",
        instance=str(request.url.path),
        errors=errors,
        trace_id=get_trace_id(),
    )

    get_logger().warning(
        "Request validation failed",
        path=request.url.path,
        fields=[error.field for error in errors],
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Never leaks stack traces or internal details to API consumers; the trace
    ID in the body matches the logged event.
    """
    trace_id = get_trace_id()

    get_logger().error(
        "Unhandled exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
