"""Assignors resource router.

Endpoints (Bearer token required):
    POST   /integrations/assignor       - Create assignor
    GET    /integrations/assignor/{id}  - Get assignor
    PUT    /integrations/assignor/{id}  - Edit assignor
    DELETE /integrations/assignor/{id}  - Remove assignor (refused while payables exist)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from uuid_extensions import uuid7

from src.application.commands.assignor_commands import (
    CreateAssignor,
    EditAssignor,
    RemoveAssignor,
)
from src.application.commands.handlers.create_assignor_handler import (
    CreateAssignorHandler,
)
from src.application.commands.handlers.edit_assignor_handler import (
    EditAssignorHandler,
)
from src.application.commands.handlers.remove_assignor_handler import (
    RemoveAssignorHandler,
)
from src.application.queries.assignor_queries import GetAssignor
from src.application.queries.handlers.get_assignor_handler import GetAssignorHandler
from src.core.container import (
    get_create_assignor_handler,
    get_edit_assignor_handler,
    get_get_assignor_handler,
    get_remove_assignor_handler,
)
from src.core.result import Failure, Success
from src.presentation.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
    map_handler_error,
)
from src.presentation.api.v1.presenters import AssignorPresenter
from src.schemas.assignor_schemas import AssignorRequest, AssignorResponse

router = APIRouter(prefix="/integrations/assignor", tags=["Assignors"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"description": "Missing or invalid token", "model": ProblemDetails},
    404: {"description": "Assignor not found", "model": ProblemDetails},
    409: {"description": "Conflict", "model": ProblemDetails},
}


def _error_response(
    request: Request, error: str, assignor_id: UUID | None = None
) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=map_handler_error(
            error, resource_id=str(assignor_id) if assignor_id else None
        ),
        request=request,
        trace_id=get_trace_id() or "",
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AssignorResponse,
    responses=_ERROR_RESPONSES,
    summary="Create assignor",
)
async def create_assignor(
    request: Request,
    data: AssignorRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: CreateAssignorHandler = Depends(get_create_assignor_handler),
) -> AssignorResponse | JSONResponse:
    """Create an assignor.

    POST /integrations/assignor → 201 Created (409 if document is taken)
    """
    result = await handler.handle(
        CreateAssignor(
            assignor_id=uuid7(),
            document=data.document,
            email=data.email,
            phone=data.phone,
            name=data.name,
        )
    )

    match result:
        case Success(value=assignor):
            return AssignorPresenter.to_http(assignor)
        case Failure(error=error):
            return _error_response(request, error)


@router.get(
    "/{assignor_id}",
    response_model=AssignorResponse,
    responses=_ERROR_RESPONSES,
    summary="Get assignor",
)
async def get_assignor(
    request: Request,
    assignor_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetAssignorHandler = Depends(get_get_assignor_handler),
) -> AssignorResponse | JSONResponse:
    """GET /integrations/assignor/{id} → 200 OK (404 if unknown)."""
    match await handler.handle(GetAssignor(assignor_id=assignor_id)):
        case Success(value=assignor):
            return AssignorPresenter.to_http(assignor)
        case Failure(error=error):
            return _error_response(request, error, assignor_id)


@router.put(
    "/{assignor_id}",
    response_model=AssignorResponse,
    responses=_ERROR_RESPONSES,
    summary="Edit assignor",
)
async def edit_assignor(
    request: Request,
    assignor_id: UUID,
    data: AssignorRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: EditAssignorHandler = Depends(get_edit_assignor_handler),
) -> AssignorResponse | JSONResponse:
    """PUT /integrations/assignor/{id} → 200 OK (404 unknown, 409 document taken)."""
    result = await handler.handle(
        EditAssignor(
            assignor_id=assignor_id,
            document=data.document,
            email=data.email,
            phone=data.phone,
            name=data.name,
        )
    )

    match result:
        case Success(value=assignor):
            return AssignorPresenter.to_http(assignor)
        case Failure(error=error):
            return _error_response(request, error, assignor_id)


@router.delete(
    "/{assignor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERROR_RESPONSES,
    summary="Remove assignor",
)
async def remove_assignor(
    request: Request,
    assignor_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: RemoveAssignorHandler = Depends(get_remove_assignor_handler),
) -> Response:
    """DELETE /integrations/assignor/{id} → 204 (404 unknown, 409 has payables)."""
    match await handler.handle(RemoveAssignor(assignor_id=assignor_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return _error_response(request, error, assignor_id)
