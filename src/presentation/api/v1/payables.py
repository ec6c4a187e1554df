"""Payables resource router.

Endpoints (Bearer token required):
    GET    /integrations/payable/{id}  - Get payable with its assignor
    PUT    /integrations/payable/{id}  - Edit payable
    DELETE /integrations/payable/{id}  - Remove payable

Creation goes through POST /integrations/payable (integrations router).
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.edit_payable_handler import (
    EditPayableHandler,
)
from src.application.commands.handlers.remove_payable_handler import (
    RemovePayableHandler,
)
from src.application.commands.payable_commands import EditPayable, RemovePayable
from src.application.queries.handlers.get_payable_handler import GetPayableHandler
from src.application.queries.payable_queries import GetPayable
from src.core.container import (
    get_edit_payable_handler,
    get_get_payable_handler,
    get_remove_payable_handler,
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
from src.presentation.api.v1.presenters import (
    PayablePresenter,
    PayableWithAssignorPresenter,
)
from src.schemas.payable_schemas import (
    PayableResponse,
    PayableUpdateRequest,
    PayableWithAssignorResponse,
)

router = APIRouter(prefix="/integrations/payable", tags=["Payables"])


def _error_response(request: Request, error: str, payable_id: UUID) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=map_handler_error(error, resource_id=str(payable_id)),
        request=request,
        trace_id=get_trace_id() or "",
    )


@router.get(
    "/{payable_id}",
    response_model=PayableWithAssignorResponse,
    responses={
        401: {"description": "Missing or invalid token", "model": ProblemDetails},
        404: {"description": "Payable not found", "model": ProblemDetails},
        500: {"description": "Assignor reference missing", "model": ProblemDetails},
    },
    summary="Get payable",
)
async def get_payable(
    request: Request,
    payable_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetPayableHandler = Depends(get_get_payable_handler),
) -> PayableWithAssignorResponse | JSONResponse:
    """GET /integrations/payable/{id} → 200 OK with embedded assignor."""
    match await handler.handle(GetPayable(payable_id=payable_id)):
        case Success(value=view):
            return PayableWithAssignorPresenter.to_http(view)
        case Failure(error=error):
            return _error_response(request, error, payable_id)


@router.put(
    "/{payable_id}",
    response_model=PayableResponse,
    responses={
        401: {"description": "Missing or invalid token", "model": ProblemDetails},
        404: {"description": "Payable or assignor not found", "model": ProblemDetails},
    },
    summary="Edit payable",
)
async def edit_payable(
    request: Request,
    payable_id: UUID,
    data: PayableUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: EditPayableHandler = Depends(get_edit_payable_handler),
) -> PayableResponse | JSONResponse:
    """PUT /integrations/payable/{id} → 200 OK."""
    result = await handler.handle(
        EditPayable(
            payable_id=payable_id,
            assignor_id=data.assignor_id,
            emission_date=data.emission_date,
            value=data.value,
        )
    )

    match result:
        case Success(value=payable):
            return PayablePresenter.to_http(payable)
        case Failure(error=error):
            return _error_response(request, error, payable_id)


@router.delete(
    "/{payable_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        401: {"description": "Missing or invalid token", "model": ProblemDetails},
        404: {"description": "Payable not found", "model": ProblemDetails},
    },
    summary="Remove payable",
)
async def remove_payable(
    request: Request,
    payable_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: RemovePayableHandler = Depends(get_remove_payable_handler),
) -> Response:
    """DELETE /integrations/payable/{id} → 204 No Content."""
    match await handler.handle(RemovePayable(payable_id=payable_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return _error_response(request, error, payable_id)
