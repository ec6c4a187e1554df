"""Payable-and-assignor intake router.

Endpoints:
    POST /integrations/payable - Register an assignor and its first payable

Public route used by the intake form. Both ids are generated here (uuid7).
The assignor is written first; if it is rejected the payable is never
created. The two writes commit separately.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from uuid_extensions import uuid7

from src.application.commands.assignor_commands import CreateAssignor
from src.application.commands.handlers.create_assignor_handler import (
    CreateAssignorHandler,
)
from src.application.commands.handlers.create_payable_handler import (
    CreatePayableHandler,
)
from src.application.commands.payable_commands import CreatePayable
from src.application.errors import ApplicationErrorCode
from src.core.container import get_create_assignor_handler, get_create_payable_handler
from src.core.result import Failure, Success
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
    map_handler_error,
)
from src.presentation.api.v1.presenters import AssignorPresenter, PayablePresenter
from src.schemas.payable_schemas import (
    PayableAndAssignorRequest,
    PayableAndAssignorResponse,
)

router = APIRouter(prefix="/integrations", tags=["Integrations"])


def _bad_request(request: Request, error: str) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=map_handler_error(
            error, override_code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        ),
        request=request,
        trace_id=get_trace_id() or "",
    )


@router.post(
    "/payable",
    status_code=status.HTTP_200_OK,
    response_model=PayableAndAssignorResponse,
    responses={
        400: {
            "description": "Invalid body or assignor rejected",
            "model": ProblemDetails,
        },
    },
    summary="Register payable and assignor",
)
async def create_payable_and_assignor(
    request: Request,
    data: PayableAndAssignorRequest,
    assignor_handler: CreateAssignorHandler = Depends(get_create_assignor_handler),
    payable_handler: CreatePayableHandler = Depends(get_create_payable_handler),
) -> PayableAndAssignorResponse | JSONResponse:
    """Create an assignor, then a payable owed to it.

    POST /integrations/payable → 200 OK

    Returns:
        PayableAndAssignorResponse with both resources.
        JSONResponse 400 if the assignor (or then the payable) is rejected.
    """
    assignor_result = await assignor_handler.handle(
        CreateAssignor(
            assignor_id=uuid7(),
            document=data.assignor.document,
            email=data.assignor.email,
            phone=data.assignor.phone,
            name=data.assignor.name,
        )
    )

    match assignor_result:
        case Failure(error=error):
            return _bad_request(request, error)
        case Success(value=assignor):
            pass

    payable_result = await payable_handler.handle(
        CreatePayable(
            payable_id=uuid7(),
            assignor_id=assignor.id,
            emission_date=data.payable.emission_date,
            value=data.payable.value,
        )
    )

    match payable_result:
        case Failure(error=error):
            return _bad_request(request, error)
        case Success(value=payable):
            return PayableAndAssignorResponse(
                payable=PayablePresenter.to_http(payable),
                assignor=AssignorPresenter.to_http(assignor),
            )
