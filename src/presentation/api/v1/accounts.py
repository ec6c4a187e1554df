"""Accounts and authentication router.

Endpoints (public):
    POST /integrations/accounts - Create API account
    POST /integrations/auth     - Exchange credentials for an access token
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import AuthenticateUser, RegisterUser
from src.application.commands.handlers.authenticate_user_handler import (
    AuthenticateUserHandler,
)
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.core.container import (
    get_authenticate_user_handler,
    get_register_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
    map_handler_error,
)
from src.schemas.auth_schemas import (
    AccountCreateRequest,
    AccountCreateResponse,
    AuthRequest,
    AuthResponse,
)

router = APIRouter(prefix="/integrations", tags=["Authentication"])


def _error_response(request: Request, error: str) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=map_handler_error(error),
        request=request,
        trace_id=get_trace_id() or "",
    )


@router.post(
    "/accounts",
    status_code=status.HTTP_201_CREATED,
    response_model=AccountCreateResponse,
    responses={409: {"description": "Login already taken", "model": ProblemDetails}},
    summary="Create account",
)
async def create_account(
    request: Request,
    data: AccountCreateRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> AccountCreateResponse | JSONResponse:
    """POST /integrations/accounts → 201 Created."""
    match await handler.handle(RegisterUser(login=data.login, password=data.password)):
        case Success(value=user_id):
            return AccountCreateResponse(id=str(user_id), login=data.login)
        case Failure(error=error):
            return _error_response(request, error)


@router.post(
    "/auth",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
    responses={401: {"description": "Invalid credentials", "model": ProblemDetails}},
    summary="Authenticate",
)
async def authenticate(
    request: Request,
    data: AuthRequest,
    handler: AuthenticateUserHandler = Depends(get_authenticate_user_handler),
) -> AuthResponse | JSONResponse:
    """POST /integrations/auth → 200 OK with a Bearer access token."""
    match await handler.handle(
        AuthenticateUser(login=data.login, password=data.password)
    ):
        case Success(value=token):
            return AuthResponse(
                access_token=token.access_token,
                expires_in=token.expires_in,
            )
        case Failure(error=error):
            return _error_response(request, error)
