"""JWT authentication dependencies.

Usage:
    @router.get("/assignor/{assignor_id}")
    async def get_assignor(
        current_user: CurrentUser = Depends(get_current_user),
    ):
        ...
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.errors import AuthenticationError
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# auto_error=False so a missing header is answered with 401 (not 403)
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated account extracted from the access token.

    Attributes:
        user_id: Account id (JWT 'sub' claim).
        login: Account login (JWT 'login' claim).
        token_jti: JWT unique identifier.
    """

    user_id: UUID
    login: str
    token_jti: str | None = None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated account from the Bearer token.

    Raises:
        HTTPException 401: If token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized("Missing bearer token")

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                return CurrentUser(
                    user_id=UUID(str(payload["sub"])),
                    login=str(payload.get("login", "")),
                    token_jti=str(payload["jti"]) if "jti" in payload else None,
                )
            except (KeyError, ValueError) as e:
                raise _unauthorized(AuthenticationError.INVALID_TOKEN) from e
        case Failure(error=error):
            raise _unauthorized(error)
        case _:
            raise _unauthorized(AuthenticationError.INVALID_TOKEN)
