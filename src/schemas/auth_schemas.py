"""Account and authentication request/response schemas.

Endpoints:
    POST /integrations/accounts  - Create API account
    POST /integrations/auth      - Exchange login/password for an access token
"""

from pydantic import Field

from src.domain.types import Login, Password
from src.schemas.common import CamelModel


class AccountCreateRequest(CamelModel):
    """Request schema for account creation.

    POST /integrations/accounts
    Returns: 201 Created
    """

    login: Login = Field(..., examples=["aprovame"])
    password: Password = Field(..., examples=["aprovame123"])


class AccountCreateResponse(CamelModel):
    """Created account (password never echoed)."""

    id: str
    login: str


class AuthRequest(CamelModel):
    """Request schema for authentication.

    POST /integrations/auth
    Returns: 200 OK
    """

    login: Login = Field(..., examples=["aprovame"])
    password: Password = Field(..., examples=["aprovame123"])


class AuthResponse(CamelModel):
    """Access token response."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")
