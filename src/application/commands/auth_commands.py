"""Account commands (CQRS write operations).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- Use Annotated types for validation (DRY principle)
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.types import Login, Password


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register a new API account.

    Attributes:
        login: Account login (normalized lowercase).
        password: Plaintext password, hashed by the handler.

    Example:
        >>> command = RegisterUser(login="aprovame", password="aprovame123")
        >>> result = await handler.handle(command)
    """

    login: Login
    password: Password


@dataclass(frozen=True, kw_only=True)
class AuthenticateUser:
    """Verify account credentials and issue an access token.

    Attributes:
        login: Account login.
        password: Plaintext password.
    """

    login: Login
    password: Password


@dataclass(frozen=True, kw_only=True)
class AccessToken:
    """Response from successful authentication.

    This is a response DTO, not a command.

    Attributes:
        user_id: Authenticated account id.
        access_token: Signed JWT.
        expires_in: Token lifetime in seconds.
    """

    user_id: UUID
    access_token: str
    expires_in: int
