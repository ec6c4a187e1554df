"""Token generation protocol for domain layer.

Defines JWT access token generation and validation. Infrastructure provides
the concrete adapter (JWTService).

Token Strategy:
    - Access tokens only (no refresh tokens)
    - Stateless validation (no database lookup)
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Usage:
        token = token_service.generate_access_token(user_id=user.id, login=user.login)

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = payload["sub"]
            case Failure(error=error):
                ...  # Invalid or expired token
    """

    @property
    def expires_in_seconds(self) -> int:
        """Lifetime of generated tokens in seconds."""
        ...

    def generate_access_token(self, user_id: UUID, login: str) -> str:
        """Generate a signed access token for the account."""
        ...

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int], str]:
        """Validate a token and return its payload.

        Returns:
            Success(payload) if signature and expiry are valid,
            Failure(AuthenticationError.INVALID_TOKEN) otherwise.
        """
        ...
