"""JWT access token service (adapter).

Implements TokenGenerationProtocol with PyJWT (HS256 by default).

Claims:
    sub: Account id (str UUID)
    login: Account login
    iat / exp: Issued-at and expiry (epoch seconds)
    jti: Unique token id
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(user_id=user.id, login=user.login)
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 60,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC signing key, at least 32 bytes.
            expiration_minutes: Token lifetime in minutes.
            algorithm: PyJWT HMAC algorithm name.

        Raises:
            ValueError: If secret_key is shorter than 32 bytes.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    @property
    def expires_in_seconds(self) -> int:
        """Lifetime of generated tokens in seconds."""
        return self._expiration_minutes * 60

    def generate_access_token(self, user_id: UUID, login: str) -> str:
        """Generate a signed access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(user_id=uuid7(), login="aprovame")
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "login": login,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int], str]:
        """Validate signature and expiry, returning the payload.

        Returns:
            Success(payload) if valid.
            Failure(AuthenticationError.INVALID_TOKEN) for invalid, expired
            or malformed tokens (never raises).
        """
        try:
            payload: dict[str, str | int] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        return Success(value=payload)
