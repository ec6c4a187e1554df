"""Authentication handler for API accounts.

Flow:
1. Find user by login
2. Verify password
3. Issue access token
4. Return Success(AccessToken)

Unknown login and wrong password fail with the same message so the
response never reveals which logins exist.
"""

from src.application.commands.auth_commands import AccessToken, AuthenticateUser
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class AuthenticateUserHandler:
    """Handler for user authentication command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize authentication handler with dependencies.

        Args:
            user_repo: User repository for lookup.
            password_service: Password verification service.
            token_service: JWT access token issuer.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: AuthenticateUser) -> Result[AccessToken, str]:
        """Handle authentication command.

        Returns:
            Success(AccessToken) on valid credentials.
            Failure(AuthenticationError.INVALID_CREDENTIALS) otherwise.
        """
        user = await self._user_repo.find_by_login(cmd.login)
        if user is None or not self._password_service.verify_password(
            cmd.password, user.password_hash
        ):
            self._logger.warning(
                "Authentication failed",
                reason=AuthenticationError.INVALID_CREDENTIALS,
                login=cmd.login,
            )
            return Failure(error=AuthenticationError.INVALID_CREDENTIALS)

        access_token = self._token_service.generate_access_token(
            user_id=user.id, login=user.login
        )

        self._logger.info("User authenticated", user_id=str(user.id))
        return Success(
            value=AccessToken(
                user_id=user.id,
                access_token=access_token,
                expires_in=self._token_service.expires_in_seconds,
            )
        )
