"""Registration handler for API accounts.

Flow:
1. Validate login/password (handled by Annotated types)
2. Check login uniqueness
3. Hash password
4. Create User entity and persist
5. Return Success(user_id)

On failure:
- Log a warning
- Return Failure(error)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import AuthenticationError
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class RegisterUserHandler:
    """Handler for user registration command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (User entity, protocols)
    - Infrastructure layer (repositories, services via dependency injection)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence
            password_service: Password hashing service
            logger: Structured logger
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[UUID, str]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command (login and password validated by Annotated types)

        Returns:
            Success(user_id) on successful registration
            Failure(AuthenticationError.LOGIN_ALREADY_REGISTERED) on duplicate login
        """
        existing_user = await self._user_repo.find_by_login(cmd.login)
        if existing_user is not None:
            self._logger.warning(
                "User registration rejected",
                reason=AuthenticationError.LOGIN_ALREADY_REGISTERED,
                login=cmd.login,
            )
            return Failure(error=AuthenticationError.LOGIN_ALREADY_REGISTERED)

        password_hash = self._password_service.hash_password(cmd.password)

        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            login=cmd.login,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        await self._user_repo.create(user)

        self._logger.info("User registered", user_id=str(user.id), login=user.login)
        return Success(value=user.id)
