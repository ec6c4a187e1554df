"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL)
- Password hashing (bcrypt)
- Token generation (JWT)
- Logging (structlog console)

Plus the request-scoped database session.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from settings.bcrypt_rounds.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns:
        JWTService signed with settings.secret_key, lifetime
        settings.access_token_expire_minutes.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    base = ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
    return base.bind(
        app=settings.app_name,
        version=settings.app_version,
        env=settings.environment.value,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Usage:
        @router.get("/integrations/assignor/{id}")
        async def get_assignor(
            session: AsyncSession = Depends(get_db_session)
        ):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
