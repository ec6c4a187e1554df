"""Authentication handler dependency factories.

Request-scoped handler instances for account registration and login.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.authenticate_user_handler import (
        AuthenticateUserHandler,
    )
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )


async def get_register_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Dependencies:
    - UserRepository (request-scoped, uses session)
    - BcryptPasswordService (app-scoped singleton)
    - Logger (app-scoped singleton)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return RegisterUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_authenticate_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "AuthenticateUserHandler":
    """Get AuthenticateUser command handler (request-scoped)."""
    from src.application.commands.handlers.authenticate_user_handler import (
        AuthenticateUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return AuthenticateUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )
