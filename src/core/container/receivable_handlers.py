"""Assignor and payable handler dependency factories.

Request-scoped handler instances. Every repository a handler receives is
built on the same request session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers.create_assignor_handler import (
        CreateAssignorHandler,
    )
    from src.application.commands.handlers.create_payable_handler import (
        CreatePayableHandler,
    )
    from src.application.commands.handlers.edit_assignor_handler import (
        EditAssignorHandler,
    )
    from src.application.commands.handlers.edit_payable_handler import (
        EditPayableHandler,
    )
    from src.application.commands.handlers.remove_assignor_handler import (
        RemoveAssignorHandler,
    )
    from src.application.commands.handlers.remove_payable_handler import (
        RemovePayableHandler,
    )
    from src.application.queries.handlers.get_assignor_handler import (
        GetAssignorHandler,
    )
    from src.application.queries.handlers.get_payable_handler import (
        GetPayableHandler,
    )


# ============================================================================
# Assignor Handler Factories
# ============================================================================


async def get_create_assignor_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateAssignorHandler":
    """Get CreateAssignor command handler (request-scoped)."""
    from src.application.commands.handlers.create_assignor_handler import (
        CreateAssignorHandler,
    )
    from src.infrastructure.persistence.repositories import AssignorRepository

    return CreateAssignorHandler(
        assignor_repo=AssignorRepository(session=session),
        logger=get_logger(),
    )


async def get_edit_assignor_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "EditAssignorHandler":
    """Get EditAssignor command handler (request-scoped)."""
    from src.application.commands.handlers.edit_assignor_handler import (
        EditAssignorHandler,
    )
    from src.infrastructure.persistence.repositories import AssignorRepository

    return EditAssignorHandler(
        assignor_repo=AssignorRepository(session=session),
        logger=get_logger(),
    )


async def get_remove_assignor_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RemoveAssignorHandler":
    """Get RemoveAssignor command handler (request-scoped)."""
    from src.application.commands.handlers.remove_assignor_handler import (
        RemoveAssignorHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AssignorRepository,
        PayableRepository,
    )

    return RemoveAssignorHandler(
        assignor_repo=AssignorRepository(session=session),
        payable_repo=PayableRepository(session=session),
        logger=get_logger(),
    )


async def get_get_assignor_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetAssignorHandler":
    """Get GetAssignor query handler (request-scoped)."""
    from src.application.queries.handlers.get_assignor_handler import (
        GetAssignorHandler,
    )
    from src.infrastructure.persistence.repositories import AssignorRepository

    return GetAssignorHandler(assignor_repo=AssignorRepository(session=session))


# ============================================================================
# Payable Handler Factories
# ============================================================================


async def get_create_payable_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreatePayableHandler":
    """Get CreatePayable command handler (request-scoped)."""
    from src.application.commands.handlers.create_payable_handler import (
        CreatePayableHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AssignorRepository,
        PayableRepository,
    )

    return CreatePayableHandler(
        payable_repo=PayableRepository(session=session),
        assignor_repo=AssignorRepository(session=session),
        logger=get_logger(),
    )


async def get_edit_payable_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "EditPayableHandler":
    """Get EditPayable command handler (request-scoped)."""
    from src.application.commands.handlers.edit_payable_handler import (
        EditPayableHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AssignorRepository,
        PayableRepository,
    )

    return EditPayableHandler(
        payable_repo=PayableRepository(session=session),
        assignor_repo=AssignorRepository(session=session),
        logger=get_logger(),
    )


async def get_remove_payable_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RemovePayableHandler":
    """Get RemovePayable command handler (request-scoped)."""
    from src.application.commands.handlers.remove_payable_handler import (
        RemovePayableHandler,
    )
    from src.infrastructure.persistence.repositories import PayableRepository

    return RemovePayableHandler(
        payable_repo=PayableRepository(session=session),
        logger=get_logger(),
    )


async def get_get_payable_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetPayableHandler":
    """Get GetPayable query handler (request-scoped)."""
    from src.application.queries.handlers.get_payable_handler import (
        GetPayableHandler,
    )
    from src.infrastructure.persistence.repositories import PayableRepository

    return GetPayableHandler(
        payable_repo=PayableRepository(session=session),
        logger=get_logger(),
    )
