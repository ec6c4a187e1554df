"""Fixtures for HTTP tests.

Handler factories are overridden with the real handlers wired to in-memory
repositories, so requests go through routing, schemas, handlers and error
mapping without a database. Bearer tokens are real JWTs signed with the
configured secret.
"""

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.commands.handlers.authenticate_user_handler import (
    AuthenticateUserHandler,
)
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
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.commands.handlers.remove_assignor_handler import (
    RemoveAssignorHandler,
)
from src.application.commands.handlers.remove_payable_handler import (
    RemovePayableHandler,
)
from src.application.queries.handlers.get_assignor_handler import GetAssignorHandler
from src.application.queries.handlers.get_payable_handler import GetPayableHandler
from src.core import container
from src.main import app
from tests.utils.in_memory_repositories import (
    InMemoryAssignorRepository,
    InMemoryPayableRepository,
    InMemoryUserRepository,
)


class Store:
    """In-memory repositories shared by every handler of one test."""

    def __init__(self) -> None:
        self.assignors = InMemoryAssignorRepository()
        self.payables = InMemoryPayableRepository(self.assignors)
        self.users = InMemoryUserRepository()


@pytest.fixture
def store():
    return Store()


@pytest.fixture(autouse=True)
def override_handlers(store, mock_logger):
    """Wire handler factories to the in-memory store for each test."""
    overrides = {
        container.get_create_assignor_handler: lambda: CreateAssignorHandler(
            assignor_repo=store.assignors, logger=mock_logger
        ),
        container.get_edit_assignor_handler: lambda: EditAssignorHandler(
            assignor_repo=store.assignors, logger=mock_logger
        ),
        container.get_remove_assignor_handler: lambda: RemoveAssignorHandler(
            assignor_repo=store.assignors,
            payable_repo=store.payables,
            logger=mock_logger,
        ),
        container.get_get_assignor_handler: lambda: GetAssignorHandler(
            assignor_repo=store.assignors
        ),
        container.get_create_payable_handler: lambda: CreatePayableHandler(
            payable_repo=store.payables,
            assignor_repo=store.assignors,
            logger=mock_logger,
        ),
        container.get_edit_payable_handler: lambda: EditPayableHandler(
            payable_repo=store.payables,
            assignor_repo=store.assignors,
            logger=mock_logger,
        ),
        container.get_remove_payable_handler: lambda: RemovePayableHandler(
            payable_repo=store.payables, logger=mock_logger
        ),
        container.get_get_payable_handler: lambda: GetPayableHandler(
            payable_repo=store.payables, logger=mock_logger
        ),
        container.get_register_user_handler: lambda: RegisterUserHandler(
            user_repo=store.users,
            password_service=container.get_password_service(),
            logger=mock_logger,
        ),
        container.get_authenticate_user_handler: lambda: AuthenticateUserHandler(
            user_repo=store.users,
            password_service=container.get_password_service(),
            token_service=container.get_token_service(),
            logger=mock_logger,
        ),
    }
    app.dependency_overrides.update(overrides)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """TestClient without lifespan (no database pool is opened)."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers():
    token = container.get_token_service().generate_access_token(
        user_id=uuid7(), login="aprovame"
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def assignor_body():
    return {
        "document": "12345678900",
        "email": "alice@example.com",
        "phone": "11999999999",
        "name": "Alice",
    }
