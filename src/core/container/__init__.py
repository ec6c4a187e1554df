"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_assignor_handler, ...

Organized by concern:
- infrastructure: Core services (database, security, logging)
- auth_handlers: Account registration/login handler factories
- receivable_handlers: Assignor and payable handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_authenticate_user_handler,
    get_register_user_handler,
)

# Assignor/payable handlers
from src.core.container.receivable_handlers import (
    get_create_assignor_handler,
    get_create_payable_handler,
    get_edit_assignor_handler,
    get_edit_payable_handler,
    get_get_assignor_handler,
    get_get_payable_handler,
    get_remove_assignor_handler,
    get_remove_payable_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Auth handlers
    "get_authenticate_user_handler",
    "get_register_user_handler",
    # Assignor/payable handlers
    "get_create_assignor_handler",
    "get_create_payable_handler",
    "get_edit_assignor_handler",
    "get_edit_payable_handler",
    "get_get_assignor_handler",
    "get_get_payable_handler",
    "get_remove_assignor_handler",
    "get_remove_payable_handler",
]
