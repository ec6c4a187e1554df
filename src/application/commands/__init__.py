"""Commands - Write operations that change state.

Commands represent intent to perform an action. They are immutable
dataclasses with imperative names (CreateAssignor, RemovePayable).

Each command has a corresponding handler in commands/handlers/.
"""

from src.application.commands.assignor_commands import (
    CreateAssignor,
    EditAssignor,
    RemoveAssignor,
)
from src.application.commands.auth_commands import (
    AccessToken,
    AuthenticateUser,
    RegisterUser,
)
from src.application.commands.payable_commands import (
    CreatePayable,
    EditPayable,
    RemovePayable,
)

__all__ = [
    # Assignor commands
    "CreateAssignor",
    "EditAssignor",
    "RemoveAssignor",
    # Payable commands
    "CreatePayable",
    "EditPayable",
    "RemovePayable",
    # Account commands
    "AccessToken",
    "AuthenticateUser",
    "RegisterUser",
]
