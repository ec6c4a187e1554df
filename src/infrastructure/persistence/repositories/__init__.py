"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.assignor_repository import (
    AssignorRepository,
)
from src.infrastructure.persistence.repositories.payable_repository import (
    PayableRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "AssignorRepository",
    "PayableRepository",
    "UserRepository",
]
