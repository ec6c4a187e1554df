"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.assignor import Assignor
from src.domain.entities.payable import Payable
from src.domain.entities.user import User

__all__ = [
    "Assignor",
    "Payable",
    "User",
]
