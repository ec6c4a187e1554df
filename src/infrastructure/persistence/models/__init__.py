"""Database models for persistence layer.

SQLAlchemy models mapped to the assignors, payables and users tables.
Domain entities live in src/domain/entities/; repositories map between them.
"""

from src.infrastructure.persistence.models.assignor import Assignor
from src.infrastructure.persistence.models.payable import Payable
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Assignor",
    "Payable",
    "User",
]
