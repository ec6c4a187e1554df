"""Core errors package.

Usage:
    from src.core.errors import DomainError, NotFoundError, ValidationError
"""

from src.core.errors.common_errors import NotFoundError, ValidationError
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
