"""Domain errors package.

Usage:
    from src.domain.errors import AssignorError, PayableError
"""

from src.domain.errors.assignor_error import AssignorError, DuplicateAssignorDocument
from src.domain.errors.authentication_error import AuthenticationError
from src.domain.errors.payable_error import MissingAssignorReference, PayableError

__all__ = [
    "AssignorError",
    "AuthenticationError",
    "DuplicateAssignorDocument",
    "MissingAssignorReference",
    "PayableError",
]
