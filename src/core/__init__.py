"""Core shared kernel.

Foundational pieces used by every layer of the receivables API:
- Result types for railway-oriented programming
- Base error dataclasses and error codes
- Application settings (see src.core.config)

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
