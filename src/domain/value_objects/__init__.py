"""Domain value objects.

Immutable values with no identity of their own.
"""

from src.domain.value_objects.payable_with_assignor import (
    AssignorSummary,
    PayableWithAssignor,
)

__all__ = [
    "AssignorSummary",
    "PayableWithAssignor",
]
