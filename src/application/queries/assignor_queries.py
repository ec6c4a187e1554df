"""Assignor queries (CQRS read operations).

Queries NEVER change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetAssignor:
    """Get a single assignor by ID.

    Example:
        >>> query = GetAssignor(assignor_id=assignor_id)
        >>> result = await handler.handle(query)
    """

    assignor_id: UUID
