"""Payable queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetPayable:
    """Get a single payable by ID, joined with its assignor.

    Attributes:
        payable_id: Payable to retrieve.
    """

    payable_id: UUID
