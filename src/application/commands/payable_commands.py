"""Payable commands (CQRS write operations).

Immutable intent objects for creating, editing and removing payables.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreatePayable:
    """Create a payable owed to an existing assignor.

    Attributes:
        payable_id: Freshly generated identifier.
        assignor_id: Owning assignor (must exist).
        emission_date: Emission date of the receivable.
        value: Amount.
    """

    payable_id: UUID
    assignor_id: UUID
    emission_date: date
    value: Decimal


@dataclass(frozen=True, kw_only=True)
class EditPayable:
    """Replace the editable fields of an existing payable."""

    payable_id: UUID
    assignor_id: UUID
    emission_date: date
    value: Decimal


@dataclass(frozen=True, kw_only=True)
class RemovePayable:
    """Remove a payable."""

    payable_id: UUID
