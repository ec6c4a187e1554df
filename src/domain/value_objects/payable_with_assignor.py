"""PayableWithAssignor read-side projection.

Joins a payable with the public fields of its owning assignor. Built on
demand by PayableRepository.find_with_assignor_by_id; never persisted.

Usage:
    view = PayableWithAssignor.create(payable=payable, assignor=assignor)
    view.assignor.name  # "Alice"
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Self
from uuid import UUID

from src.domain.entities.assignor import Assignor
from src.domain.entities.payable import Payable


@dataclass(frozen=True, slots=True, kw_only=True)
class AssignorSummary:
    """Public assignor fields embedded in a payable view."""

    id: UUID
    document: str
    email: str
    name: str
    phone: str


@dataclass(frozen=True, slots=True, kw_only=True)
class PayableWithAssignor:
    """Immutable payable + assignor projection.

    Attributes:
        payable_id: Payable identifier.
        emission_date: Payable emission date.
        value: Payable amount.
        assignor: Public fields of the owning assignor.
    """

    payable_id: UUID
    emission_date: date
    value: Decimal
    assignor: AssignorSummary

    @property
    def assignor_id(self) -> UUID:
        """Id of the owning assignor."""
        return self.assignor.id

    @classmethod
    def create(cls, *, payable: Payable, assignor: Assignor) -> Self:
        """Build the projection from a payable and its assignor.

        Raises:
            ValueError: If the assignor is not the one the payable references.
        """
        if payable.assignor_id != assignor.id:
            raise ValueError(
                f"Assignor {assignor.id} is not the owner of payable {payable.id}"
            )
        return cls(
            payable_id=payable.id,
            emission_date=payable.emission_date,
            value=payable.value,
            assignor=AssignorSummary(
                id=assignor.id,
                document=assignor.document,
                email=assignor.email,
                name=assignor.name,
                phone=assignor.phone,
            ),
        )
