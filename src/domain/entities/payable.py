"""Payable domain entity.

A payable is a receivable record owed to an assignor. It holds a weak
reference (assignor_id) to its assignor; existence of that assignor is
checked by the application handlers, not by the entity.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from decimal import Decimal
from uuid import UUID

from src.core.result import Failure, Result, Success
from src.domain.errors import PayableError


@dataclass
class Payable:
    """Receivable owed to an assignor.

    Attributes:
        id: Opaque unique identifier.
        assignor_id: Owning assignor (required reference).
        emission_date: Calendar date the receivable was issued.
        value: Amount (currency implicit).
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    assignor_id: UUID
    emission_date: date
    value: Decimal

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Normalize value to Decimal and reject NaN/infinity.

        Raises:
            ValueError: If value is not a finite number.
        """
        value = self.value if isinstance(self.value, Decimal) else Decimal(str(self.value))
        if not value.is_finite():
            raise ValueError(PayableError.INVALID_VALUE)
        self.value = value

    def edit(
        self,
        value: Decimal | None = None,
        emission_date: date | None = None,
        assignor_id: UUID | None = None,
    ) -> Result[None, str]:
        """Update payable fields in place (None values ignored).

        Returns:
            Success(None): Fields updated.
            Failure(error): Value is not a finite number.
        """
        if value is not None:
            new_value = value if isinstance(value, Decimal) else Decimal(str(value))
            if not new_value.is_finite():
                return Failure(error=PayableError.INVALID_VALUE)
            self.value = new_value

        if emission_date is not None:
            self.emission_date = emission_date

        if assignor_id is not None:
            self.assignor_id = assignor_id

        self.updated_at = datetime.now(UTC)
        return Success(value=None)
