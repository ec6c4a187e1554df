"""PayableRepository protocol for payable persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.payable import Payable
from src.domain.value_objects.payable_with_assignor import PayableWithAssignor


class PayableRepository(Protocol):
    """Payable repository protocol (port).

    Contract:
        - find_by_id returns None for unknown ids.
        - update/delete of a payable that is not stored are silent no-ops.
        - find_with_assignor_by_id returns None for an unknown payable but
          raises MissingAssignorReference when the payable exists and its
          assignor does not.
    """

    async def create(self, payable: Payable) -> None:
        """Persist a new payable."""
        ...

    async def update(self, payable: Payable) -> None:
        """Overwrite the stored payable with the same id (no-op if absent)."""
        ...

    async def delete(self, payable: Payable) -> None:
        """Remove the stored payable with the same id (no-op if absent)."""
        ...

    async def find_by_id(self, payable_id: UUID) -> Payable | None:
        """Find payable by ID.

        Returns:
            Payable if found, None otherwise.
        """
        ...

    async def find_with_assignor_by_id(
        self, payable_id: UUID
    ) -> PayableWithAssignor | None:
        """Find payable by ID joined with its assignor's public fields.

        Returns:
            PayableWithAssignor if found, None if the payable does not exist.

        Raises:
            MissingAssignorReference: If the payable's assignor is gone.
        """
        ...

    async def exists_for_assignor(self, assignor_id: UUID) -> bool:
        """Check whether any payable references the assignor."""
        ...
