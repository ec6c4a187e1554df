"""AssignorRepository protocol for assignor persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.assignor import Assignor


class AssignorRepository(Protocol):
    """Assignor repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Contract:
        - Lookups return None for unknown ids (never raise).
        - update/delete of an assignor that is not stored are silent no-ops.
    """

    async def create(self, assignor: Assignor) -> None:
        """Persist a new assignor.

        Raises:
            DuplicateAssignorDocument: If the document is already stored.
        """
        ...

    async def update(self, assignor: Assignor) -> None:
        """Overwrite the stored assignor with the same id.

        Does nothing if no assignor with that id is stored.

        Raises:
            DuplicateAssignorDocument: If the new document is already stored.
        """
        ...

    async def delete(self, assignor: Assignor) -> None:
        """Remove the stored assignor with the same id.

        Does nothing if no assignor with that id is stored.
        """
        ...

    async def find_by_id(self, assignor_id: UUID) -> Assignor | None:
        """Find assignor by ID.

        Returns:
            Assignor if found, None otherwise.
        """
        ...

    async def find_by_document(self, document: str) -> Assignor | None:
        """Find assignor by document (uniqueness checks).

        Returns:
            Assignor if found, None otherwise.
        """
        ...
