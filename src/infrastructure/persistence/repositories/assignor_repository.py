"""AssignorRepository - SQLAlchemy implementation of AssignorRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Assignor entities and database AssignorModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.assignor import Assignor
from src.domain.errors import DuplicateAssignorDocument
from src.infrastructure.persistence.models.assignor import Assignor as AssignorModel


class AssignorRepository:
    """SQLAlchemy implementation of AssignorRepository protocol.

    Update and delete look the row up first and do nothing when it is
    absent, matching the protocol's no-op contract.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, assignor: Assignor) -> None:
        """Persist a new assignor.

        Raises:
            DuplicateAssignorDocument: If the unique index rejects the document.
        """
        self.session.add(self._to_model(assignor))
        await self._commit(assignor.document)

    async def update(self, assignor: Assignor) -> None:
        """Overwrite the stored assignor with the same id (no-op if absent).

        Raises:
            DuplicateAssignorDocument: If the new document is already taken.
        """
        assignor_model = await self.session.get(AssignorModel, assignor.id)
        if assignor_model is None:
            return

        assignor_model.document = assignor.document
        assignor_model.email = assignor.email
        assignor_model.phone = assignor.phone
        assignor_model.name = assignor.name
        assignor_model.updated_at = assignor.updated_at

        await self._commit(assignor.document)

    async def _commit(self, document: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateAssignorDocument(document=document) from e

    async def delete(self, assignor: Assignor) -> None:
        """Remove the stored assignor with the same id (no-op if absent)."""
        assignor_model = await self.session.get(AssignorModel, assignor.id)
        if assignor_model is None:
            return

        await self.session.delete(assignor_model)
        await self.session.commit()

    async def find_by_id(self, assignor_id: UUID) -> Assignor | None:
        """Find assignor by ID.

        Returns:
            Domain Assignor entity if found, None otherwise.
        """
        assignor_model = await self.session.get(AssignorModel, assignor_id)
        if assignor_model is None:
            return None
        return self._to_domain(assignor_model)

    async def find_by_document(self, document: str) -> Assignor | None:
        """Find assignor by its (unique) document."""
        stmt = select(AssignorModel).where(AssignorModel.document == document)
        result = await self.session.execute(stmt)
        assignor_model = result.scalar_one_or_none()

        if assignor_model is None:
            return None

        return self._to_domain(assignor_model)

    def _to_domain(self, assignor_model: AssignorModel) -> Assignor:
        """Convert database model to domain entity."""
        return Assignor(
            id=assignor_model.id,
            document=assignor_model.document,
            email=assignor_model.email,
            phone=assignor_model.phone,
            name=assignor_model.name,
            created_at=assignor_model.created_at,
            updated_at=assignor_model.updated_at,
        )

    def _to_model(self, assignor: Assignor) -> AssignorModel:
        """Convert domain entity to database model."""
        return AssignorModel(
            id=assignor.id,
            document=assignor.document,
            email=assignor.email,
            phone=assignor.phone,
            name=assignor.name,
            created_at=assignor.created_at,
            updated_at=assignor.updated_at,
        )
