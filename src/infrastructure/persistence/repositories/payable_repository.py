"""PayableRepository - SQLAlchemy implementation of PayableRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Payable entities and database PayableModel, and builds
the PayableWithAssignor projection with a single outer join.
"""

from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.payable import Payable
from src.domain.errors import MissingAssignorReference
from src.domain.value_objects.payable_with_assignor import (
    AssignorSummary,
    PayableWithAssignor,
)
from src.infrastructure.persistence.models.assignor import Assignor as AssignorModel
from src.infrastructure.persistence.models.payable import Payable as PayableModel


class PayableRepository:
    """SQLAlchemy implementation of PayableRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> repo = PayableRepository(session)
        >>> view = await repo.find_with_assignor_by_id(payable_id)
        >>> view.assignor.name
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, payable: Payable) -> None:
        """Persist a new payable."""
        self.session.add(self._to_model(payable))
        await self.session.commit()

    async def update(self, payable: Payable) -> None:
        """Overwrite the stored payable with the same id (no-op if absent)."""
        payable_model = await self.session.get(PayableModel, payable.id)
        if payable_model is None:
            return

        payable_model.assignor_id = payable.assignor_id
        payable_model.emission_date = payable.emission_date
        payable_model.value = payable.value
        payable_model.updated_at = payable.updated_at

        await self.session.commit()

    async def delete(self, payable: Payable) -> None:
        """Remove the stored payable with the same id (no-op if absent)."""
        payable_model = await self.session.get(PayableModel, payable.id)
        if payable_model is None:
            return

        await self.session.delete(payable_model)
        await self.session.commit()

    async def find_by_id(self, payable_id: UUID) -> Payable | None:
        """Find payable by ID.

        Returns:
            Domain Payable entity if found, None otherwise.
        """
        payable_model = await self.session.get(PayableModel, payable_id)
        if payable_model is None:
            return None
        return self._to_domain(payable_model)

    async def find_with_assignor_by_id(
        self, payable_id: UUID
    ) -> PayableWithAssignor | None:
        """Find payable by ID joined with its assignor's public fields.

        Returns:
            PayableWithAssignor if found, None if the payable does not exist.

        Raises:
            MissingAssignorReference: If the payable row exists but its
                assignor row does not.
        """
        stmt = (
            select(PayableModel, AssignorModel)
            .outerjoin(AssignorModel, PayableModel.assignor_id == AssignorModel.id)
            .where(PayableModel.id == payable_id)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        payable_model, assignor_model = row
        if assignor_model is None:
            raise MissingAssignorReference(
                payable_id=payable_model.id,
                assignor_id=payable_model.assignor_id,
            )

        return PayableWithAssignor(
            payable_id=payable_model.id,
            emission_date=payable_model.emission_date,
            value=payable_model.value,
            assignor=AssignorSummary(
                id=assignor_model.id,
                document=assignor_model.document,
                email=assignor_model.email,
                name=assignor_model.name,
                phone=assignor_model.phone,
            ),
        )

    async def exists_for_assignor(self, assignor_id: UUID) -> bool:
        """Check whether any payable references the assignor."""
        stmt = select(exists().where(PayableModel.assignor_id == assignor_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    def _to_domain(self, payable_model: PayableModel) -> Payable:
        """Convert database model to domain entity."""
        return Payable(
            id=payable_model.id,
            assignor_id=payable_model.assignor_id,
            emission_date=payable_model.emission_date,
            value=payable_model.value,
            created_at=payable_model.created_at,
            updated_at=payable_model.updated_at,
        )

    def _to_model(self, payable: Payable) -> PayableModel:
        """Convert domain entity to database model."""
        return PayableModel(
            id=payable.id,
            assignor_id=payable.assignor_id,
            emission_date=payable.emission_date,
            value=payable.value,
            created_at=payable.created_at,
            updated_at=payable.updated_at,
        )
