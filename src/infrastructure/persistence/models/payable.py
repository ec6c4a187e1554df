"""Payable database model."""

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Payable(BaseMutableModel):
    """Payable row.

    Fields:
        assignor_id: FK to assignors.id (RESTRICT on delete, indexed)
        emission_date: Calendar date (no time component)
        value: Arbitrary precision NUMERIC, read back as Decimal
    """

    __tablename__ = "payables"

    assignor_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("assignors.id", ondelete="RESTRICT"),
        index=True,
        nullable=False,
    )
    emission_date: Mapped[date] = mapped_column(Date, nullable=False)
    value: Mapped[Decimal] = mapped_column(Numeric(asdecimal=True), nullable=False)
