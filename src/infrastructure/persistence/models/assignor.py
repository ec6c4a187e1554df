"""Assignor database model.

Column lengths mirror the limits enforced by the request schemas and the
domain entity (document 30, email 140, phone 20, name 140).
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Assignor(BaseMutableModel):
    """Assignor row.

    Indexes:
        - document: unique (duplicate assignor rule)
    """

    __tablename__ = "assignors"

    document: Mapped[str] = mapped_column(
        String(30),
        unique=True,
        index=True,
        nullable=False,
    )
    email: Mapped[str] = mapped_column(String(140), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(140), nullable=False)
