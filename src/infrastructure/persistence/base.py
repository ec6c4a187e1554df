"""Declarative base for the aproveme tables.

- BaseModel: id + created_at for every table
- BaseMutableModel: adds updated_at for rows that can be edited

Domain entities never inherit from these; repositories map between the two.

Usage:
    class AssignorModel(BaseMutableModel):
        __tablename__ = "assignors"
        document: Mapped[str]
        # Has: id, created_at, updated_at
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Ids are normally assigned by the caller (uuid7 at the HTTP edge); the
    column default only covers rows inserted without one.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Adds an updated_at column refreshed by the database on UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for editable rows (id, created_at, updated_at)."""

    __abstract__ = True
