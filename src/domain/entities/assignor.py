"""Assignor domain entity.

The assignor is the party who is owed money in a receivable. Payables point
at it by id; the assignor does not hold its payables.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.core.result import Failure, Result, Success
from src.domain.errors import AssignorError
from src.domain.types import (
    DOCUMENT_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
)


def _fits(value: str, max_length: int) -> bool:
    return bool(value and value.strip()) and len(value) <= max_length


@dataclass
class Assignor:
    """Assignor (creditor) entity.

    Business Rules:
        - document: 1-30 characters, unique across assignors
        - email: 1-140 characters
        - phone: 1-20 characters
        - name: 1-140 characters

    Attributes:
        id: Opaque unique identifier (generated at the HTTP edge).
        document: Tax document (CPF/CNPJ) of the assignor.
        email: Contact email.
        phone: Contact phone.
        name: Display name.
        created_at: Timestamp when assignor was created.
        updated_at: Timestamp when assignor was last edited.

    Example:
        >>> assignor = Assignor(
        ...     id=uuid7(),
        ...     document="12345678900",
        ...     email="alice@example.com",
        ...     phone="11999999999",
        ...     name="Alice",
        ... )
        >>> assignor.edit(name="Alice Doe")
        Success(value=None)
    """

    id: UUID
    document: str
    email: str
    phone: str
    name: str

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate field limits after initialization.

        Raises:
            ValueError: If any field is blank or too long. Construction
                errors are programming errors; request schemas enforce the
                same limits before a command is built.
        """
        error = self._check(self.document, self.email, self.phone, self.name)
        if error is not None:
            raise ValueError(error)

    @staticmethod
    def _check(document: str, email: str, phone: str, name: str) -> str | None:
        if not _fits(document, DOCUMENT_MAX_LENGTH):
            return AssignorError.INVALID_DOCUMENT
        if not _fits(email, EMAIL_MAX_LENGTH):
            return AssignorError.INVALID_EMAIL
        if not _fits(phone, PHONE_MAX_LENGTH):
            return AssignorError.INVALID_PHONE
        if not _fits(name, NAME_MAX_LENGTH):
            return AssignorError.INVALID_NAME
        return None

    def edit(
        self,
        document: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        name: str | None = None,
    ) -> Result[None, str]:
        """Update assignor fields in place.

        Only provided fields change (None values ignored). Nothing is
        modified when any provided value breaks a field limit.

        Returns:
            Success(None): Fields updated.
            Failure(error): A provided value is blank or too long.

        Side Effects (on success):
            - Updates provided fields
            - Updates updated_at timestamp
        """
        new_document = self.document if document is None else document
        new_email = self.email if email is None else email
        new_phone = self.phone if phone is None else phone
        new_name = self.name if name is None else name

        error = self._check(new_document, new_email, new_phone, new_name)
        if error is not None:
            return Failure(error=error)

        self.document = new_document
        self.email = new_email
        self.phone = new_phone
        self.name = new_name
        self.updated_at = datetime.now(UTC)
        return Success(value=None)
