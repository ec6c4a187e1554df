"""Assignor commands (CQRS write operations).

Commands represent intent to change assignor state.
All commands are immutable (frozen=True) and use keyword-only arguments.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- Identifiers are generated by the caller (HTTP edge) before dispatch
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.types import AssignorEmail, Document, PersonName, Phone


@dataclass(frozen=True, kw_only=True)
class CreateAssignor:
    """Create a new assignor.

    Attributes:
        assignor_id: Freshly generated identifier.
        document: Tax document, unique across assignors.
        email: Contact email.
        phone: Contact phone.
        name: Display name.

    Example:
        >>> command = CreateAssignor(
        ...     assignor_id=uuid7(),
        ...     document="12345678900",
        ...     email="alice@example.com",
        ...     phone="11999999999",
        ...     name="Alice",
        ... )
        >>> result = await handler.handle(command)
    """

    assignor_id: UUID
    document: Document
    email: AssignorEmail
    phone: Phone
    name: PersonName


@dataclass(frozen=True, kw_only=True)
class EditAssignor:
    """Replace the editable fields of an existing assignor."""

    assignor_id: UUID
    document: Document
    email: AssignorEmail
    phone: Phone
    name: PersonName


@dataclass(frozen=True, kw_only=True)
class RemoveAssignor:
    """Remove an assignor that no payable references."""

    assignor_id: UUID
