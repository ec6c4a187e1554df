"""Assignor domain errors.

Error value constants for assignor validation and lifecycle rules.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Constants are never raised (return Failure(error) instead)

Usage:
    from src.domain.errors import AssignorError
    from src.core.result import Failure

    if existing is not None:
        return Failure(error=AssignorError.DOCUMENT_ALREADY_REGISTERED)
"""


class AssignorError:
    """Assignor error constants."""

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_DOCUMENT = "Assignor document must be 1-30 characters"
    INVALID_EMAIL = "Assignor email must be 1-140 characters"
    INVALID_PHONE = "Assignor phone must be 1-20 characters"
    INVALID_NAME = "Assignor name must be 1-140 characters"

    # -------------------------------------------------------------------------
    # Lifecycle Errors
    # -------------------------------------------------------------------------

    ASSIGNOR_NOT_FOUND = "Assignor not found"
    DOCUMENT_ALREADY_REGISTERED = "An assignor with this document already exists"
    ASSIGNOR_HAS_PAYABLES = "Assignor still has payables and cannot be removed"


class DuplicateAssignorDocument(Exception):
    """Raised when the store's unique index rejects an assignor document.

    Handlers check uniqueness before writing, but two concurrent writes can
    both pass that check. Repositories raise this for the loser so the
    handler can still answer with DOCUMENT_ALREADY_REGISTERED.

    Attributes:
        document: The document that is already registered.
    """

    def __init__(self, document: str) -> None:
        self.document = document
        super().__init__(AssignorError.DOCUMENT_ALREADY_REGISTERED)
