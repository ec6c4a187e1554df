"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_DOCUMENT = "invalid_document"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE_NUMBER = "invalid_phone_number"
    INVALID_AMOUNT = "invalid_amount"

    # Resource errors
    ASSIGNOR_NOT_FOUND = "assignor_not_found"
    PAYABLE_NOT_FOUND = "payable_not_found"

    # Conflict errors
    ASSIGNOR_ALREADY_EXISTS = "assignor_already_exists"
    ASSIGNOR_HAS_PAYABLES = "assignor_has_payables"
    USER_ALREADY_EXISTS = "user_already_exists"

    # Integrity errors
    ASSIGNOR_REFERENCE_MISSING = "assignor_reference_missing"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
