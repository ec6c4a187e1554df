"""Annotated types with centralized validation (DRY principle).

Define field limits once, use them in request schemas and commands alike.

Usage:
    from src.domain.types import Document, Phone

    class AssignorRequest(BaseModel):
        document: Document  # max 30 chars, not blank
        phone: Phone  # max 20 chars, not blank
"""

from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, Field

from src.domain.validators import (
    validate_json_number,
    validate_login,
    validate_not_blank,
    validate_password_bytes,
)

# ============================================================================
# Assignor field limits
# ============================================================================

DOCUMENT_MAX_LENGTH = 30
EMAIL_MAX_LENGTH = 140
PHONE_MAX_LENGTH = 20
NAME_MAX_LENGTH = 140

Document = Annotated[
    str,
    Field(
        max_length=DOCUMENT_MAX_LENGTH,
        description="Assignor document (CPF or CNPJ)",
        examples=["12345678900"],
    ),
    AfterValidator(validate_not_blank),
]

AssignorEmail = Annotated[
    str,
    Field(
        max_length=EMAIL_MAX_LENGTH,
        description="Assignor contact email",
        examples=["alice@example.com"],
    ),
    AfterValidator(validate_not_blank),
]

Phone = Annotated[
    str,
    Field(
        max_length=PHONE_MAX_LENGTH,
        description="Assignor contact phone",
        examples=["11999999999"],
    ),
    AfterValidator(validate_not_blank),
]

PersonName = Annotated[
    str,
    Field(
        max_length=NAME_MAX_LENGTH,
        description="Assignor display name",
        examples=["Alice"],
    ),
    AfterValidator(validate_not_blank),
]

# ============================================================================
# Account types
# ============================================================================

Login = Annotated[
    str,
    Field(
        min_length=3,
        max_length=140,
        description="Account login (case-insensitive)",
        examples=["aprovame"],
    ),
    AfterValidator(validate_login),
]

Password = Annotated[
    str,
    Field(
        min_length=8,
        max_length=128,
        description="Account password (8-128 chars, at most 72 UTF-8 bytes)",
        examples=["aprovame123"],
    ),
    AfterValidator(validate_password_bytes),
]

# ============================================================================
# Payable types
# ============================================================================

PayableValue = Annotated[
    Decimal,
    Field(allow_inf_nan=False, description="Payable amount", examples=[100]),
    BeforeValidator(validate_json_number),
]
