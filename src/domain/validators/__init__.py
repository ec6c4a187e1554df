"""Domain validators package.

Usage:
    from src.domain.validators import validate_login, validate_not_blank
"""

from src.domain.validators.functions import (
    PASSWORD_MAX_BYTES,
    validate_json_number,
    validate_login,
    validate_not_blank,
    validate_password_bytes,
)

__all__ = [
    "PASSWORD_MAX_BYTES",
    "validate_json_number",
    "validate_login",
    "validate_not_blank",
    "validate_password_bytes",
]
