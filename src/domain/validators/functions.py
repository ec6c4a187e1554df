"""Centralized validation functions (DRY principle).

All validation logic defined once, reused everywhere via Annotated types
(see src/domain/types.py). Validators are pure functions that raise
ValueError on validation failure, which Pydantic turns into field errors.
"""


def validate_not_blank(v: str) -> str:
    """Reject strings made only of whitespace.

    Args:
        v: Raw string value.

    Returns:
        The value with surrounding whitespace removed.

    Raises:
        ValueError: If nothing is left after stripping.

    Example:
        >>> validate_not_blank("  Alice ")
        'Alice'
        >>> validate_not_blank("   ")
        ValueError: Value cannot be blank
    """
    stripped = v.strip()
    if not stripped:
        raise ValueError("Value cannot be blank")
    return stripped


def validate_login(v: str) -> str:
    """Validate and normalize an account login.

    Logins are case-insensitive and may not contain whitespace.

    Example:
        >>> validate_login("Aprovame")
        'aprovame'
    """
    stripped = validate_not_blank(v)
    if any(c.isspace() for c in stripped):
        raise ValueError("Login cannot contain whitespace")
    return stripped.lower()


PASSWORD_MAX_BYTES = 72


def validate_password_bytes(v: str) -> str:
    """Reject passwords bcrypt cannot hash without truncation.

    Bcrypt only reads the first 72 bytes of its input, and bcrypt>=5 raises
    instead of truncating. The limit counts UTF-8 bytes, not characters.

    Example:
        >>> validate_password_bytes("aprovame123")
        'aprovame123'
        >>> validate_password_bytes("é" * 40)
        ValueError: Password cannot be longer than 72 bytes
    """
    if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password cannot be longer than {PASSWORD_MAX_BYTES} bytes")
    return v


def validate_json_number(v: object) -> object:
    """Accept only numeric input for amounts.

    Strings (and booleans, which are ints in Python) are refused so that
    "100" is a shape error rather than a silently coerced amount.
    """
    if isinstance(v, (str, bool)):
        raise ValueError("Value must be a number")
    return v
