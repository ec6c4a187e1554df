"""Authentication domain errors.

Error value constants for account registration, login and token checks.

Usage:
    from src.domain.errors import AuthenticationError
    from src.core.result import Failure

    result = token_service.validate_access_token(token)
    match result:
        case Failure(error=AuthenticationError.INVALID_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants.

    Error Categories:
        - Token errors: INVALID_TOKEN
        - Credential errors: INVALID_CREDENTIALS
        - Registration errors: LOGIN_ALREADY_REGISTERED
    """

    INVALID_TOKEN = "Invalid or expired access token"
    INVALID_CREDENTIALS = "Invalid login or password"
    LOGIN_ALREADY_REGISTERED = "Login already registered"
