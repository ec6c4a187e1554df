"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol. The cost factor comes from
settings.bcrypt_rounds; tests use the minimum (4) to stay fast.
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("aprovame123")
        password_service.verify_password("aprovame123", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt log2 rounds (4-31). Each +1 doubles hashing time.

        Raises:
            ValueError: If cost_factor is outside bcrypt's supported range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            60-character bcrypt hash ($2b$<cost>$...). A new salt is drawn on
            every call, so hashing the same password twice gives different
            strings.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise (malformed hashes
            included).
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            return False
