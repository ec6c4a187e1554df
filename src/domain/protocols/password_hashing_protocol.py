"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        def __init__(self, password_service: PasswordHashingProtocol):
            self._password_service = password_service

        password_hash = self._password_service.hash_password("aprovame123")
        ok = self._password_service.verify_password("aprovame123", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password (random salt, one-way)."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise (including
            malformed hashes; never raises).
        """
        ...
