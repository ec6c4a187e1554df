"""UserRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Methods:
        create: Persist new user
        find_by_id: Retrieve user by ID
        find_by_login: Retrieve user by login
    """

    async def create(self, user: User) -> None:
        """Persist a new user.

        Raises:
            IntegrityError: If login already exists (database constraint).
        """
        ...

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_login(self, login: str) -> User | None:
        """Find user by login (case-insensitive).

        Returns:
            User if found, None otherwise.
        """
        ...
