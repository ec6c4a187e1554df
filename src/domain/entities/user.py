"""User domain entity (API account).

Accounts exist only to obtain access tokens for the protected assignor and
payable routes. Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """API account.

    Attributes:
        id: Unique user identifier.
        login: Unique, lowercase login.
        password_hash: Bcrypt hashed password (never plaintext).
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.
    """

    id: UUID
    login: str
    password_hash: str  # Never store plaintext passwords

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
