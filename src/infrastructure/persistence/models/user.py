"""User database model (API accounts).

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """Account able to request access tokens.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        login: Unique lowercase login (indexed)
        password_hash: Bcrypt hashed password
    """

    __tablename__ = "users"

    login: Mapped[str] = mapped_column(
        String(140),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
