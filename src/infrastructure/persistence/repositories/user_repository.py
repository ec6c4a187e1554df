"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses structural typing).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_login("aprovame")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, user: User) -> None:
        """Persist a new user.

        Raises:
            IntegrityError: If login already exists.
        """
        self.session.add(self._to_model(user))
        await self.session.commit()

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            Domain User entity if found, None otherwise.
        """
        user_model = await self.session.get(UserModel, user_id)
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_login(self, login: str) -> User | None:
        """Find user by login (stored lowercase, compared lowercase)."""
        stmt = select(UserModel).where(UserModel.login == login.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            login=user_model.login,
            password_hash=user_model.password_hash,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            login=user.login,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
