"""Integration tests for UserRepository (REAL PostgreSQL)."""

import pytest
from uuid_extensions import uuid7

from src.domain.entities.user import User
from src.infrastructure.persistence.repositories import UserRepository


@pytest.mark.integration
class TestUserRepository:
    async def test_create_and_find(self, test_database):
        user = User(id=uuid7(), login="aprovame", password_hash="hashed")

        async with test_database.get_session() as session:
            await UserRepository(session=session).create(user)

        async with test_database.get_session() as session:
            repo = UserRepository(session=session)
            by_id = await repo.find_by_id(user.id)
            by_login = await repo.find_by_login("APROVAME")

        assert by_id.login == "aprovame"
        assert by_login.id == user.id
        assert by_login.password_hash == "hashed"

    async def test_unknown_login_returns_none(self, test_database):
        async with test_database.get_session() as session:
            assert await UserRepository(session=session).find_by_login("nobody") is None
