"""Integration tests for AssignorRepository.

Architecture:
- REAL PostgreSQL database (test_database fixture, fresh tables per test)
- Each operation runs in its own session to verify persistence
"""

import pytest
from uuid_extensions import uuid7

from src.domain.errors import DuplicateAssignorDocument
from src.infrastructure.persistence.repositories import AssignorRepository


@pytest.mark.integration
class TestAssignorRepository:
    async def test_create_and_find_by_id(self, test_database, assignor_factory):
        assignor = assignor_factory()

        async with test_database.get_session() as session:
            await AssignorRepository(session=session).create(assignor)

        async with test_database.get_session() as session:
            found = await AssignorRepository(session=session).find_by_id(assignor.id)

        assert found is not None
        assert found.id == assignor.id
        assert found.document == assignor.document
        assert found.phone == assignor.phone

    async def test_find_by_document(self, test_database, assignor_factory):
        assignor = assignor_factory(document="55566677788")

        async with test_database.get_session() as session:
            repo = AssignorRepository(session=session)
            await repo.create(assignor)
            found = await repo.find_by_document("55566677788")
            missing = await repo.find_by_document("00000000000")

        assert found is not None
        assert found.id == assignor.id
        assert missing is None

    async def test_update_persists_changes(self, test_database, assignor_factory):
        assignor = assignor_factory()

        async with test_database.get_session() as session:
            await AssignorRepository(session=session).create(assignor)

        assignor.edit(name="Alice Doe", email="doe@example.com")
        async with test_database.get_session() as session:
            await AssignorRepository(session=session).update(assignor)

        async with test_database.get_session() as session:
            found = await AssignorRepository(session=session).find_by_id(assignor.id)

        assert found.name == "Alice Doe"
        assert found.email == "doe@example.com"

    async def test_update_and_delete_of_unknown_id_are_noops(
        self, test_database, assignor_factory
    ):
        ghost = assignor_factory()

        async with test_database.get_session() as session:
            repo = AssignorRepository(session=session)
            await repo.update(ghost)
            await repo.delete(ghost)
            assert await repo.find_by_id(ghost.id) is None

    async def test_delete_removes_row(self, test_database, assignor_factory):
        assignor = assignor_factory()

        async with test_database.get_session() as session:
            repo = AssignorRepository(session=session)
            await repo.create(assignor)
            await repo.delete(assignor)

        async with test_database.get_session() as session:
            assert await AssignorRepository(session=session).find_by_id(assignor.id) is None

    async def test_find_unknown_returns_none(self, test_database):
        async with test_database.get_session() as session:
            assert await AssignorRepository(session=session).find_by_id(uuid7()) is None

    async def test_duplicate_document_raises_domain_error(
        self, test_database, assignor_factory
    ):
        first = assignor_factory(document="44455566677")
        second = assignor_factory(document="44455566677")

        async with test_database.get_session() as session:
            await AssignorRepository(session=session).create(first)

        async with test_database.get_session() as session:
            repo = AssignorRepository(session=session)
            with pytest.raises(DuplicateAssignorDocument):
                await repo.create(second)
            assert await repo.find_by_id(second.id) is None

    async def test_update_to_taken_document_raises_domain_error(
        self, test_database, assignor_factory
    ):
        first = assignor_factory(document="111")
        second = assignor_factory(document="222")

        async with test_database.get_session() as session:
            repo = AssignorRepository(session=session)
            await repo.create(first)
            await repo.create(second)

        second.edit(document="111")
        async with test_database.get_session() as session:
            with pytest.raises(DuplicateAssignorDocument):
                await AssignorRepository(session=session).update(second)

        async with test_database.get_session() as session:
            found = await AssignorRepository(session=session).find_by_id(second.id)

        assert found.document == "222"
