"""Unit tests for the in-memory repository doubles.

The doubles back the handler and API tests, so they must keep the same
contract as the SQLAlchemy repositories: unknown ids are no-ops for
update/delete and lookups return None.
"""

from decimal import Decimal

import pytest
from uuid_extensions import uuid7

from src.domain.errors import DuplicateAssignorDocument
from tests.utils.in_memory_repositories import (
    InMemoryAssignorRepository,
    InMemoryPayableRepository,
)


@pytest.mark.unit
class TestInMemoryAssignorRepository:
    async def test_update_and_delete_of_unknown_id_leave_items_unchanged(
        self, assignor_factory
    ):
        repo = InMemoryAssignorRepository()
        kept = assignor_factory()
        await repo.create(kept)
        before = dict(repo.items)

        ghost = assignor_factory(document="00000000000")
        await repo.update(ghost)
        await repo.delete(ghost)

        assert repo.items == before
        assert await repo.find_by_id(ghost.id) is None

    async def test_duplicate_document_is_refused(self, assignor_factory):
        repo = InMemoryAssignorRepository()
        await repo.create(assignor_factory(document="123"))

        with pytest.raises(DuplicateAssignorDocument):
            await repo.create(assignor_factory(document="123"))

        assert len(repo.items) == 1

    async def test_returned_entity_is_a_copy(self, assignor_factory):
        repo = InMemoryAssignorRepository()
        assignor = assignor_factory()
        await repo.create(assignor)

        found = await repo.find_by_id(assignor.id)
        found.edit(name="Changed")

        assert repo.items[assignor.id].name == assignor.name


@pytest.mark.unit
class TestInMemoryPayableRepository:
    async def test_update_and_delete_of_unknown_id_leave_items_unchanged(
        self, assignor_factory, payable_factory
    ):
        assignors = InMemoryAssignorRepository()
        repo = InMemoryPayableRepository(assignors)
        assignor = assignor_factory()
        await assignors.create(assignor)
        kept = payable_factory(assignor.id)
        await repo.create(kept)
        before = dict(repo.items)

        ghost = payable_factory(assignor.id, value=Decimal("9"))
        await repo.update(ghost)
        await repo.delete(ghost)

        assert repo.items == before
        assert repo.items[kept.id].value == Decimal("100")
        assert await repo.find_by_id(ghost.id) is None

    async def test_unknown_id_lookups_return_none(self):
        repo = InMemoryPayableRepository(InMemoryAssignorRepository())

        assert await repo.find_by_id(uuid7()) is None
        assert await repo.find_with_assignor_by_id(uuid7()) is None
