"""In-memory repository doubles.

Structurally satisfy the domain repository protocols. Entities are stored by
id; update/delete check existence first and do nothing for unknown ids.
Stored entities are copies, so mutating a returned entity never changes
the store until update() is called.
Assignor documents are unique, as in the real table.
"""

from copy import deepcopy
from uuid import UUID

from src.domain.entities.assignor import Assignor
from src.domain.entities.payable import Payable
from src.domain.entities.user import User
from src.domain.errors import DuplicateAssignorDocument, MissingAssignorReference
from src.domain.value_objects.payable_with_assignor import PayableWithAssignor


class InMemoryAssignorRepository:
    def __init__(self) -> None:
        self.items: dict[UUID, Assignor] = {}

    async def create(self, assignor: Assignor) -> None:
        self._check_document(assignor)
        self.items[assignor.id] = deepcopy(assignor)

    async def update(self, assignor: Assignor) -> None:
        if assignor.id in self.items:
            self._check_document(assignor)
            self.items[assignor.id] = deepcopy(assignor)

    async def delete(self, assignor: Assignor) -> None:
        self.items.pop(assignor.id, None)

    async def find_by_id(self, assignor_id: UUID) -> Assignor | None:
        assignor = self.items.get(assignor_id)
        return deepcopy(assignor) if assignor is not None else None

    async def find_by_document(self, document: str) -> Assignor | None:
        for assignor in self.items.values():
            if assignor.document == document:
                return deepcopy(assignor)
        return None

    def _check_document(self, assignor: Assignor) -> None:
        for stored in self.items.values():
            if stored.document == assignor.document and stored.id != assignor.id:
                raise DuplicateAssignorDocument(document=assignor.document)


class InMemoryPayableRepository:
    def __init__(self, assignors: InMemoryAssignorRepository) -> None:
        self.items: dict[UUID, Payable] = {}
        self._assignors = assignors

    async def create(self, payable: Payable) -> None:
        self.items[payable.id] = deepcopy(payable)

    async def update(self, payable: Payable) -> None:
        if payable.id in self.items:
            self.items[payable.id] = deepcopy(payable)

    async def delete(self, payable: Payable) -> None:
        self.items.pop(payable.id, None)

    async def find_by_id(self, payable_id: UUID) -> Payable | None:
        payable = self.items.get(payable_id)
        return deepcopy(payable) if payable is not None else None

    async def find_with_assignor_by_id(
        self, payable_id: UUID
    ) -> PayableWithAssignor | None:
        payable = self.items.get(payable_id)
        if payable is None:
            return None

        assignor = self._assignors.items.get(payable.assignor_id)
        if assignor is None:
            raise MissingAssignorReference(
                payable_id=payable.id, assignor_id=payable.assignor_id
            )

        return PayableWithAssignor.create(payable=payable, assignor=assignor)

    async def exists_for_assignor(self, assignor_id: UUID) -> bool:
        return any(p.assignor_id == assignor_id for p in self.items.values())


class InMemoryUserRepository:
    def __init__(self) -> None:
        self.items: dict[UUID, User] = {}

    async def create(self, user: User) -> None:
        self.items[user.id] = deepcopy(user)

    async def find_by_id(self, user_id: UUID) -> User | None:
        user = self.items.get(user_id)
        return deepcopy(user) if user is not None else None

    async def find_by_login(self, login: str) -> User | None:
        for user in self.items.values():
            if user.login == login.lower():
                return deepcopy(user)
        return None
