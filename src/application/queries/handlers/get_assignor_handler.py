"""GetAssignor query handler.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[Assignor, str] (explicit error handling)
- Side-effect free
"""

from src.application.queries.assignor_queries import GetAssignor
from src.core.result import Failure, Result, Success
from src.domain.entities.assignor import Assignor
from src.domain.errors import AssignorError
from src.domain.protocols import AssignorRepository


class GetAssignorHandler:
    """Handler for GetAssignor query."""

    def __init__(self, assignor_repo: AssignorRepository) -> None:
        self._assignor_repo = assignor_repo

    async def handle(self, query: GetAssignor) -> Result[Assignor, str]:
        """Fetch assignor by id.

        Returns:
            Success(Assignor) if found.
            Failure(AssignorError.ASSIGNOR_NOT_FOUND) otherwise.
        """
        assignor = await self._assignor_repo.find_by_id(query.assignor_id)
        if assignor is None:
            return Failure(error=AssignorError.ASSIGNOR_NOT_FOUND)
        return Success(value=assignor)
