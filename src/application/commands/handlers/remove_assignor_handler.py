"""RemoveAssignor command handler.

Refuses to remove an assignor while payables still reference it, so the
payables table never holds dangling references created through the API.
"""

from src.application.commands.assignor_commands import RemoveAssignor
from src.core.result import Failure, Result, Success
from src.domain.errors import AssignorError
from src.domain.protocols import (
    AssignorRepository,
    LoggerProtocol,
    PayableRepository,
)


class RemoveAssignorHandler:
    """Handler for RemoveAssignor command."""

    def __init__(
        self,
        assignor_repo: AssignorRepository,
        payable_repo: PayableRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._assignor_repo = assignor_repo
        self._payable_repo = payable_repo
        self._logger = logger

    async def handle(self, cmd: RemoveAssignor) -> Result[None, str]:
        """Handle RemoveAssignor command.

        Returns:
            Success(None) once the assignor is deleted.
            Failure(AssignorError.ASSIGNOR_NOT_FOUND) if the id is unknown.
            Failure(AssignorError.ASSIGNOR_HAS_PAYABLES) if payables reference it.
        """
        assignor = await self._assignor_repo.find_by_id(cmd.assignor_id)
        if assignor is None:
            return Failure(error=AssignorError.ASSIGNOR_NOT_FOUND)

        if await self._payable_repo.exists_for_assignor(assignor.id):
            self._logger.warning(
                "Assignor removal rejected",
                reason=AssignorError.ASSIGNOR_HAS_PAYABLES,
                assignor_id=str(assignor.id),
            )
            return Failure(error=AssignorError.ASSIGNOR_HAS_PAYABLES)

        await self._assignor_repo.delete(assignor)

        self._logger.info("Assignor removed", assignor_id=str(assignor.id))
        return Success(value=None)
