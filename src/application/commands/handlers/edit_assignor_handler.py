"""EditAssignor command handler.

Flow:
1. Load assignor (Failure if unknown)
2. Check the new document does not belong to another assignor
3. Apply edits through the entity (field limits enforced there)
4. Persist via repository
"""

from src.application.commands.assignor_commands import EditAssignor
from src.core.result import Failure, Result, Success
from src.domain.entities.assignor import Assignor
from src.domain.errors import AssignorError, DuplicateAssignorDocument
from src.domain.protocols import AssignorRepository, LoggerProtocol


class EditAssignorHandler:
    """Handler for EditAssignor command."""

    def __init__(
        self,
        assignor_repo: AssignorRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._assignor_repo = assignor_repo
        self._logger = logger

    async def handle(self, cmd: EditAssignor) -> Result[Assignor, str]:
        """Handle EditAssignor command.

        Returns:
            Success(Assignor) with the updated assignor.
            Failure(AssignorError.ASSIGNOR_NOT_FOUND) if the id is unknown.
            Failure(AssignorError.DOCUMENT_ALREADY_REGISTERED) if the new
                document belongs to another assignor.
        """
        assignor = await self._assignor_repo.find_by_id(cmd.assignor_id)
        if assignor is None:
            self._logger.warning(
                "Assignor edit rejected",
                reason=AssignorError.ASSIGNOR_NOT_FOUND,
                assignor_id=str(cmd.assignor_id),
            )
            return Failure(error=AssignorError.ASSIGNOR_NOT_FOUND)

        if cmd.document != assignor.document:
            holder = await self._assignor_repo.find_by_document(cmd.document)
            if holder is not None and holder.id != assignor.id:
                self._logger.warning(
                    "Assignor edit rejected",
                    reason=AssignorError.DOCUMENT_ALREADY_REGISTERED,
                    assignor_id=str(assignor.id),
                )
                return Failure(error=AssignorError.DOCUMENT_ALREADY_REGISTERED)

        edit_result = assignor.edit(
            document=cmd.document,
            email=cmd.email,
            phone=cmd.phone,
            name=cmd.name,
        )
        if isinstance(edit_result, Failure):
            return edit_result

        try:
            await self._assignor_repo.update(assignor)
        except DuplicateAssignorDocument:
            self._logger.warning(
                "Assignor edit rejected",
                reason=AssignorError.DOCUMENT_ALREADY_REGISTERED,
                assignor_id=str(assignor.id),
            )
            return Failure(error=AssignorError.DOCUMENT_ALREADY_REGISTERED)

        self._logger.info("Assignor edited", assignor_id=str(assignor.id))
        return Success(value=assignor)
