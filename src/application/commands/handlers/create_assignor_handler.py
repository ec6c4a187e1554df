"""CreateAssignor command handler.

Flow:
1. Check document uniqueness
2. Build Assignor entity (id generated by the caller)
3. Persist via repository
4. Return Success(Assignor)

On business-rule failure:
- Log a warning
- Return Failure(error)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, errors)
- NO infrastructure imports (repository injected via protocol)
"""

from src.application.commands.assignor_commands import CreateAssignor
from src.core.result import Failure, Result, Success
from src.domain.entities.assignor import Assignor
from src.domain.errors import AssignorError, DuplicateAssignorDocument
from src.domain.protocols import AssignorRepository, LoggerProtocol


class CreateAssignorHandler:
    """Handler for CreateAssignor command."""

    def __init__(
        self,
        assignor_repo: AssignorRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            assignor_repo: Assignor repository for persistence.
            logger: Structured logger.
        """
        self._assignor_repo = assignor_repo
        self._logger = logger

    async def handle(self, cmd: CreateAssignor) -> Result[Assignor, str]:
        """Handle CreateAssignor command.

        Args:
            cmd: CreateAssignor command (fields validated by request schema).

        Returns:
            Success(Assignor) with the persisted assignor.
            Failure(AssignorError.DOCUMENT_ALREADY_REGISTERED) on duplicate document.
            Failure(AssignorError.INVALID_*) if a field breaks its limit.
        """
        existing = await self._assignor_repo.find_by_document(cmd.document)
        if existing is not None:
            self._logger.warning(
                "Assignor creation rejected",
                reason=AssignorError.DOCUMENT_ALREADY_REGISTERED,
                existing_assignor_id=str(existing.id),
            )
            return Failure(error=AssignorError.DOCUMENT_ALREADY_REGISTERED)

        try:
            assignor = Assignor(
                id=cmd.assignor_id,
                document=cmd.document,
                email=cmd.email,
                phone=cmd.phone,
                name=cmd.name,
            )
        except ValueError as e:
            self._logger.warning("Assignor creation rejected", reason=str(e))
            return Failure(error=str(e))

        try:
            await self._assignor_repo.create(assignor)
        except DuplicateAssignorDocument:
            self._logger.warning(
                "Assignor creation rejected",
                reason=AssignorError.DOCUMENT_ALREADY_REGISTERED,
                assignor_id=str(assignor.id),
            )
            return Failure(error=AssignorError.DOCUMENT_ALREADY_REGISTERED)

        self._logger.info("Assignor created", assignor_id=str(assignor.id))
        return Success(value=assignor)
