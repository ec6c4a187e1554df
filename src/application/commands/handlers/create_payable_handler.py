"""CreatePayable command handler.

Flow:
1. Verify the referenced assignor exists
2. Build Payable entity
3. Persist via repository
4. Return Success(Payable)
"""

from src.application.commands.payable_commands import CreatePayable
from src.core.result import Failure, Result, Success
from src.domain.entities.payable import Payable
from src.domain.errors import PayableError
from src.domain.protocols import (
    AssignorRepository,
    LoggerProtocol,
    PayableRepository,
)


class CreatePayableHandler:
    """Handler for CreatePayable command."""

    def __init__(
        self,
        payable_repo: PayableRepository,
        assignor_repo: AssignorRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            payable_repo: Payable repository for persistence.
            assignor_repo: Assignor repository (reference check only).
            logger: Structured logger.
        """
        self._payable_repo = payable_repo
        self._assignor_repo = assignor_repo
        self._logger = logger

    async def handle(self, cmd: CreatePayable) -> Result[Payable, str]:
        """Handle CreatePayable command.

        Returns:
            Success(Payable) with the persisted payable.
            Failure(PayableError.ASSIGNOR_NOT_FOUND) if the assignor is unknown.
            Failure(PayableError.INVALID_VALUE) if value is not finite.
        """
        assignor = await self._assignor_repo.find_by_id(cmd.assignor_id)
        if assignor is None:
            self._logger.warning(
                "Payable creation rejected",
                reason=PayableError.ASSIGNOR_NOT_FOUND,
                assignor_id=str(cmd.assignor_id),
            )
            return Failure(error=PayableError.ASSIGNOR_NOT_FOUND)

        try:
            payable = Payable(
                id=cmd.payable_id,
                assignor_id=assignor.id,
                emission_date=cmd.emission_date,
                value=cmd.value,
            )
        except ValueError as e:
            return Failure(error=str(e))

        await self._payable_repo.create(payable)

        self._logger.info(
            "Payable created",
            payable_id=str(payable.id),
            assignor_id=str(payable.assignor_id),
        )
        return Success(value=payable)
