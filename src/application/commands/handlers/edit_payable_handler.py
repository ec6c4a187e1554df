"""EditPayable command handler.

Flow:
1. Load payable (Failure if unknown)
2. If the owner changes, verify the new assignor exists
3. Apply edits through the entity
4. Persist via repository
"""

from src.application.commands.payable_commands import EditPayable
from src.core.result import Failure, Result, Success
from src.domain.entities.payable import Payable
from src.domain.errors import PayableError
from src.domain.protocols import (
    AssignorRepository,
    LoggerProtocol,
    PayableRepository,
)


class EditPayableHandler:
    """Handler for EditPayable command."""

    def __init__(
        self,
        payable_repo: PayableRepository,
        assignor_repo: AssignorRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._payable_repo = payable_repo
        self._assignor_repo = assignor_repo
        self._logger = logger

    async def handle(self, cmd: EditPayable) -> Result[Payable, str]:
        """Handle EditPayable command.

        Returns:
            Success(Payable) with the updated payable.
            Failure(PayableError.PAYABLE_NOT_FOUND) if the payable is unknown.
            Failure(PayableError.ASSIGNOR_NOT_FOUND) if the new owner is unknown.
        """
        payable = await self._payable_repo.find_by_id(cmd.payable_id)
        if payable is None:
            self._logger.warning(
                "Payable edit rejected",
                reason=PayableError.PAYABLE_NOT_FOUND,
                payable_id=str(cmd.payable_id),
            )
            return Failure(error=PayableError.PAYABLE_NOT_FOUND)

        if cmd.assignor_id != payable.assignor_id:
            assignor = await self._assignor_repo.find_by_id(cmd.assignor_id)
            if assignor is None:
                self._logger.warning(
                    "Payable edit rejected",
                    reason=PayableError.ASSIGNOR_NOT_FOUND,
                    payable_id=str(payable.id),
                    assignor_id=str(cmd.assignor_id),
                )
                return Failure(error=PayableError.ASSIGNOR_NOT_FOUND)

        match payable.edit(
            value=cmd.value,
            emission_date=cmd.emission_date,
            assignor_id=cmd.assignor_id,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case _:
                pass

        await self._payable_repo.update(payable)

        self._logger.info("Payable edited", payable_id=str(payable.id))
        return Success(value=payable)
