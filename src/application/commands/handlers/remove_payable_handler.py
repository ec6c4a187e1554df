"""RemovePayable command handler."""

from src.application.commands.payable_commands import RemovePayable
from src.core.result import Failure, Result, Success
from src.domain.errors import PayableError
from src.domain.protocols import LoggerProtocol, PayableRepository


class RemovePayableHandler:
    """Handler for RemovePayable command."""

    def __init__(
        self,
        payable_repo: PayableRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._payable_repo = payable_repo
        self._logger = logger

    async def handle(self, cmd: RemovePayable) -> Result[None, str]:
        """Handle RemovePayable command.

        Returns:
            Success(None) once the payable is deleted.
            Failure(PayableError.PAYABLE_NOT_FOUND) if the id is unknown.
        """
        payable = await self._payable_repo.find_by_id(cmd.payable_id)
        if payable is None:
            return Failure(error=PayableError.PAYABLE_NOT_FOUND)

        await self._payable_repo.delete(payable)

        self._logger.info("Payable removed", payable_id=str(payable.id))
        return Success(value=None)
