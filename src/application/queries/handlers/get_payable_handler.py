"""GetPayable query handler.

Reads a payable together with the public fields of its assignor. A payable
whose assignor row is gone is a data-integrity fault: it is logged at ERROR
level and reported as ASSIGNOR_REFERENCE_MISSING rather than as "not found".
"""

from src.application.queries.payable_queries import GetPayable
from src.core.result import Failure, Result, Success
from src.domain.errors import MissingAssignorReference, PayableError
from src.domain.protocols import LoggerProtocol, PayableRepository
from src.domain.value_objects.payable_with_assignor import PayableWithAssignor


class GetPayableHandler:
    """Handler for GetPayable query."""

    def __init__(
        self,
        payable_repo: PayableRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._payable_repo = payable_repo
        self._logger = logger

    async def handle(self, query: GetPayable) -> Result[PayableWithAssignor, str]:
        """Fetch payable joined with its assignor.

        Returns:
            Success(PayableWithAssignor) if found.
            Failure(PayableError.PAYABLE_NOT_FOUND) if the payable is unknown.
            Failure(PayableError.ASSIGNOR_REFERENCE_MISSING) if its assignor is gone.
        """
        try:
            view = await self._payable_repo.find_with_assignor_by_id(query.payable_id)
        except MissingAssignorReference as e:
            self._logger.error(
                "Payable references a missing assignor",
                error=e,
                payable_id=str(e.payable_id),
                assignor_id=str(e.assignor_id),
            )
            return Failure(error=PayableError.ASSIGNOR_REFERENCE_MISSING)

        if view is None:
            return Failure(error=PayableError.PAYABLE_NOT_FOUND)
        return Success(value=view)
