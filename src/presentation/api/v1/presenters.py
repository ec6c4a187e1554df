"""Presenters: map domain objects to wire schemas.

Pure and side-effect free. Ids are stringified, dates passed through, and
Decimal amounts rendered as JSON numbers.
"""

from src.domain.entities.assignor import Assignor
from src.domain.entities.payable import Payable
from src.domain.value_objects.payable_with_assignor import PayableWithAssignor
from src.schemas.assignor_schemas import AssignorResponse
from src.schemas.payable_schemas import PayableResponse, PayableWithAssignorResponse


class AssignorPresenter:
    """Assignor -> {id, document, email, phone, name}."""

    @staticmethod
    def to_http(assignor: Assignor) -> AssignorResponse:
        return AssignorResponse(
            id=str(assignor.id),
            document=assignor.document,
            email=assignor.email,
            phone=assignor.phone,
            name=assignor.name,
        )


class PayablePresenter:
    """Payable -> {id, assignorId, emissionDate, value}."""

    @staticmethod
    def to_http(payable: Payable) -> PayableResponse:
        return PayableResponse(
            id=str(payable.id),
            assignor_id=str(payable.assignor_id),
            emission_date=payable.emission_date,
            value=float(payable.value),
        )


class PayableWithAssignorPresenter:
    """PayableWithAssignor -> payable fields plus an embedded assignor."""

    @staticmethod
    def to_http(view: PayableWithAssignor) -> PayableWithAssignorResponse:
        return PayableWithAssignorResponse(
            id=str(view.payable_id),
            assignor_id=str(view.assignor_id),
            emission_date=view.emission_date,
            value=float(view.value),
            assignor=AssignorResponse(
                id=str(view.assignor.id),
                document=view.assignor.document,
                email=view.assignor.email,
                phone=view.assignor.phone,
                name=view.assignor.name,
            ),
        )
