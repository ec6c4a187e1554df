"""Payable request/response schemas.

Endpoints:
    POST   /integrations/payable        (payable + assignor in one call)
    GET    /integrations/payable/{id}
    PUT    /integrations/payable/{id}
    DELETE /integrations/payable/{id}
"""

from datetime import date
from uuid import UUID

from pydantic import Field

from src.domain.types import PayableValue
from src.schemas.assignor_schemas import AssignorRequest, AssignorResponse
from src.schemas.common import CamelModel


class PayableRequest(CamelModel):
    """Payable fields submitted together with a new assignor."""

    value: PayableValue
    emission_date: date = Field(..., examples=["2024-01-01"])


class PayableUpdateRequest(PayableRequest):
    """Full payable edit, including its owning assignor."""

    assignor_id: UUID = Field(..., description="Owning assignor id")


class PayableResponse(CamelModel):
    """Payable resource as returned by the API."""

    id: str
    assignor_id: str
    emission_date: date
    value: float


class PayableWithAssignorResponse(PayableResponse):
    """Payable resource with the owning assignor embedded."""

    assignor: AssignorResponse


class PayableAndAssignorRequest(CamelModel):
    """Body of POST /integrations/payable.

    Example:
        {
            "payable": {"value": 100, "emissionDate": "2024-01-01"},
            "assignor": {
                "document": "12345678900",
                "email": "a@b.com",
                "phone": "11999999999",
                "name": "Alice"
            }
        }
    """

    payable: PayableRequest
    assignor: AssignorRequest


class PayableAndAssignorResponse(CamelModel):
    """Both created resources; payable.assignorId == assignor.id."""

    payable: PayableResponse
    assignor: AssignorResponse
