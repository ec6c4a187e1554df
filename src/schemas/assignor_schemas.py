"""Assignor request/response schemas.

Endpoints:
    POST   /integrations/assignor
    GET    /integrations/assignor/{id}
    PUT    /integrations/assignor/{id}
    DELETE /integrations/assignor/{id}
"""

from pydantic import Field

from src.domain.types import AssignorEmail, Document, PersonName, Phone
from src.schemas.common import CamelModel


class AssignorRequest(CamelModel):
    """Assignor fields (create and full edit).

    Limits: document ≤ 30, email ≤ 140, phone ≤ 20, name ≤ 140 characters.
    """

    document: Document = Field(..., examples=["12345678900"])
    email: AssignorEmail = Field(..., examples=["alice@example.com"])
    phone: Phone = Field(..., examples=["11999999999"])
    name: PersonName = Field(..., examples=["Alice"])


class AssignorResponse(CamelModel):
    """Assignor resource as returned by the API (id stringified)."""

    id: str = Field(..., description="Assignor id")
    document: str
    email: str
    phone: str
    name: str
