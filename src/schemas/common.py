"""Common Pydantic schemas shared across endpoints.

All request and response bodies use camelCase on the wire (emissionDate,
assignorId, accessToken) while Python code keeps snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema with camelCase aliases.

    Requests are accepted in camelCase (snake_case also populates fields);
    FastAPI serializes response models by alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class HealthResponse(BaseModel):
    """Health check response.

    Attributes:
        status: healthy / degraded.
        version: API version.
        database: Database reachability (ok / unavailable).
    """

    status: str = Field(..., description="Health status of the API")
    version: str = Field(..., description="API version")
    database: str = Field(..., description="Database connectivity")

    model_config = {
        "json_schema_extra": {
            "example": {"status": "healthy", "version": "0.1.0", "database": "ok"}
        }
    }
