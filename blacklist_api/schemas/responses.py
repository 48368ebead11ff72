"""Response Schemas: Pydantic models for every JSON body the API emits.

Invariants:
    - Field names are snake_case in Python, camelCase on the wire
    - Error models document 404/429/500 bodies in the OpenAPI schema only;
      the bodies themselves are built by ApiError.to_response()
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(_CamelModel):
    """Liveness probe payload."""
    status: str = "healthy"
    timestamp: str = Field(description="ISO-8601 UTC, millisecond precision")
    uptime: float = Field(ge=0, description="Seconds since process start")
    service: str


class BlacklistListing(_CamelModel):
    """Every blacklisted name, in configured order."""
    blacklisted_names: list[str]
    count: int


class BlacklistCheck(_CamelModel):
    """Membership result for one submitted name, echoed verbatim."""
    name: str
    is_blacklisted: bool


class NotFoundResponse(_CamelModel):
    error: str
    available_endpoints: list[str]


class RateLimitedResponse(_CamelModel):
    error: str
    retry_after: str


class InternalErrorResponse(_CamelModel):
    error: str
    message: str
