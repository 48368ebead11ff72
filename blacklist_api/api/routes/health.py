"""Health Probe: liveness endpoint for external monitors.

Invariants:
    - GET /health always returns 200 if the process is up
    - uptime is measured on the monotonic clock from package import,
      so it never goes backwards
    - timestamp is UTC, millisecond precision, "Z" suffix
    - Counted against the general per-client limit
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status

from blacklist_api.infrastructure.rate_limit import general_limit
from blacklist_api.schemas.responses import HealthResponse, RateLimitedResponse

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


def utc_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def uptime_seconds() -> float:
    return time.monotonic() - _STARTED_AT


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
    responses={429: {"model": RateLimitedResponse}},
)
@general_limit
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        timestamp=utc_timestamp(),
        uptime=uptime_seconds(),
        service=request.app.state.settings.service_name,
    )
