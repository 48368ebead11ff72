"""Blacklist Route: list every blacklisted name or check one.

Invariants:
    - Absent or empty `name` → full listing with count
    - Otherwise → {name, isBlacklisted}, name echoed exactly as submitted
    - Never returns 400; the query string is read permissively
    - Strict per-client limit on top of the general one (429 before the body runs)
"""

from fastapi import APIRouter, Request, status

from blacklist_api.core.blacklist import is_blacklisted, list_blacklisted
from blacklist_api.infrastructure.rate_limit import blacklist_limit, general_limit
from blacklist_api.schemas.responses import (
    BlacklistCheck, BlacklistListing, RateLimitedResponse,
)

router = APIRouter(tags=["blacklist"])


@router.get(
    "/blacklisted",
    status_code=status.HTTP_200_OK,
    response_model=BlacklistListing | BlacklistCheck,
    responses={429: {"model": RateLimitedResponse}},
)
@general_limit
@blacklist_limit
async def get_blacklisted(request: Request, name: str | None = None):
    """All blacklisted names, or whether `name` is one of them (case-insensitive)."""
    if not name:
        names = list_blacklisted()
        return BlacklistListing(blacklisted_names=names, count=len(names))

    return BlacklistCheck(name=name, is_blacklisted=is_blacklisted(name))
