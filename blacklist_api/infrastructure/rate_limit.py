"""Rate Limiting: shared slowapi limiter and the 429 translation.

Invariants:
    - Counters are keyed by client address
    - The general policy is a shared limit: one counter per client across
      every route it decorates (all of them)
    - The blacklist policy stacks under the general one on /blacklisted
    - Limit exceedance is answered with RateLimitedError, never reaches a handler body

Design Decisions:
    - Moving window over fixed window: no burst at window boundaries
    - In-memory storage: a single stateless process, counters need not survive restarts
    - Limits are route decorators, not middleware: enforcement does not
      depend on how the framework nests included routers
    - The limiter is module-level so route decorators can bind to it;
      the on/off toggle is read per request from the serving app's settings
"""

from limits import RateLimitItem
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request

from blacklist_api.config import get_settings
from blacklist_api.core.errors import RateLimitedError

GENERAL_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."
BLACKLIST_LIMIT_MESSAGE = (
    "Too many blacklist requests from this IP, please try again later."
)

_UNITS = (("day", 86_400), ("hour", 3_600), ("minute", 60), ("second", 1))

_settings = get_settings()

limiter = Limiter(key_func=get_remote_address, strategy="moving-window")


def limiting_disabled(request: Request) -> bool:
    """Exempt requests served by an app built with rate limiting off."""
    return not request.app.state.settings.rate_limit_enabled


general_limit = limiter.shared_limit(
    _settings.rate_limit_default,
    scope="general",
    error_message=GENERAL_LIMIT_MESSAGE,
    exempt_when=limiting_disabled,
)

blacklist_limit = limiter.limit(
    _settings.rate_limit_blacklist,
    error_message=BLACKLIST_LIMIT_MESSAGE,
    exempt_when=limiting_disabled,
)


def describe_window(seconds: int) -> str:
    """Render a window length as "15 minutes", "1 minute", "90 seconds"."""
    for unit, size in _UNITS:
        if seconds >= size and seconds % size == 0:
            count = seconds // size
            return f"{count} {unit}" if count == 1 else f"{count} {unit}s"
    return f"{seconds} seconds"


def to_rate_limited_error(exc: RateLimitExceeded) -> RateLimitedError:
    """Translate slowapi's exception into the API error for the exceeded policy."""
    item: RateLimitItem = exc.limit.limit
    window = item.get_expiry()
    message = exc.limit.error_message or GENERAL_LIMIT_MESSAGE
    if callable(message):
        message = message()
    return RateLimitedError(message, describe_window(window), window)
