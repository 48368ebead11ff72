"""Error Hierarchy: typed exceptions for the three ways a request can fail.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity, http_status
    - to_response() produces the JSON body sent to the client
    - Only InternalFaultError is a server fault; the others are expected traffic
    - No stack traces in user-facing bodies

Design Decisions:
    - Single hierarchy with ApiError base: handlers translate framework
      exceptions into these, then render uniformly
    - No server-side retries: every error is answered once and forgotten
"""

from enum import Enum

AVAILABLE_ENDPOINTS: tuple[str, ...] = (
    "GET /health",
    "GET /blacklisted",
    "GET /blacklisted?name=<name>",
)


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    CLIENT_NOT_FOUND = "client_not_found"
    RATE_LIMITED = "rate_limited"
    INTERNAL_FAULT = "internal_fault"


class ApiError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.headers = headers or {}

    def to_response(self) -> dict:
        return {"error": self.message}


class EndpointNotFoundError(ApiError):
    """No route matches the request path and method."""
    def __init__(self, path: str = "", method: str = ""):
        super().__init__(
            "Endpoint not found", "ENDPOINT_NOT_FOUND",
            ErrorCategory.CLIENT_NOT_FOUND, ErrorSeverity.INFO, 404,
        )
        self.path = path
        self.method = method

    def to_response(self) -> dict:
        return {
            "error": self.message,
            "availableEndpoints": list(AVAILABLE_ENDPOINTS),
        }


class RateLimitedError(ApiError):
    """Client exceeded a rate-limit policy; it should back off and retry."""
    def __init__(self, message: str, retry_after: str, retry_after_seconds: int):
        super().__init__(
            message, "RATE_LIMITED", ErrorCategory.RATE_LIMITED,
            ErrorSeverity.WARNING, 429,
            headers={"Retry-After": str(retry_after_seconds)},
        )
        self.retry_after = retry_after
        self.retry_after_seconds = retry_after_seconds

    def to_response(self) -> dict:
        return {"error": self.message, "retryAfter": self.retry_after}


class InternalFaultError(ApiError):
    """Uncaught exception while handling a request."""
    def __init__(self, cause: BaseException):
        super().__init__(
            "Internal server error", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL_FAULT, ErrorSeverity.CRITICAL, 500,
        )
        self.cause = cause

    def to_response(self) -> dict:
        return {"error": self.message, "message": str(self.cause)}
