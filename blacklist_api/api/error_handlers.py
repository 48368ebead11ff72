"""Error Handlers: global exception handlers mapping failures to JSON bodies.

Invariants:
    - Unmatched path or method → 404 with the available endpoint list
    - RateLimitExceeded → 429 with the exceeded policy's message and window
    - Exception (catch-all) → 500 with the fault message, never a stack trace
    - Every request ends in exactly one of 200, 404, 429, 500

Design Decisions:
    - Framework exceptions are translated into ApiError subclasses first,
      so status, headers and body come from one place
    - 405 is folded into 404: a wrong method on a known path is still
      "no such endpoint" for clients of this API
    - The rate-limit handler is a plain function: slowapi's middleware
      calls it synchronously
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from blacklist_api.core.errors import (
    ApiError, EndpointNotFoundError, InternalFaultError,
)
from blacklist_api.infrastructure.rate_limit import to_rate_limited_error

logger = logging.getLogger(__name__)

_NOT_FOUND_STATUSES = frozenset({404, 405})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def render_error(exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_response(),
        headers=exc.headers or None,
    )


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded,
) -> JSONResponse:
    """Answer a rate-limited request with 429 and the window to wait out."""
    error = to_rate_limited_error(exc)
    logger.warning(
        f"Rate limit exceeded: {exc.detail}",
        extra={
            "error_code": error.code,
            "path": request.url.path,
            "client": request.client.host if request.client else None,
        },
    )
    return render_error(error)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404 / 405)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in _NOT_FOUND_STATUSES:
            error = EndpointNotFoundError(request.url.path, request.method)
            logger.debug(
                "No endpoint matched",
                extra={
                    "error_code": error.code,
                    "path": error.path,
                    "method": error.method,
                },
            )
            return render_error(error)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: log full detail, answer with the message only."""
        error = InternalFaultError(exc)
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"error_code": error.code, "path": request.url.path},
        )
        return render_error(error)
