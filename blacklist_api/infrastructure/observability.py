"""Structured Logging: JSON formatter and setup for operator visibility.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (path, method, client, error_code) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging() installs at most one handler, however often it is called
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("path", "method", "client", "error_code", "port")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _ApiHandler(logging.StreamHandler):
    """Marker subclass so repeated setup can find its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure root logging for the application."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _ApiHandler):
            logging.root.removeHandler(existing)

    handler = _ApiHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
