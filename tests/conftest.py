"""Root conftest: shared test configuration."""

import os

# Pin limits and toggles so a local .env can't change test expectations
os.environ.setdefault("RATE_LIMIT_ENABLED", "true")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "100/15 minutes")
os.environ.setdefault("RATE_LIMIT_BLACKLIST", "20/minute")
os.environ.setdefault("DOCS_ENABLED", "true")
os.environ.setdefault("LOG_FORMAT", "text")
