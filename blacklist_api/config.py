"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - PORT selects the listening port, 3000 when unset
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - Rate limiting and API docs are independent toggles on one app,
      not two parallel server variants
    - Limit strings use the `limits` notation ("20/minute", "100/15 minutes")
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    service_name: str = "blacklisted-mock-api-server"

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_default: str = "100/15 minutes"
    rate_limit_blacklist: str = "20/minute"

    # Docs (/docs, /openapi.json)
    docs_enabled: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only levels both logging and uvicorn understand."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}",
            )
        return level

    @field_validator("log_format")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        return v.strip().lower()


@lru_cache
def get_settings() -> Settings:
    return Settings()
