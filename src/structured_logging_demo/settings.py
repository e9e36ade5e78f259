"""
structured_logging_demo.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the service.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    All values can be overridden with `SLD_`-prefixed environment variables,
    e.g. `SLD_LOG_LEVEL=DEBUG` or `SLD_BACKGROUND_LOGGER_ENABLED=false`.
    """

    model_config = SettingsConfigDict(env_prefix="SLD_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "structured-logging-demo"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Background emitter (logs outside of any HTTP request)
    background_logger_enabled: bool = True
    background_log_interval_seconds: float = Field(default=10.0, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly instead of going through the cache.
