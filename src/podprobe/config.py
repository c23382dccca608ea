"""Service configuration.

Pydantic BaseSettings read straight from the environment without a prefix,
since the pod spec sets plain names such as PORT and APP_VERSION.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (and an optional .env file)."""

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080

    # App
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    debug: bool = False

    # /fib
    fib_default_n: int = Field(default=10, ge=0)
    fib_max_n: int = Field(default=45, ge=0)

    # /crash
    crash_delay_ms: int = Field(default=100, ge=0)
    crash_exit_code: int = 1

    # /info -- only these variables are surfaced, everything else stays hidden
    info_env_prefixes: list[str] = ["KUBERNETES_", "OPENSHIFT_", "POD_"]
    info_env_names: list[str] = ["HOSTNAME", "HOME", "PATH", "LOG_LEVEL", "APP_VERSION"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""
    return Settings()
