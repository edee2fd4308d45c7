"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - build_service_config() is the only bridge from settings to the immutable ServiceConfig

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: runs out-of-the-box in the container (port 3000)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cicd_sample.core.service_config import (
    DEFAULT_MESSAGE, DEFAULT_VERSION, ServiceConfig,
)
from cicd_sample.core.user_directory import UserDirectory


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    app_name: str = "CI/CD Sample Application"
    app_version: str = DEFAULT_VERSION
    welcome_message: str = DEFAULT_MESSAGE

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


def build_service_config(settings: Settings) -> ServiceConfig:
    """Freeze the settings the handlers need, seeded with the default users."""
    return ServiceConfig(
        message=settings.welcome_message,
        version=settings.app_version,
        directory=UserDirectory(),
    )
