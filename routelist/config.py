"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default; the service runs with no environment at all
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Route List API"
    app_version: str = "1.0.0"
    environment: str = "development"

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api/table"
    cors_origins: list[str] = [
        "http://localhost:5173", "http://localhost:3000",
    ]

    # Data
    seed_sample_data: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Accept the prefix with or without leading/trailing slashes."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
