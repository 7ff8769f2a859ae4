"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - DATABASE_URL and API_KEY have no defaults: a missing value fails startup
    - Settings are built once and passed explicitly to the gate and the store
    - get_settings() is cached (lru_cache): single instance per process
"""

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    database_url: str

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs use postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("DATABASE_URL must not be empty")
            for prefix in ("postgresql://", "postgres://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_create_tables: bool = False

    # Shared secret for the protected route groups
    api_key: SecretStr

    @field_validator("api_key")
    @classmethod
    def reject_empty_api_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("API_KEY must not be empty")
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    expose_error_details: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
