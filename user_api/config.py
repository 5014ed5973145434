"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings come from environment variables (MONGO_URL), never hardcoded per deploy
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box against a local mongod
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    mongo_url: str = "mongodb://localhost:27017/user_api"

    @field_validator("mongo_url", mode="before")
    @classmethod
    def add_mongo_scheme(cls, v: str) -> str:
        """Accept a bare host:port (docker-compose style) as a mongodb:// URL."""
        if isinstance(v, str) and "://" not in v:
            return f"mongodb://{v}"
        return v

    mongo_database: str = "user_api"
    mongo_collection: str = "users"
    mongo_server_selection_timeout_ms: int = 5000

    # Server
    host: str = "0.0.0.0"
    port: int = 7002

    # API
    api_version: str = "0.0.1"
    docs_enabled: bool = True
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
