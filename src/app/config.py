"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class CorsSettings(BaseModel):
    """
    Cross-origin settings for browser consumers of the API.

    All origins are allowed by default, matching a local single-user setup.
    """

    allow_origins: list[str] = ["*"]
    allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE"]
    allow_headers: list[str] = ["*"]


class ServerSettings(BaseModel):
    """Settings used when serving the API with uvicorn."""

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: DATABASE_URL=postgresql+asyncpg://user:pass@db/donors, CORS__ALLOW_ORIGINS=["http://localhost:3000"]
    """

    # Application metadata
    app_name: str = "Donor Registry API"
    app_version: str = "1.0.0"
    api_prefix: str = "/api"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/donors"
    database_echo: bool = False

    # Nested settings groups
    cors: CorsSettings = CorsSettings()
    server: ServerSettings = ServerSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
