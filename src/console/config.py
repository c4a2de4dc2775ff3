"""Console configuration, read independently of the API's settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsoleSettings(BaseSettings):
    """
    Donor console settings.

    Environment variables are prefixed with CONSOLE__, e.g. CONSOLE__API_URL=http://api:8000

    api_url: Base URL of the Donor Registry API the console talks to.
    api_prefix: Path prefix the API mounts its routes under.
    timeout: Seconds to wait for any single API call.
    """

    api_url: str = "http://localhost:8000"
    api_prefix: str = "/api"
    timeout: float = 10.0

    model_config = SettingsConfigDict(
        env_prefix="CONSOLE__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_console_settings() -> ConsoleSettings:
    """Get cached console settings instance."""
    return ConsoleSettings()
