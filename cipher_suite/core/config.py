from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """
    Settings shared by the command-line tool and the API.

    Read from ``CIPHER_SUITE_*`` environment variables or a ``.env`` file,
    e.g. ``CIPHER_SUITE_MAX_TEXT_LENGTH=5000``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CIPHER_SUITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Input limits, enforced before any cipher runs
    max_text_length: int = Field(default=100_000, gt=0)

    # Logging
    log_level: LogLevel = "WARNING"

    # API server
    app_name: str = "Cipher Suite"
    app_env: Literal["development", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @property
    def reload(self) -> bool:
        """Auto-reload the server on code changes while developing."""
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
