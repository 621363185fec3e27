"""Application settings loaded from the environment (Pydantic BaseSettings)."""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Runtime settings, overridable through ``HELLO_WORLD_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="HELLO_WORLD_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    debug: bool = False
    log_level: str = "INFO"

    # Empty means no CORS headers at all.
    cors_origins: List[str] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def get_settings() -> Settings:
    return Settings()
