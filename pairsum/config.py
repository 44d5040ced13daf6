"""Application configuration loaded from ``PAIRSUM_*`` environment variables."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Typed, validated settings for the service and the CLI."""

    model_config = SettingsConfigDict(env_prefix="PAIRSUM_")

    app_name: str = "Pair Partition Total"
    log_level: str = "INFO"
    log_json: bool = False

    # Largest collection accepted by a single HTTP request
    max_pairs: int = Field(default=10000, ge=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Cached settings singleton; usable as a FastAPI dependency."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
