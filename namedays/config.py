"""
Library configuration using pydantic-settings.
Values come from NAMEDAYS_* environment variables or a local .env file.
"""
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NAMEDAYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # "Today" and the default year are taken in this zone
    timezone: str = "Europe/Sofia"

    # Index cache: 0 keeps every year ever queried, N keeps the N most recent
    index_cache_max_years: int = Field(default=0, ge=0)

    # Raise instead of falling back when an entry points at an unknown movable holiday
    strict_catalogue: bool = False

    # Directory holding fixed_entries.json / movable_holidays.json (packaged data when unset)
    data_dir: Optional[str] = None

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {value}")
        return value


@lru_cache()
def get_settings() -> Settings:
    return Settings()
