"""Application settings and configuration."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Validation
    # allow: unknown keys pass through, ignore: dropped, forbid: reported as issues
    validation_extra_fields: Literal["allow", "ignore", "forbid"] = "allow"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
