"""Configuration management using pydantic-settings."""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Codec settings loaded from environment variables."""

    # RFC 3339 section 5.6 allows "t" and "z" in place of "T" and "Z"
    allow_lowercase_designators: bool = True

    # RFC 3339 also permits a space between date and time for readability
    allow_space_separator: bool = False

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="TIMECODEC_",
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for applications embedding the codec."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
