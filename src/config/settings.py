"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file). Only the bot needs a token; the CLI runs without one.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.anchors.schema import ACCEPTED_SELECTORS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telegram_bot_token: str | None = Field(default=None, alias="TELEGRAM_BOT_TOKEN")
    default_corpus: str = Field(default="ramsey", alias="DEFAULT_CORPUS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("default_corpus")
    @classmethod
    def validate_default_corpus(cls, value: str) -> str:
        """Validate that the default corpus is one of the accepted selector tokens.

        Matching is exact, the same as for user-supplied selectors.
        """

        if value not in ACCEPTED_SELECTORS:
            raise ValueError(f"DEFAULT_CORPUS must be one of {{{', '.join(ACCEPTED_SELECTORS)}}}")
        return value

    @model_validator(mode="after")
    def validate_token(self) -> Settings:
        """Treat a blank bot token as unset."""

        if self.telegram_bot_token is not None and not self.telegram_bot_token.strip():
            self.telegram_bot_token = None
        return self


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


def require_bot_token(settings: Settings) -> str:
    """Return the Telegram bot token or raise a clear error."""

    if not settings.telegram_bot_token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is required (set it in .env or environment)")
    return settings.telegram_bot_token
