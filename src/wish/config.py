"""Configuration management for wish."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import LogProfile, configure_logging
from .paths import DEFAULT_SEARCH_PATH

WaitMode = Literal["spawned", "per-command"]


class Settings(BaseSettings):
    """Shell settings."""

    model_config = SettingsConfigDict(
        env_prefix="WISH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default="wish> ", description="Prompt shown when reading from a terminal")
    search_path: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SEARCH_PATH),
        description="Initial directories searched for executables, in order",
    )
    wait_mode: WaitMode = Field(
        default="spawned",
        description="'spawned' waits for each child started on a line; "
        "'per-command' waits once per valid command",
    )
    log_level: str = Field(default="WARNING", description="Log level for diagnostics")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper() or "WARNING"


def get_settings(*, profile: LogProfile = "default") -> Settings:
    """Load settings from the environment and configure logging.

    Args:
        profile: Logging profile, ``"interactive"`` when attached to a terminal.

    Returns:
        Settings instance
    """
    settings = Settings()
    configure_logging(level=settings.log_level, profile=profile)
    return settings
