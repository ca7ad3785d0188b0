# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, STACKING__MAX_LINES.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "notify-composer"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/notify_composer.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class FormattingSettings(BaseSettings):
    """Rich-text markers used in the collapsed and expanded views."""

    model_config = SettingsConfigDict(extra="ignore")

    secondary_color: str = Field(
        default="#3D3D3D",
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Color of the muted span wrapping secondary text.",
    )
    line_break: str = Field(
        default="<br>",
        min_length=1,
        description="Host rich-text line-break marker.",
    )


class StackingSettings(BaseSettings):
    """Stacking policy for merged summaries."""

    model_config = SettingsConfigDict(extra="ignore")

    max_lines: int = Field(
        default=0,
        ge=0,
        le=1000,
        description="Maximum lines retained in a stacked summary (newest kept). 0 disables the cap.",
    )


class ChannelSettings(BaseSettings):
    """Default notification channel (from env CHANNEL__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    default_id: str = "application_notification"
    default_name: str = "Application notifications."
    default_description: str = "General application notifications."
    default_importance: int = Field(default=3, ge=0, le=5)


class HostSettings(BaseSettings):
    """Host backend selection (from env HOST__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    backend: Literal["memory", "console"] = "memory"
    supports_introspection: bool = Field(
        default=True,
        description="Whether the in-memory host exposes its active notifications.",
    )
    strict_channels: bool = Field(
        default=False,
        description="Reject submissions to channels that were never registered.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, STACKING__MAX_LINES.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    formatting: FormattingSettings = Field(default_factory=FormattingSettings)
    stacking: StackingSettings = Field(default_factory=StackingSettings)
    channel: ChannelSettings = Field(default_factory=ChannelSettings)
    host: HostSettings = Field(default_factory=HostSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(stacking={"max_lines": 5})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from notify_composer.config import get_settings

        settings = get_settings()
        cap = settings.stacking.max_lines
    """
    return Settings()
