"""Configuration subpackage."""

from notify_composer.config.config import (
    AppSettings,
    ChannelSettings,
    FormattingSettings,
    HostSettings,
    LoggingSettings,
    Settings,
    StackingSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "ChannelSettings",
    "FormattingSettings",
    "HostSettings",
    "LoggingSettings",
    "Settings",
    "StackingSettings",
    "get_settings",
]
