"""Exceptions subpackage."""

from notify_composer.exceptions.exceptions import (
    HostError,
    NotifyError,
    UnknownChannelError,
)

__all__ = [
    "HostError",
    "NotifyError",
    "UnknownChannelError",
]
