"""Notification hosts."""

from notify_composer.notifications.hosts.base import BaseNotificationHost
from notify_composer.notifications.hosts.console import ConsoleNotificationHost
from notify_composer.notifications.hosts.in_memory import InMemoryNotificationHost

__all__ = [
    "BaseNotificationHost",
    "ConsoleNotificationHost",
    "InMemoryNotificationHost",
]
