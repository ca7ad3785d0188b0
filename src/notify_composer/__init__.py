"""Notify composer: compose notification payloads and stack them by group key."""

from notify_composer.config import get_settings
from notify_composer.DI import Container
from notify_composer.models import (
    Action,
    BigPicture,
    BigText,
    Channel,
    Default,
    ExtenderMetadata,
    Header,
    Message,
    MessageItem,
    Meta,
    NotificationRequest,
    Stackable,
    TextList,
)
from notify_composer.notifications import (
    InMemoryNotificationHost,
    NotificationComposer,
    NotificationService,
)

__version__ = "0.1.0"
__all__ = [
    "Action",
    "BigPicture",
    "BigText",
    "Channel",
    "Container",
    "Default",
    "ExtenderMetadata",
    "Header",
    "InMemoryNotificationHost",
    "Message",
    "MessageItem",
    "Meta",
    "NotificationComposer",
    "NotificationRequest",
    "NotificationService",
    "Stackable",
    "TextList",
    "get_settings",
]
