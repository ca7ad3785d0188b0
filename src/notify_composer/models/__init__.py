# -*- coding: utf-8 -*-
"""Domain models."""

from notify_composer.models.metadata import ExtenderMetadata
from notify_composer.models.payload import (
    Action,
    BigPicture,
    BigText,
    Channel,
    Content,
    Default,
    Header,
    Message,
    MessageItem,
    Meta,
    NotificationRequest,
    Stackable,
    TextList,
)
from notify_composer.models.presentation import (
    BigPictureStyle,
    BigTextStyle,
    CollapsedOverrides,
    ConversationStyle,
    HostNotificationSnapshot,
    LineListStyle,
    PresentationRequest,
    Style,
)

__all__ = [
    "Action",
    "BigPicture",
    "BigPictureStyle",
    "BigText",
    "BigTextStyle",
    "Channel",
    "CollapsedOverrides",
    "Content",
    "ConversationStyle",
    "Default",
    "ExtenderMetadata",
    "Header",
    "HostNotificationSnapshot",
    "LineListStyle",
    "Message",
    "MessageItem",
    "Meta",
    "NotificationRequest",
    "PresentationRequest",
    "Stackable",
    "Style",
    "TextList",
]
